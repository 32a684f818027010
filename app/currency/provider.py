"""Exchange rate provider adapter.

Fetches the latest rate table for a base currency from a single upstream
service (exchangerate-api.com by default). No caching and no fallback: every
call is one fresh GET, and any failure surfaces as ProviderUnavailableError.
"""
import logging
import math
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import Dict, Optional

import httpx

from app.config import settings
from app.currency.errors import ProviderUnavailableError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RateTable:
    """Rates quoted against `base` (1 unit of base = rates[code] units of code)."""
    base: str
    date: str
    rates: Dict[str, Decimal] = field(default_factory=dict)


def _parse_rates(raw: dict) -> Dict[str, Decimal]:
    rates: Dict[str, Decimal] = {}
    for code, value in raw.items():
        if isinstance(value, bool) or not isinstance(value, (int, float, str)):
            continue
        try:
            rate = Decimal(str(value))
        except InvalidOperation:
            continue
        if rate.is_finite() and math.isfinite(float(rate)) and float(rate) > 0:
            rates[str(code)] = rate
        else:
            logger.warning(f"Dropping unusable rate for {code}: {value}")
    return rates


def parse_rate_table(base: str, payload: object) -> RateTable:
    """Build a RateTable from the provider's JSON body."""
    if not isinstance(payload, dict) or not isinstance(payload.get("rates"), dict):
        raise ProviderUnavailableError()

    return RateTable(
        base=str(payload.get("base") or base),
        date=str(payload.get("date") or ""),
        rates=_parse_rates(payload["rates"]),
    )


async def _get_json(client: httpx.AsyncClient, url: str, retries: int) -> object:
    last_error: Optional[Exception] = None
    for attempt in range(retries + 1):
        try:
            response = await client.get(url, headers={"Accept": "application/json"})
            response.raise_for_status()
            return response.json()
        except (httpx.HTTPError, ValueError) as e:  # ValueError covers a non-JSON body
            last_error = e
            logger.warning(f"Rate provider request failed (attempt {attempt + 1}/{retries + 1}): {e}")
    raise ProviderUnavailableError() from last_error


async def fetch_rates(
    base: str,
    client: Optional[httpx.AsyncClient] = None,
) -> RateTable:
    """
    Fetch the rate table for `base` from the upstream provider.

    `base` is forwarded verbatim; the provider decides whether it exists.
    Pass `client` to reuse an existing httpx client (tests use a mock transport).

    Raises:
        ProviderUnavailableError: transport failure, non-2xx status or unusable body
    """
    url = settings.EXCHANGE_RATE_API_URL.format(base=base)
    retries = max(settings.RATE_PROVIDER_RETRIES, 0)

    if client is not None:
        payload = await _get_json(client, url, retries)
    else:
        async with httpx.AsyncClient(timeout=settings.RATE_PROVIDER_TIMEOUT_SECONDS) as own_client:
            payload = await _get_json(own_client, url, retries)

    return parse_rate_table(base, payload)
