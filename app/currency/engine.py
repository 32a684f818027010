"""Currency conversion engine.

convert() validates its input, fetches one rate table for the source currency
and computes the converted amount, the forward rate and the inverse rate.

Rounding is done independently from the unrounded upstream rate:
    rate            = round(rate, 6)
    inverse_rate    = round(1 / rate, 6)
    converted       = round(amount * rate, 2)
so converted is not necessarily amount * round(rate, 6).
"""
import math
from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import Any, Awaitable, Callable, Dict, Optional

from app.currency import provider
from app.currency.errors import InvalidInputError, UnknownCurrencyPairError
from app.currency.validation import (
    AMOUNT_MESSAGE,
    MISSING_FIELDS_MESSAGE,
    is_blank,
    normalize_currency_code,
    parse_amount,
)


RATE_PLACES = Decimal("0.000001")
AMOUNT_PLACES = Decimal("0.01")

RateFetcher = Callable[[str], Awaitable[provider.RateTable]]


def _quantize(value: Decimal, places: Decimal) -> Decimal:
    # quantize fails once the result needs more digits than the context precision
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, value.adjusted() - places.as_tuple().exponent + 1)
        return value.quantize(places, rounding=ROUND_HALF_UP)


def round_rate(value: Decimal) -> Decimal:
    return _quantize(value, RATE_PLACES)


def round_amount(value: Decimal) -> Decimal:
    return _quantize(value, AMOUNT_PLACES)


def exact_product(a: Decimal, b: Decimal) -> Decimal:
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, len(a.as_tuple().digits) + len(b.as_tuple().digits))
        return a * b


def reciprocal(value: Decimal) -> Decimal:
    """1 / value with enough digits left over for 6 decimal places."""
    with localcontext() as ctx:
        ctx.prec += max(0, -value.adjusted())
        return Decimal(1) / value


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class ConversionResult:
    """Outcome of a single conversion."""
    amount: Decimal
    from_currency: str
    to_currency: str
    rate: Decimal               # 6 dp
    inverse_rate: Decimal       # 6 dp
    converted_amount: Decimal   # 2 dp
    last_updated: datetime      # when this result was assembled, not the upstream quote time


@dataclass(frozen=True)
class LatestRates:
    """A provider rate table stamped with the time it was served."""
    base: str
    date: str
    rates: Dict[str, Decimal]
    last_updated: datetime


async def convert(
    amount: Any,
    from_currency: Any,
    to_currency: Any,
    fetch: Optional[RateFetcher] = None,
) -> ConversionResult:
    """
    Convert `amount` of `from_currency` into `to_currency`.

    All input checks run before the provider is called.

    Raises:
        InvalidInputError: missing fields, non-numeric or non-positive amount, bad codes
        UnknownCurrencyPairError: the rate table has no entry for `to_currency`
        ProviderUnavailableError: the rate table could not be fetched
    """
    if is_blank(amount) or is_blank(from_currency) or is_blank(to_currency):
        raise InvalidInputError(MISSING_FIELDS_MESSAGE)

    parsed_amount = parse_amount(amount)
    source = normalize_currency_code(from_currency, "From currency")
    target = normalize_currency_code(to_currency, "To currency")

    fetch = fetch or provider.fetch_rates
    table = await fetch(source)

    if table is None or target not in table.rates:
        raise UnknownCurrencyPairError()

    raw_rate = table.rates[target]
    converted = exact_product(parsed_amount, raw_rate)

    # the response carries convertedAmount as a JSON number
    if not math.isfinite(float(converted)):
        raise InvalidInputError(AMOUNT_MESSAGE)

    return ConversionResult(
        amount=parsed_amount,
        from_currency=source,
        to_currency=target,
        rate=round_rate(raw_rate),
        inverse_rate=round_rate(reciprocal(raw_rate)),
        converted_amount=round_amount(converted),
        last_updated=utc_now(),
    )


async def latest_rates(base: Any, fetch: Optional[RateFetcher] = None) -> LatestRates:
    """Fetch the current rate table for `base`."""
    code = normalize_currency_code(base)

    fetch = fetch or provider.fetch_rates
    table = await fetch(code)

    return LatestRates(
        base=table.base,
        date=table.date,
        rates=dict(table.rates),
        last_updated=utc_now(),
    )
