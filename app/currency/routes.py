"""Currency routes - rates, conversion, historical series and catalog.

Every endpoint requires a bearer token. Handlers are stateless: each call
does its own validation and (at most) one upstream fetch, so the client can
fire debounced or swapped conversions back to back.
"""
import logging
from typing import Optional
from fastapi import APIRouter, Depends, Query

from app.auth.dependencies import get_current_user
from app.config import settings
from app.currency import engine, historical
from app.currency import schemas
from app.currency.catalog import list_supported
from app.data.users.models import User

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/rates/{base}", response_model=schemas.RatesResponse)
async def get_exchange_rates(
    base: str,
    current_user: User = Depends(get_current_user),
):
    """Get the latest rate table for a base currency."""
    result = await engine.latest_rates(base)
    return schemas.RatesResponse(data=schemas.RatesData.from_result(result))


@router.post("/convert", response_model=schemas.ConversionResponse)
async def convert_currency(
    data: schemas.ConvertRequest,
    current_user: User = Depends(get_current_user),
):
    """Convert an amount between two currencies at the latest rate."""
    result = await engine.convert(data.amount, data.from_currency, data.to_currency)
    logger.debug(
        f"Converted {result.amount} {result.from_currency} -> {result.to_currency} for {current_user.id}"
    )
    return schemas.ConversionResponse(data=schemas.ConversionData.from_result(result))


@router.get("/historical/{from_currency}/{to_currency}", response_model=schemas.HistoricalResponse)
async def get_historical_rates(
    from_currency: str,
    to_currency: str,
    days: Optional[int] = Query(default=None, description="Look-back window in days (1-365)"),
    current_user: User = Depends(get_current_user),
):
    """
    Get a daily rate series for a currency pair.

    The series is synthetic (generated per request), not market history.
    """
    if days is None:
        days = settings.HISTORICAL_DEFAULT_DAYS
    series = historical.generate(from_currency, to_currency, days)
    return schemas.HistoricalResponse(data=schemas.HistoricalData.from_series(series))


@router.get("/supported", response_model=schemas.SupportedCurrenciesResponse)
async def get_supported_currencies(current_user: User = Depends(get_current_user)):
    """List the currencies offered by the converter."""
    currencies = list_supported()
    return schemas.SupportedCurrenciesResponse(data=currencies, count=len(currencies))
