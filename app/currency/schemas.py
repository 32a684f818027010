"""Currency API schemas.

Response bodies use camelCase keys (lastUpdated, inverseRate, ...) to match
what the converter frontend consumes.
"""
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Dict, List
from pydantic import BaseModel, ConfigDict, Field, field_serializer

from app.currency.engine import ConversionResult, LatestRates
from app.currency.historical import HistoricalSeries


def _iso_utc(value: datetime) -> str:
    return value.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _fixed(value: Decimal) -> str:
    return format(value, "f")


class ConvertRequest(BaseModel):
    """Raw conversion request; the engine owns validation so nothing is coerced here."""
    model_config = ConfigDict(populate_by_name=True)

    amount: Any = None
    from_currency: Any = Field(default=None, alias="from")
    to_currency: Any = Field(default=None, alias="to")


class RatesData(BaseModel):
    base: str
    date: str
    rates: Dict[str, float]
    last_updated: datetime = Field(serialization_alias="lastUpdated")

    @field_serializer('last_updated')
    def serialize_last_updated(self, v: datetime) -> str:
        return _iso_utc(v)

    @classmethod
    def from_result(cls, result: LatestRates) -> "RatesData":
        return cls(
            base=result.base,
            date=result.date,
            rates={code: float(rate) for code, rate in result.rates.items()},
            last_updated=result.last_updated,
        )


class RatesResponse(BaseModel):
    success: bool = True
    data: RatesData


class ConversionData(BaseModel):
    amount: float
    from_currency: str = Field(serialization_alias="from")
    to_currency: str = Field(serialization_alias="to")
    rate: str
    inverse_rate: str = Field(serialization_alias="inverseRate")
    converted_amount: float = Field(serialization_alias="convertedAmount")
    last_updated: datetime = Field(serialization_alias="lastUpdated")

    @field_serializer('last_updated')
    def serialize_last_updated(self, v: datetime) -> str:
        return _iso_utc(v)

    @classmethod
    def from_result(cls, result: ConversionResult) -> "ConversionData":
        return cls(
            amount=float(result.amount),
            from_currency=result.from_currency,
            to_currency=result.to_currency,
            rate=_fixed(result.rate),
            inverse_rate=_fixed(result.inverse_rate),
            converted_amount=float(result.converted_amount),
            last_updated=result.last_updated,
        )


class ConversionResponse(BaseModel):
    success: bool = True
    data: ConversionData


class HistoricalPointData(BaseModel):
    date: date
    rate: float


class HistoricalData(BaseModel):
    from_currency: str = Field(serialization_alias="from")
    to_currency: str = Field(serialization_alias="to")
    period: str
    historical: List[HistoricalPointData]

    @classmethod
    def from_series(cls, series: HistoricalSeries) -> "HistoricalData":
        return cls(
            from_currency=series.from_currency,
            to_currency=series.to_currency,
            period=series.period,
            historical=[
                HistoricalPointData(date=point.date, rate=float(point.rate))
                for point in series.points
            ],
        )


class HistoricalResponse(BaseModel):
    success: bool = True
    data: HistoricalData


class CurrencyInfo(BaseModel):
    name: str
    symbol: str
    flag: str


class SupportedCurrenciesResponse(BaseModel):
    success: bool = True
    data: Dict[str, CurrencyInfo]
    count: int
