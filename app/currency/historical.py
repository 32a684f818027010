"""Synthetic historical rate series.

There is no historical data feed behind this: one base rate is drawn per call
and every day gets an independent +/-5% perturbation around it. The series is
illustrative only and differs between calls unless a seeded `rng` is passed.
"""
import random
from dataclasses import dataclass, field
from datetime import date, timedelta
from decimal import Decimal
from typing import Any, List, Optional

from app.currency.engine import round_rate
from app.currency.validation import normalize_currency_code, validate_history_days


BASE_RATE_MIN = 0.5
BASE_RATE_MAX = 2.5
MAX_DAILY_DEVIATION = 0.05


@dataclass(frozen=True)
class HistoricalPoint:
    date: date
    rate: Decimal


@dataclass(frozen=True)
class HistoricalSeries:
    from_currency: str
    to_currency: str
    days: int
    base_rate: Decimal
    points: List[HistoricalPoint] = field(default_factory=list)

    @property
    def period(self) -> str:
        return f"{self.days} days"


def generate(
    from_currency: Any,
    to_currency: Any,
    days: Any,
    rng: Optional[random.Random] = None,
    today: Optional[date] = None,
) -> HistoricalSeries:
    """
    Generate `days + 1` daily points ending today, oldest first.

    Raises:
        InvalidInputError: bad currency codes or days outside 1-365
    """
    source = normalize_currency_code(from_currency, "From currency")
    target = normalize_currency_code(to_currency, "To currency")
    days = validate_history_days(days)

    rng = rng or random.Random()
    today = today or date.today()

    base_rate = Decimal(str(rng.uniform(BASE_RATE_MIN, BASE_RATE_MAX)))

    points = []
    for offset in range(days, -1, -1):
        fluctuation = Decimal(str(rng.uniform(-MAX_DAILY_DEVIATION, MAX_DAILY_DEVIATION)))
        rate = round_rate(base_rate * (1 + fluctuation))
        points.append(HistoricalPoint(date=today - timedelta(days=offset), rate=rate))

    return HistoricalSeries(
        from_currency=source,
        to_currency=target,
        days=days,
        base_rate=base_rate,
        points=points,
    )
