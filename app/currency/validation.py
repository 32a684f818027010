"""Input normalization for currency requests.

Everything here is pure: it runs before any upstream call and raises
InvalidInputError on bad input.
"""
import math
from decimal import Decimal, InvalidOperation
from typing import Any

from app.currency.errors import InvalidInputError


MISSING_FIELDS_MESSAGE = "Please provide amount, from currency, and to currency"
AMOUNT_MESSAGE = "Amount must be a positive number"

MIN_HISTORY_DAYS = 1
MAX_HISTORY_DAYS = 365


def is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def normalize_currency_code(value: Any, label: str = "Currency") -> str:
    """Return an upper-cased 3-letter code.

    Any alphabetic 3-letter string is accepted; the catalog is not consulted.
    """
    if not isinstance(value, str):
        raise InvalidInputError(f"{label} code must be 3 letters")
    code = value.strip()
    if len(code) != 3 or not code.isascii() or not code.isalpha():
        raise InvalidInputError(f"{label} code must be 3 letters")
    return code.upper()


def parse_amount(value: Any) -> Decimal:
    """Parse a positive, finite amount from a JSON number or numeric string.

    The amount must also fit a JSON number (an IEEE double): anything that
    overflows to infinity or underflows to zero is rejected.
    """
    # bool is an int subclass; true/false are not amounts
    if isinstance(value, bool):
        raise InvalidInputError(AMOUNT_MESSAGE)

    if isinstance(value, (int, float)):
        text = str(value)
    elif isinstance(value, str):
        text = value.strip()
    else:
        raise InvalidInputError(AMOUNT_MESSAGE)

    try:
        amount = Decimal(text)
    except InvalidOperation:
        raise InvalidInputError(AMOUNT_MESSAGE) from None

    if not amount.is_finite() or amount <= 0:
        raise InvalidInputError(AMOUNT_MESSAGE)
    if not math.isfinite(float(amount)) or float(amount) <= 0:
        raise InvalidInputError(AMOUNT_MESSAGE)
    return amount


def validate_history_days(days: Any) -> int:
    """Check the look-back window for a historical series."""
    if isinstance(days, bool) or not isinstance(days, int):
        raise InvalidInputError("Days must be between 1 and 365")
    if days < MIN_HISTORY_DAYS or days > MAX_HISTORY_DAYS:
        raise InvalidInputError("Days must be between 1 and 365")
    return days
