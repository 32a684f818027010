"""Currency conversion - catalog, rate provider, conversion engine and historical series."""
from app.currency.errors import (
    CurrencyErrorKind,
    CurrencyServiceError,
    InvalidInputError,
    UnknownCurrencyPairError,
    ProviderUnavailableError,
)

__all__ = [
    "CurrencyErrorKind",
    "CurrencyServiceError",
    "InvalidInputError",
    "UnknownCurrencyPairError",
    "ProviderUnavailableError",
]
