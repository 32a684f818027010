"""Error taxonomy for the currency service."""
from enum import Enum


class CurrencyErrorKind(str, Enum):
    """Closed set of failures the currency service can report."""
    INVALID_INPUT = "invalid_input"                  # Never reaches the network
    UNKNOWN_CURRENCY_PAIR = "unknown_currency_pair"  # Provider answered without the target code
    PROVIDER_UNAVAILABLE = "provider_unavailable"    # Transport failure or non-success upstream status


class CurrencyServiceError(Exception):
    """Raised by the currency service with a kind and a caller-facing message."""

    def __init__(self, kind: CurrencyErrorKind, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message

    def __repr__(self) -> str:
        return f"CurrencyServiceError({self.kind.value!r}, {self.message!r})"


class InvalidInputError(CurrencyServiceError):
    def __init__(self, message: str):
        super().__init__(CurrencyErrorKind.INVALID_INPUT, message)


class UnknownCurrencyPairError(CurrencyServiceError):
    def __init__(self, message: str = "Invalid currency codes or conversion not available"):
        super().__init__(CurrencyErrorKind.UNKNOWN_CURRENCY_PAIR, message)


class ProviderUnavailableError(CurrencyServiceError):
    def __init__(self, message: str = "Unable to fetch exchange rates"):
        super().__init__(CurrencyErrorKind.PROVIDER_UNAVAILABLE, message)
