"""
Tests for the currency conversion engine.

Covers input validation (no upstream call on bad input), rate lookup and the
independent rounding of rate, inverse rate and converted amount.
"""

import pytest
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from unittest.mock import AsyncMock

from app.currency import engine
from app.currency.errors import (
    CurrencyErrorKind,
    CurrencyServiceError,
    InvalidInputError,
    ProviderUnavailableError,
    UnknownCurrencyPairError,
)
from app.currency.provider import RateTable


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def fetch(usd_table):
    """Rate fetcher stub returning the USD table."""
    return AsyncMock(return_value=usd_table)


def _table(base: str, **rates: str) -> RateTable:
    return RateTable(
        base=base,
        date="2026-10-17",
        rates={code: Decimal(value) for code, value in rates.items()},
    )


# =============================================================================
# Successful conversion
# =============================================================================

class TestConvert:
    """Tests for convert()."""

    @pytest.mark.asyncio
    async def test_usd_to_eur_scenario(self, fetch):
        """100 USD at 0.9123456 rounds each figure on its own path."""
        result = await engine.convert(100, "USD", "EUR", fetch=fetch)

        assert result.amount == Decimal("100")
        assert result.from_currency == "USD"
        assert result.to_currency == "EUR"
        assert str(result.rate) == "0.912346"
        assert result.converted_amount == Decimal("91.23")
        assert str(result.inverse_rate) == "1.096076"
        fetch.assert_awaited_once_with("USD")

    @pytest.mark.asyncio
    async def test_converted_amount_uses_unrounded_rate(self):
        """convertedAmount is round(amount * rate, 2), not amount * round(rate, 6)."""
        fetch = AsyncMock(return_value=_table("USD", XYZ="0.1234565"))

        result = await engine.convert(1000000, "USD", "XYZ", fetch=fetch)

        assert result.rate == Decimal("0.123457")
        assert result.converted_amount == Decimal("123456.50")
        assert result.converted_amount != (Decimal(1000000) * result.rate).quantize(Decimal("0.01"))

    @pytest.mark.asyncio
    async def test_inverse_rate_computed_from_unrounded_rate(self):
        fetch = AsyncMock(return_value=_table("USD", ABC="3.0000004"))

        result = await engine.convert(1, "USD", "ABC", fetch=fetch)

        assert result.rate == Decimal("3.000000")
        assert result.inverse_rate == Decimal("0.333333")

    @pytest.mark.asyncio
    async def test_numeric_string_amount_accepted(self, fetch):
        result = await engine.convert("250.5", "USD", "GBP", fetch=fetch)

        assert result.amount == Decimal("250.5")
        assert result.converted_amount == Decimal("197.90")

    @pytest.mark.asyncio
    async def test_codes_normalized_to_upper_case(self, fetch):
        result = await engine.convert(1, " usd", "eur ", fetch=fetch)

        assert result.from_currency == "USD"
        assert result.to_currency == "EUR"
        fetch.assert_awaited_once_with("USD")

    @pytest.mark.asyncio
    async def test_codes_outside_catalog_are_forwarded(self):
        """Any 3-letter code reaches the provider; only the provider decides."""
        fetch = AsyncMock(return_value=_table("XAU", USD="2400.12"))

        result = await engine.convert(1, "XAU", "USD", fetch=fetch)

        assert result.rate == Decimal("2400.120000")
        fetch.assert_awaited_once_with("XAU")

    @pytest.mark.asyncio
    async def test_last_updated_is_assembly_time(self, fetch):
        before = datetime.now(timezone.utc)
        result = await engine.convert(1, "USD", "EUR", fetch=fetch)
        after = datetime.now(timezone.utc)

        assert result.last_updated.tzinfo is not None
        assert before - timedelta(seconds=1) <= result.last_updated <= after + timedelta(seconds=1)

    @pytest.mark.asyncio
    async def test_each_call_fetches_fresh_rates(self, fetch):
        """No caching: repeated identical calls each hit the provider."""
        await engine.convert(1, "USD", "EUR", fetch=fetch)
        await engine.convert(1, "USD", "EUR", fetch=fetch)
        await engine.convert(2, "USD", "EUR", fetch=fetch)

        assert fetch.await_count == 3

    @pytest.mark.asyncio
    async def test_swap_round_trip(self):
        """USD->EUR inverse rate matches EUR->USD rate to 6 decimals."""
        usd = _table("USD", EUR="0.92")
        eur = _table("EUR", USD=str(Decimal(1) / Decimal("0.92")))

        forward = await engine.convert(1, "USD", "EUR", fetch=AsyncMock(return_value=usd))
        backward = await engine.convert(1, "EUR", "USD", fetch=AsyncMock(return_value=eur))

        assert abs(forward.inverse_rate - backward.rate) <= Decimal("0.000001")


# =============================================================================
# Magnitudes beyond the default decimal precision
# =============================================================================

class TestConvertMagnitudes:

    @pytest.mark.asyncio
    @pytest.mark.parametrize("amount", [1e30, "1e30", 10 ** 27])
    async def test_large_amount(self, fetch, amount):
        result = await engine.convert(amount, "USD", "EUR", fetch=fetch)

        assert result.converted_amount == Decimal(str(amount)) * Decimal("0.9123456")
        assert result.converted_amount.as_tuple().exponent == -2
        assert str(result.rate) == "0.912346"

    @pytest.mark.asyncio
    async def test_long_amount_rounds_half_up(self):
        fetch = AsyncMock(return_value=_table("USD", USD="1"))

        result = await engine.convert("123456789012345678901234567890.125", "USD", "USD", fetch=fetch)

        assert result.converted_amount == Decimal("123456789012345678901234567890.13")

    @pytest.mark.asyncio
    async def test_tiny_rate_inverse(self):
        fetch = AsyncMock(return_value=_table("USD", XYZ="1E-30"))

        result = await engine.convert(1, "USD", "XYZ", fetch=fetch)

        assert result.inverse_rate == Decimal("1E+30")
        assert result.inverse_rate.as_tuple().exponent == -6
        assert result.rate == Decimal("0")
        assert result.converted_amount == Decimal("0")

    @pytest.mark.asyncio
    async def test_converted_amount_past_number_range(self, fetch):
        with pytest.raises(InvalidInputError) as exc_info:
            await engine.convert(1e308, "USD", "JPY", fetch=fetch)

        assert exc_info.value.message == "Amount must be a positive number"
        fetch.assert_awaited_once_with("USD")


# =============================================================================
# Validation - nothing reaches the provider
# =============================================================================

class TestConvertValidation:
    """Bad input fails with InvalidInputError before any fetch."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("amount", [-5, 0, "0", "-1.5", "abc", "NaN", "Infinity", True, [1], {"v": 1}, "1e999999999", "-1e400"])
    async def test_invalid_amount(self, fetch, amount):
        with pytest.raises(InvalidInputError) as exc_info:
            await engine.convert(amount, "USD", "EUR", fetch=fetch)

        assert exc_info.value.kind == CurrencyErrorKind.INVALID_INPUT
        assert exc_info.value.message == "Amount must be a positive number"
        fetch.assert_not_called()

    @pytest.mark.asyncio
    async def test_negative_amount_scenario(self, fetch):
        with pytest.raises(CurrencyServiceError) as exc_info:
            await engine.convert(-5, "USD", "EUR", fetch=fetch)

        assert "positive" in exc_info.value.message
        assert fetch.await_count == 0

    @pytest.mark.asyncio
    @pytest.mark.parametrize("amount, source, target", [
        (None, "USD", "EUR"),
        ("", "USD", "EUR"),
        (10, None, "EUR"),
        (10, "USD", None),
        (10, "  ", "EUR"),
    ])
    async def test_missing_fields(self, fetch, amount, source, target):
        with pytest.raises(InvalidInputError) as exc_info:
            await engine.convert(amount, source, target, fetch=fetch)

        assert exc_info.value.message == "Please provide amount, from currency, and to currency"
        fetch.assert_not_called()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("source, target", [
        ("US", "EUR"),
        ("USDX", "EUR"),
        ("U5D", "EUR"),
        ("USD", "E R"),
        ("USD", 978),
    ])
    async def test_malformed_codes(self, fetch, source, target):
        with pytest.raises(InvalidInputError):
            await engine.convert(10, source, target, fetch=fetch)

        fetch.assert_not_called()


# =============================================================================
# Provider outcomes
# =============================================================================

class TestConvertProviderOutcomes:

    @pytest.mark.asyncio
    async def test_unknown_target(self, fetch):
        """A table with plenty of codes but not the target is an unknown pair."""
        with pytest.raises(UnknownCurrencyPairError) as exc_info:
            await engine.convert(10, "USD", "ZZZ", fetch=fetch)

        assert exc_info.value.kind == CurrencyErrorKind.UNKNOWN_CURRENCY_PAIR
        fetch.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_missing_table(self):
        fetch = AsyncMock(return_value=None)

        with pytest.raises(UnknownCurrencyPairError):
            await engine.convert(10, "USD", "EUR", fetch=fetch)

    @pytest.mark.asyncio
    async def test_provider_failure_propagates(self):
        fetch = AsyncMock(side_effect=ProviderUnavailableError())

        with pytest.raises(ProviderUnavailableError) as exc_info:
            await engine.convert(10, "USD", "EUR", fetch=fetch)

        assert exc_info.value.kind == CurrencyErrorKind.PROVIDER_UNAVAILABLE
        assert fetch.await_count == 1


# =============================================================================
# latest_rates
# =============================================================================

class TestLatestRates:

    @pytest.mark.asyncio
    async def test_returns_table_with_timestamp(self, fetch, usd_table):
        result = await engine.latest_rates("usd", fetch=fetch)

        assert result.base == "USD"
        assert result.date == "2026-10-17"
        assert result.rates == usd_table.rates
        assert result.last_updated.tzinfo is not None
        fetch.assert_awaited_once_with("USD")

    @pytest.mark.asyncio
    async def test_malformed_base(self, fetch):
        with pytest.raises(InvalidInputError):
            await engine.latest_rates("DOLLAR", fetch=fetch)

        fetch.assert_not_called()
