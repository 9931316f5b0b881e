"""Tests for the u64 wire type and request models."""

import pytest
from pydantic import ValidationError

from burn_curve.fees import SwapQuote
from burn_curve.models import BuyExactInRequest, QuoteResponse, SwapQuoteRequest, validate_u64
from burn_curve.safe_int import U64_MAX


class TestValidateU64:
    """Tests for validate_u64."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (0, "0"),
            ("0", "0"),
            (42, "42"),
            ("42", "42"),
            ("007", "7"),
            (U64_MAX, str(U64_MAX)),
            (str(U64_MAX), str(U64_MAX)),
        ],
    )
    def test_valid(self, value, expected):
        """Ints and decimal strings within range are normalized to strings."""
        assert validate_u64(value) == expected

    @pytest.mark.parametrize(
        "value",
        [-1, "-1", U64_MAX + 1, str(U64_MAX + 1), "1.5", "0x10", "", " 1", "١٢", True, 1.0, None],
    )
    def test_invalid(self, value):
        """Anything else is rejected."""
        with pytest.raises(ValueError):
            validate_u64(value)


class TestRequestModels:
    """Tests for request model parsing."""

    def test_swap_request_ints(self):
        """String fields convert to ints for the engine."""
        request = SwapQuoteRequest(remaining_supply="1000", amount=10)
        assert request.remaining_supply_int == 1000
        assert request.amount_int == 10

    def test_exact_in_request_ints(self):
        """pay_amount converts to int."""
        request = BuyExactInRequest(remaining_supply="5", pay_amount="99")
        assert request.pay_amount_int == 99
        assert request.remaining_supply_int == 5

    def test_missing_field(self):
        """Both fields are required."""
        with pytest.raises(ValidationError):
            SwapQuoteRequest(remaining_supply="1")  # type: ignore[call-arg]


class TestQuoteResponse:
    """Tests for QuoteResponse."""

    def test_from_sell_quote(self):
        """Sell totals subtract the fee."""
        quote = SwapQuote(token_amount=5, native_amount=1000, fee=10, is_buy=False)
        response = QuoteResponse.from_quote(quote)
        assert response.total == "990"
        assert response.is_buy is False
