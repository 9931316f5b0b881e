"""Tests for the quote API endpoints."""

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from burn_curve.api import endpoints
from burn_curve.api.main import app
from burn_curve.curve import CURVES, CurveError
from burn_curve.market import MarketError
from burn_curve.safe_int import DivisionByZero, SafeIntError
from tests.helpers import B1, MAX, NAB1, pct


class TestHealthEndpoint:
    """Tests for /health."""

    def test_health_returns_ok(self, client):
        """Health endpoint returns ok status and the version."""
        response = client.get("/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "ok"
        assert data["version"] == "0.1.0"


class TestCurveEndpoint:
    """Tests for /curve."""

    def test_lists_segments(self, client):
        """The table is returned first segment first, amounts as strings."""
        response = client.get("/curve")
        assert response.status_code == 200
        data = response.json()
        assert data["max_token_supply"] == str(MAX)
        assert [s["exponent"] for s in data["segments"]] == [4, 2, 1]
        assert data["segments"][0]["supply_at_boundary"] == str(B1)
        assert data["segments"][0]["native_amount_at_boundary"] == str(NAB1)
        assert data["segments"][2]["native_amount_at_boundary"] == str(
            CURVES[2].native_amount_at_boundary
        )


class TestPriceEndpoint:
    """Tests for /price."""

    def test_launch_price(self, client):
        """Spot price and market cap at full supply."""
        response = client.get("/price", params={"remaining_supply": MAX})
        assert response.status_code == 200
        data = response.json()
        assert data["segment"] == 0
        assert Decimal(data["spot_price"]) == Decimal("2.8E-8")
        assert Decimal(data["market_cap"]) == 28

    def test_zero_supply_rejected(self, client):
        """remaining_supply must be at least 1."""
        response = client.get("/price", params={"remaining_supply": 0})
        assert response.status_code == 422

    def test_missing_supply_rejected(self, client):
        """remaining_supply is required."""
        assert client.get("/price").status_code == 422


class TestQuoteEndpoints:
    """Tests for the /quote endpoints."""

    def test_buy_quote(self, client):
        """The first unit costs one lamport plus a one-lamport fee."""
        response = client.post("/quote/buy", json={"remaining_supply": str(MAX), "amount": "1"})
        assert response.status_code == 200
        assert response.json() == {
            "is_buy": True,
            "token_amount": "1",
            "native_amount": "1",
            "fee": "1",
            "total": "2",
        }

    def test_sell_quote(self, client):
        """Selling back the first segment pays its boundary value less fee."""
        response = client.post(
            "/quote/sell",
            json={"remaining_supply": str(B1), "amount": str(pct(20))},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["is_buy"] is False
        assert data["native_amount"] == str(NAB1)
        assert data["fee"] == "100898438"
        assert data["total"] == str(NAB1 - 100_898_438)

    def test_buy_exact_in_quote(self, client):
        """The first boundary value buys exactly 20%."""
        response = client.post(
            "/quote/buy-exact-in",
            json={"remaining_supply": str(MAX), "pay_amount": str(NAB1)},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["token_amount"] == str(pct(20))
        assert data["native_amount"] == str(NAB1)

    def test_integer_amounts_accepted(self, client):
        """JSON integers are accepted alongside strings."""
        response = client.post("/quote/buy", json={"remaining_supply": MAX, "amount": 1})
        assert response.status_code == 200


class TestQuoteErrors:
    """Engine rejections map to 400, malformed input to 422."""

    def test_buy_whole_supply(self, client):
        """Buying the whole remaining supply is a 400."""
        response = client.post("/quote/buy", json={"remaining_supply": "10", "amount": "10"})
        assert response.status_code == 400
        assert response.json()["error"] == "InvalidSwapAmount"

    def test_price_over_u64(self, client):
        """The last units cost more than u64 holds."""
        response = client.post("/quote/buy", json={"remaining_supply": "2", "amount": "1"})
        assert response.status_code == 400
        data = response.json()
        assert data["error"] == "TooMuchNativeTokenRequired"
        assert data["detail"]

    def test_sell_above_max(self, client):
        """Selling more than was sold is a 400."""
        response = client.post("/quote/sell", json={"remaining_supply": str(MAX), "amount": "1"})
        assert response.status_code == 400
        assert response.json()["error"] == "InvalidSwapAmount"

    def test_non_numeric_amount(self, client):
        """Non-decimal strings fail validation."""
        response = client.post("/quote/buy", json={"remaining_supply": "abc", "amount": "1"})
        assert response.status_code == 422

    def test_over_u64_amount(self, client):
        """Amounts above u64 fail validation."""
        response = client.post(
            "/quote/buy-exact-in",
            json={"remaining_supply": str(MAX), "pay_amount": str(2**64)},
        )
        assert response.status_code == 422

    def test_engine_errors_are_mapped(self):
        """Only curve and market rejections have a 400 handler."""
        assert CurveError in app.exception_handlers
        assert MarketError in app.exception_handlers
        assert SafeIntError not in app.exception_handlers

    def test_arithmetic_fault_is_server_error(self, monkeypatch):
        """A raw arithmetic fault inside the engine is a 500, not a 400."""

        def broken_quote(amount, remaining_supply, is_buy):
            raise DivisionByZero("Division by zero: 1 // 0")

        monkeypatch.setattr(endpoints, "compute_swap_with_fee", broken_quote)
        client = TestClient(app, raise_server_exceptions=False)
        response = client.post("/quote/buy", json={"remaining_supply": str(MAX), "amount": "1"})
        assert response.status_code == 500

    @pytest.mark.parametrize("path", ["/quote/buy", "/quote/sell", "/quote/buy-exact-in"])
    def test_rejection_body_documented(self, client, path):
        """The OpenAPI schema documents the 400 body of every quote route."""
        schema = client.get("/openapi.json").json()
        rejection = schema["paths"][path]["post"]["responses"]["400"]
        ref = rejection["content"]["application/json"]["schema"]["$ref"]
        assert ref.endswith("/ErrorResponse")
        assert set(schema["components"]["schemas"]["ErrorResponse"]["properties"]) == {
            "error",
            "detail",
        }


class TestRequestSizeLimits:
    """Request body size limit."""

    def test_oversized_request_returns_413(self, client):
        """Request with Content-Length exceeding limit returns 413."""
        response = client.post(
            "/quote/buy",
            json={"remaining_supply": str(MAX), "amount": "1"},
            headers={"Content-Length": str(1024 * 1024)},
        )
        assert response.status_code == 413
        assert response.json()["detail"] == "Request too large"
