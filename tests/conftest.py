"""Pytest configuration and fixtures."""

import pytest
from fastapi.testclient import TestClient

from burn_curve.api.main import app
from burn_curve.market import Market


@pytest.fixture
def market() -> Market:
    """Fresh market at full supply, transfer hook disabled."""
    return Market(symbol="TEST")


@pytest.fixture
def hooked_market() -> Market:
    """Fresh market at full supply with the transfer hook enabled."""
    return Market(symbol="HOOKED", transfer_hook_enabled=True)


@pytest.fixture
def client() -> TestClient:
    """Test client for the quote API."""
    return TestClient(app)
