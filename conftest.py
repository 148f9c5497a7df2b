"""Pytest configuration and shared fixtures."""

import pytest

from lib.deeplink.decomposer import decompose
from services.deeplink.config import StoreSettings


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "offline: mark test as offline (no external services)")


# =============================================================================
# Fixtures
# =============================================================================

BOOKING_URL = (
    "https://hotels.example.com/reservation/HOTEL42/"
    "?arrive=2026-03-01&depart=2026-03-03&adults=2&children=0&currency=USD&promo=summer"
    "#room?bedType=king&view=ocean"
)


@pytest.fixture
def booking_url():
    return BOOKING_URL


@pytest.fixture
def parsed_booking():
    """Decomposition of BOOKING_URL."""
    return decompose(BOOKING_URL)


@pytest.fixture
def store_settings():
    """Settings pointing at a fake partner config API."""
    return StoreSettings(
        api_url="http://config.test",
        channel_partner_id="partner-123",
        timeout=5.0,
    )
