"""Root conftest — shared fixtures for all tests."""

from collections.abc import Iterator
from pathlib import Path

import pytest
from dotenv import load_dotenv

from models.products import ProductOffer
from paywall.config import Settings, get_settings
from tests.helpers import make_discount, make_offer

# Load .env at the root so local PAYWALL_* overrides apply to the suite.
load_dotenv(Path(__file__).resolve().parent.parent / ".env", override=False)


@pytest.fixture(autouse=True)
def _fresh_settings() -> Iterator[None]:
    """Drop the cached Settings so env changes in one test don't leak."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings() -> Settings:
    """Default settings, ignoring any local .env file."""
    return Settings(_env_file=None)  # type: ignore[call-arg]


@pytest.fixture
def yearly_offer() -> ProductOffer:
    """$29.99 per year, no discount."""
    return make_offer()


@pytest.fixture
def monthly_trial_offer() -> ProductOffer:
    """$9.99 per month with a one-week free trial."""
    return make_offer("9.99", "$9.99", "MONTH", discount=make_discount())
