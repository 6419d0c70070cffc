"""Pytest configuration and fixtures for EstateBot tests."""
import os
from datetime import date

import pytest
import pytest_asyncio

# Must be set before estatebot.core.config is imported
os.environ.setdefault("STORAGE_PROVIDER", "memory")
os.environ.setdefault("JWT_SECRET", "estatebot-test-secret-0123456789abcdef")
os.environ.setdefault("RATE_LIMIT_RPM", "1000")

from httpx import ASGITransport, AsyncClient

from estatebot.core.cache import cache
from estatebot.data.base import PropertyDetails
from estatebot.main import create_app
from estatebot.models.rule_model import RuleBasedModel
from estatebot.services.dialogue_service import DialogueService

FIXED_TODAY = date(2025, 6, 15)


@pytest.fixture(autouse=True)
def clear_rate_limits():
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def fixed_clock():
    return lambda: FIXED_TODAY


@pytest.fixture
def model(fixed_clock) -> RuleBasedModel:
    return RuleBasedModel(clock=fixed_clock)


@pytest.fixture
def dialogue(model) -> DialogueService:
    return DialogueService(model=model)


@pytest.fixture
def bandra_details() -> PropertyDetails:
    """The reference valuation example: new, 2 bed / 2 bath in Bandra."""
    return PropertyDetails(
        location="Bandra, Mumbai",
        square_footage=1000,
        bedrooms=2,
        bathrooms=2,
        year_built=FIXED_TODAY.year,
        additional_features="parking, furnished",
    )


@pytest.fixture
def app(fixed_clock):
    application = create_app()
    application.state.valuation_model.clock = fixed_clock
    return application


@pytest_asyncio.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
