"""API test fixtures: per-test app, store and async HTTP client.

Invariants:
    - Every test gets a fresh app with its own seeded EntityStore
    - Settings built explicitly (no .env), so tests never read local config
"""

import pytest
from httpx import ASGITransport, AsyncClient

from condo_api.main import create_app
from tests.api.helpers import TEST_API_KEY, make_settings


@pytest.fixture
def settings():
    return make_settings()


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
async def client(app):
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
def auth_headers():
    return {"X-API-Key": TEST_API_KEY}
