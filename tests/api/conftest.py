"""API test fixtures — FastAPI app + httpx client with Settings overridden.

Invariants:
    - Every test gets a fresh app from create_app()
    - get_settings dependency overridden so tests control defaults and limits
"""

import pytest
from httpx import ASGITransport, AsyncClient

from chrono_intervals.config import Settings, get_settings
from chrono_intervals.main import create_app


@pytest.fixture
def test_settings():
    return Settings(max_intervals=500)


@pytest.fixture
async def client(test_settings):
    """FastAPI test client with settings dependency overridden."""
    app = create_app()
    app.dependency_overrides[get_settings] = lambda: test_settings

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
