"""API test fixtures — FastAPI test client wired to the fake upstream.

Invariants:
    - get_directory overridden to use the fixture EmployeeDirectory
    - Lifespan does not run under ASGITransport: app.state.directory stays unset
"""

import pytest
from httpx import ASGITransport, AsyncClient

from directory_facade.api.dependencies import get_directory
from directory_facade.main import app


@pytest.fixture
async def client(directory):
    """FastAPI test client with the directory dependency overridden."""
    app.dependency_overrides[get_directory] = lambda: directory

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
