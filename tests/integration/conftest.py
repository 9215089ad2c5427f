"""
Shared fixtures for integration tests.

Requests go straight to the ASGI app through httpx; no server is started.

Example:
    @pytest.mark.asyncio
    async def test_something(client):
        response = await client.post("/api/calculate-risk", json={...})
        assert response.status_code == 200
"""

import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from risk_api.main import app


# All API routes are prefixed with this. Use it in your tests!
API_PREFIX = "/api"


@pytest_asyncio.fixture
async def client():
    """Async test client bound to the FastAPI app."""
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as ac:
        yield ac
