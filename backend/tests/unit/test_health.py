"""Tests for the health check endpoint."""

from __future__ import annotations

import pytest
from httpx import ASGITransport, AsyncClient

from rollcall.main import app


@pytest.fixture
async def client():
    """Create an async test client."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac


@pytest.mark.anyio
async def test_health_returns_200(client: AsyncClient):
    """Health endpoint should return 200 with status fields."""
    response = await client.get("/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["provider"] == "mock"
    assert isinstance(data["version"], str)
    assert isinstance(data["expected_count"], int)


@pytest.mark.anyio
async def test_health_does_not_need_roster(client: AsyncClient):
    """Health must answer even before the lifespan has built the provider."""
    response = await client.get("/health")
    assert response.status_code == 200
    assert "X-Request-ID" in response.headers
