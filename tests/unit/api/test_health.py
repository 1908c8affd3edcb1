"""Tests for GET /health: 200 without credentials, correlation ID in response."""

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_health_returns_200_without_token(client: AsyncClient):
    """GET /health needs no bearer token."""
    r = await client.get("/health")
    assert r.status_code == 200
    data = r.json()
    assert data["status"] == "ok"
    assert "correlation_id" in data
    assert "version" in data


@pytest.mark.asyncio
async def test_health_correlation_id_auto_generated(client: AsyncClient):
    """GET /health returns a correlation_id when not provided."""
    r = await client.get("/health")
    assert r.status_code == 200
    assert len(r.json()["correlation_id"]) > 0
