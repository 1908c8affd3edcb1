"""Tests for API middleware: correlation ID propagation, failures answered as ErrorResource."""

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_correlation_id_generated(client: AsyncClient):
    """When X-Correlation-ID is not sent, response has a generated correlation ID."""
    r = await client.get("/health")
    assert r.status_code == 200
    assert len(r.headers["X-Correlation-ID"]) > 0


@pytest.mark.asyncio
async def test_correlation_id_preserved_when_passed(client: AsyncClient):
    """When X-Correlation-ID is sent, the same value is returned in response."""
    correlation_id = "my-correlation-123"
    r = await client.get("/health", headers={"X-Correlation-ID": correlation_id})
    assert r.headers.get("X-Correlation-ID") == correlation_id
    assert r.json()["correlation_id"] == correlation_id


@pytest.mark.asyncio
async def test_correlation_id_on_error_responses(client: AsyncClient):
    """Failures still carry the correlation header."""
    r = await client.get("/students/student1_id", headers={"X-Correlation-ID": "corr-err"})
    assert r.status_code == 403
    assert r.headers.get("X-Correlation-ID") == "corr-err"


@pytest.mark.asyncio
async def test_unknown_route_is_not_found_error_resource(client: AsyncClient):
    r = await client.get("/no/such/route")
    assert r.status_code == 404
    assert r.json()["type"] == "NOT_FOUND"
    assert "message" in r.json()


@pytest.mark.asyncio
async def test_method_not_allowed_is_bad_request(client: AsyncClient):
    """Routing errors outside the failure table fold into BAD_REQUEST."""
    r = await client.delete("/health")
    assert r.status_code == 400
    assert r.json()["type"] == "BAD_REQUEST"
