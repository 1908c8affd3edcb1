"""Fixtures for API unit tests: in-memory users, stub identity provider, AsyncClient."""

import pytest
from httpx import ASGITransport, AsyncClient

from app.main import app
from app.scalability.rate_limiter import CallerRateLimiter, InMemoryRateLimitBackend
from tests.unit.api.caller_data import USERS, FakeUserRepository, StubIdentityResolver


@pytest.fixture
def user_repository():
    return FakeUserRepository(USERS)


@pytest.fixture
def identity_resolver():
    return StubIdentityResolver()


@pytest.fixture
def rate_limiter():
    return CallerRateLimiter(backend=InMemoryRateLimitBackend(), requests_per_window=100, window_seconds=60)


@pytest.fixture
def app_with_overrides(user_repository, identity_resolver, rate_limiter):
    """App with user store, identity provider and rate limiter overridden for testing."""
    from app.api import dependencies

    app.dependency_overrides[dependencies.get_user_repository] = lambda: user_repository
    app.dependency_overrides[dependencies.get_identity_resolver] = lambda: identity_resolver
    app.dependency_overrides[dependencies.get_rate_limiter] = lambda: rate_limiter
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
async def client(app_with_overrides):
    """Async HTTP client for testing; uses overridden app."""
    transport = ASGITransport(app=app_with_overrides)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
