"""FastAPI dependency injection: DB session, user repository, identity resolver, rate limiter, caller, UserService."""

import logging
from typing import Annotated, Optional

from fastapi import Depends, Header, Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.user_repository import UserRepository
from app.application.user_service import UserService
from app.config.settings import get_settings
from app.domain.models.user import Caller
from app.infrastructure.cache.redis_client import RedisClient
from app.infrastructure.database.session import get_db
from app.infrastructure.database.user_repository_db import DbUserRepository
from app.scalability.rate_limiter import CallerRateLimiter, InMemoryRateLimitBackend
from app.security.access_policy import AccessPolicy
from app.security.identity import CallerProvider, IdentityResolver, OAuth2IdentityResolver

_identity_resolver: IdentityResolver | None = None
_rate_limiter: CallerRateLimiter | None = None
_access_policy = AccessPolicy()


def get_identity_resolver() -> IdentityResolver:
    """Return singleton identity resolver."""
    global _identity_resolver
    if _identity_resolver is None:
        settings = get_settings()
        _identity_resolver = OAuth2IdentityResolver(
            userinfo_url=settings.identity_provider_url,
            timeout_seconds=settings.identity_provider_timeout_seconds,
        )
    return _identity_resolver


def get_rate_limiter() -> CallerRateLimiter:
    """Return singleton rate limiter on the configured backend."""
    global _rate_limiter
    if _rate_limiter is None:
        settings = get_settings()
        backend = RedisClient() if settings.rate_limit_backend == "redis" else InMemoryRateLimitBackend()
        _rate_limiter = CallerRateLimiter(
            backend=backend,
            requests_per_window=settings.rate_limit_requests,
            window_seconds=settings.rate_limit_window_seconds,
        )
    return _rate_limiter


def get_access_policy() -> AccessPolicy:
    return _access_policy


def get_user_repository(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> UserRepository:
    return DbUserRepository(session=db)


async def get_caller(
    request: Request,
    resolver: Annotated[IdentityResolver, Depends(get_identity_resolver)],
    repository: Annotated[UserRepository, Depends(get_user_repository)],
    rate_limiter: Annotated[CallerRateLimiter, Depends(get_rate_limiter)],
    authorization: Annotated[Optional[str], Header()] = None,
) -> Caller:
    """Resolve the bearer token to a Caller, then charge the caller's rate limit."""
    caller = await CallerProvider(resolver, repository).from_authorization(authorization)
    request.state.caller = caller
    await rate_limiter.check(caller.email)
    return caller


def get_user_service(
    repository: Annotated[UserRepository, Depends(get_user_repository)],
    access_policy: Annotated[AccessPolicy, Depends(get_access_policy)],
) -> UserService:
    return UserService(
        repository=repository,
        access_policy=access_policy,
        logger=logging.getLogger(__name__),
    )
