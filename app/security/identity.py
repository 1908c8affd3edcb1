"""Bearer token -> caller identity. The identity provider is an injected collaborator."""

import logging
from typing import Optional, Protocol

import httpx

from app.domain.models.user import Caller, User
from app.security.exceptions import InvalidCredentialsError

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "


def extract_bearer(authorization: Optional[str]) -> str:
    """Return the token of an `Authorization: Bearer <token>` header. Raises InvalidCredentialsError otherwise."""
    if not authorization or not authorization.startswith(BEARER_PREFIX):
        raise InvalidCredentialsError("Bearer token is required")
    token = authorization[len(BEARER_PREFIX):].strip()
    if not token:
        raise InvalidCredentialsError("Bearer token is required")
    return token


class IdentityResolver(Protocol):
    """Resolves a bearer token to the email it was issued for."""

    async def resolve_email(self, bearer: str) -> str: ...


class UserLookup(Protocol):
    async def find_by_email(self, email: str) -> Optional[User]: ...


class OAuth2IdentityResolver:
    """
    Ask the identity provider's userInfo endpoint who owns the token.
    Any rejection, transport failure or missing email claim is an InvalidCredentialsError.
    """

    def __init__(self, userinfo_url: str, timeout_seconds: float = 5.0, client: Optional[httpx.AsyncClient] = None) -> None:
        self._userinfo_url = userinfo_url
        self._timeout = timeout_seconds
        self._client = client

    async def resolve_email(self, bearer: str) -> str:
        headers = {"Authorization": f"{BEARER_PREFIX}{bearer}"}
        try:
            if self._client is not None:
                response = await self._client.get(self._userinfo_url, headers=headers, timeout=self._timeout)
            else:
                async with httpx.AsyncClient(timeout=self._timeout) as client:
                    response = await client.get(self._userinfo_url, headers=headers)
        except httpx.HTTPError as e:
            logger.warning("Identity provider unreachable: %s", e)
            raise InvalidCredentialsError("Bad credentials") from e

        if response.status_code != 200:
            raise InvalidCredentialsError("Bad credentials")
        try:
            payload = response.json()
        except ValueError as e:
            raise InvalidCredentialsError("Bad credentials") from e
        email = payload.get("email") if isinstance(payload, dict) else None
        if not isinstance(email, str) or not email:
            raise InvalidCredentialsError("Bad credentials")
        return email


class CallerProvider:
    """Compose identity resolution and user lookup into the request's Caller."""

    def __init__(self, resolver: IdentityResolver, users: UserLookup) -> None:
        self._resolver = resolver
        self._users = users

    async def from_authorization(self, authorization: Optional[str]) -> Caller:
        bearer = extract_bearer(authorization)
        email = await self._resolver.resolve_email(bearer)
        user = await self._users.find_by_email(email)
        if user is None:
            raise InvalidCredentialsError("Bad credentials")
        return Caller.from_user(user)
