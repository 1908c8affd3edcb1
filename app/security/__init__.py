"""Security: access policy between school members, caller identity. No FastAPI."""

from app.security.access_policy import AccessDecision, AccessPolicy, AccessRule
from app.security.exceptions import InvalidCredentialsError
from app.security.identity import (
    CallerProvider,
    IdentityResolver,
    OAuth2IdentityResolver,
    extract_bearer,
)

__all__ = [
    "AccessDecision",
    "AccessPolicy",
    "AccessRule",
    "CallerProvider",
    "IdentityResolver",
    "InvalidCredentialsError",
    "OAuth2IdentityResolver",
    "extract_bearer",
]
