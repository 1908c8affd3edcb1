"""Domain models. Pure business entities."""

from app.domain.models.user import (
    ROLE_RESOURCE_KIND,
    Caller,
    ResourceKind,
    Role,
    User,
)

__all__ = [
    "ROLE_RESOURCE_KIND",
    "Caller",
    "ResourceKind",
    "Role",
    "User",
]
