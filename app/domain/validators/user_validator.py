"""Validators for school-member requests. Pure functions, no infrastructure or DB access."""

import re

from app.domain.exceptions import BadRequestError

# Identifier bounds (domain constant; avoid magic numbers)
RESOURCE_ID_MAX_LENGTH = 64
_RESOURCE_ID_PATTERN = re.compile(r"^[A-Za-z0-9_-]+$")


def validate_resource_id(resource_id: str, field: str = "id") -> None:
    """Enforce identifier shape: non-empty, bounded, URL-safe. Raises BadRequestError if invalid."""
    if not resource_id or not resource_id.strip():
        raise BadRequestError(f"{field} must not be empty")
    if len(resource_id) > RESOURCE_ID_MAX_LENGTH:
        raise BadRequestError(
            f"{field} must be at most {RESOURCE_ID_MAX_LENGTH} characters, got {len(resource_id)}"
        )
    if not _RESOURCE_ID_PATTERN.match(resource_id):
        raise BadRequestError(f"{field} contains invalid characters: {resource_id!r}")
