"""Domain validators. Pure validation functions."""

from app.domain.validators.user_validator import (
    RESOURCE_ID_MAX_LENGTH,
    validate_resource_id,
)

__all__ = [
    "RESOURCE_ID_MAX_LENGTH",
    "validate_resource_id",
]
