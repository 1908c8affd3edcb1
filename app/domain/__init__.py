"""Domain layer: models, schemas, validators, exceptions. Pure business logic only."""

from app.domain.exceptions import (
    ApiError,
    BadRequestError,
    FailureKind,
    FeatureNotImplementedError,
    ForbiddenError,
    NotFoundError,
    ResourceLockUnavailableError,
    TooManyRequestsError,
)
from app.domain.models import Caller, ResourceKind, Role, User
from app.domain.schemas import (
    ErrorResource,
    ErrorType,
    StudentResource,
    TeacherResource,
    WhoamiResponse,
)
from app.domain.validators import validate_resource_id

__all__ = [
    "ApiError",
    "BadRequestError",
    "Caller",
    "ErrorResource",
    "ErrorType",
    "FailureKind",
    "FeatureNotImplementedError",
    "ForbiddenError",
    "NotFoundError",
    "ResourceKind",
    "ResourceLockUnavailableError",
    "Role",
    "StudentResource",
    "TeacherResource",
    "TooManyRequestsError",
    "User",
    "WhoamiResponse",
    "validate_resource_id",
]
