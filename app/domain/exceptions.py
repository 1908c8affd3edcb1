"""Failure taxonomy. Pure domain layer, no HTTP and no framework types."""

from enum import Enum


class FailureKind(str, Enum):
    """Closed set of externally visible failure kinds."""

    BAD_REQUEST = "BAD_REQUEST"
    TOO_MANY_REQUESTS = "TOO_MANY_REQUESTS"
    FORBIDDEN = "FORBIDDEN"
    NOT_FOUND = "NOT_FOUND"
    NOT_IMPLEMENTED = "NOT_IMPLEMENTED"
    INTERNAL = "INTERNAL"


class ApiError(Exception):
    """Base for all failures that carry their own kind."""

    kind: FailureKind = FailureKind.INTERNAL

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class BadRequestError(ApiError):
    """Raised when the caller sent malformed or invalid input."""

    kind = FailureKind.BAD_REQUEST


class TooManyRequestsError(ApiError):
    """Raised when the caller exceeded its request budget."""

    kind = FailureKind.TOO_MANY_REQUESTS


class ResourceLockUnavailableError(TooManyRequestsError):
    """Raised when a record lock could not be acquired (lock timeout, version conflict, deadlock)."""


class ForbiddenError(ApiError):
    """Raised when the caller may not perform the request."""

    kind = FailureKind.FORBIDDEN


class NotFoundError(ApiError):
    """Raised when the requested record does not exist."""

    kind = FailureKind.NOT_FOUND


class FeatureNotImplementedError(ApiError):
    """Raised for operations the service does not support yet."""

    kind = FailureKind.NOT_IMPLEMENTED
