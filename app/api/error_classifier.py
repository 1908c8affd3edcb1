"""Internal failure -> (HTTP status, ErrorResource). One log record per classified failure."""

import logging
from dataclasses import dataclass
from typing import NamedTuple, Optional

from fastapi.exceptions import RequestValidationError
from sqlalchemy.exc import DBAPIError
from sqlalchemy.orm.exc import StaleDataError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.domain.exceptions import ApiError, FailureKind, ResourceLockUnavailableError
from app.domain.schemas.error import ErrorResource, ErrorType

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"
INVALID_ARGUMENT_MESSAGE = "Invalid request argument"

# SQLSTATE codes of lock contention: lock_not_available, deadlock_detected, serialization_failure.
LOCK_CONTENTION_SQLSTATES = frozenset({"55P03", "40P01", "40001"})


class _Rule(NamedTuple):
    status_code: int
    error_type: ErrorType
    severity: int
    label: str


# Total over FailureKind.
_RULES: dict[FailureKind, _Rule] = {
    FailureKind.BAD_REQUEST: _Rule(400, ErrorType.BAD_REQUEST, logging.INFO, "Bad request"),
    FailureKind.TOO_MANY_REQUESTS: _Rule(429, ErrorType.TOO_MANY_REQUESTS, logging.INFO, "Too many requests"),
    # _not_ 401: that one is for authentication only
    FailureKind.FORBIDDEN: _Rule(403, ErrorType.FORBIDDEN, logging.INFO, "Forbidden"),
    FailureKind.NOT_FOUND: _Rule(404, ErrorType.NOT_FOUND, logging.INFO, "Not found"),
    FailureKind.NOT_IMPLEMENTED: _Rule(501, ErrorType.NOT_IMPLEMENTED, logging.ERROR, "Not implemented"),
    FailureKind.INTERNAL: _Rule(500, ErrorType.INTERNAL, logging.ERROR, "Internal error"),
}


@dataclass(frozen=True)
class Failure:
    """A raised exception reduced to its kind. Only produced by normalize()."""

    kind: FailureKind
    message: str
    label: Optional[str] = None
    severity: Optional[int] = None


@dataclass(frozen=True)
class Classification:
    status_code: int
    body: ErrorResource
    severity: int
    label: str


def _nested_cause_message(exc: BaseException) -> str:
    """Message of the cause's cause, else of the cause, else a generic text."""
    cause = exc.__cause__
    if cause is not None and cause.__cause__ is not None and str(cause.__cause__):
        return str(cause.__cause__)
    if cause is not None and str(cause):
        return str(cause)
    return INVALID_ARGUMENT_MESSAGE


def _validation_failure(exc: RequestValidationError) -> Failure:
    errors = list(exc.errors() or [])
    missing = [e for e in errors if isinstance(e, dict) and e.get("type") == "missing"]
    if missing:
        loc = missing[0].get("loc") or ()
        name = loc[-1] if loc else "unknown"
        source = loc[0] if len(loc) > 1 else "request"
        return Failure(
            FailureKind.BAD_REQUEST,
            f"Required {source} parameter '{name}' is not present",
            label="Missing parameter",
        )
    first = errors[0] if errors and isinstance(errors[0], dict) else {}
    message = first.get("msg") or _nested_cause_message(exc)
    return Failure(FailureKind.BAD_REQUEST, message, label="Conversion failed")


def _http_exception_kind(status_code: int) -> FailureKind:
    if status_code == 404:
        return FailureKind.NOT_FOUND
    if status_code in (401, 403):
        return FailureKind.FORBIDDEN
    if status_code == 429:
        return FailureKind.TOO_MANY_REQUESTS
    if status_code == 501:
        return FailureKind.NOT_IMPLEMENTED
    if 400 <= status_code < 500:
        return FailureKind.BAD_REQUEST
    return FailureKind.INTERNAL


def _is_lock_contention(exc: BaseException) -> bool:
    if isinstance(exc, StaleDataError):
        return True
    if isinstance(exc, DBAPIError):
        orig = exc.orig
        code = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
        return code in LOCK_CONTENTION_SQLSTATES
    return False


class ErrorClassifier:
    """
    Two stages: normalize() is the only place exception types are inspected;
    classify() then dispatches on the closed FailureKind through the rule table.
    """

    @staticmethod
    def normalize(exc: BaseException) -> Failure:
        """Reduce any exception to a Failure. Unknown -> INTERNAL. Never raises."""
        try:
            if isinstance(exc, ResourceLockUnavailableError) or _is_lock_contention(exc):
                return Failure(
                    FailureKind.TOO_MANY_REQUESTS,
                    getattr(exc, "message", None) or "Resource is busy, retry later",
                    label="Database lock could not be acquired: too many requests assumed",
                    severity=logging.WARNING,
                )
            if isinstance(exc, ApiError):
                return Failure(exc.kind, str(exc.message))
            if isinstance(exc, RequestValidationError):
                return _validation_failure(exc)
            if isinstance(exc, StarletteHTTPException):
                return Failure(_http_exception_kind(exc.status_code), str(exc.detail))
        except Exception:
            logger.exception("Failure normalization failed")
        return Failure(FailureKind.INTERNAL, INTERNAL_ERROR_MESSAGE)

    @classmethod
    def classify(cls, exc: BaseException) -> Classification:
        """Pure: map exception to status, body and log severity."""
        failure = cls.normalize(exc)
        rule = _RULES[failure.kind]
        message = INTERNAL_ERROR_MESSAGE if failure.kind is FailureKind.INTERNAL else failure.message
        return Classification(
            status_code=rule.status_code,
            body=ErrorResource(type=rule.error_type, message=message),
            severity=rule.severity if failure.severity is None else failure.severity,
            label=failure.label or rule.label,
        )

    @classmethod
    def handle(cls, exc: BaseException, caller: Optional[str] = None) -> Classification:
        """Classify and emit exactly one log record carrying the original exception and the caller."""
        classification = cls.classify(exc)
        logger.log(
            classification.severity,
            classification.label,
            exc_info=(type(exc), exc, exc.__traceback__),
            extra={"caller": caller},
        )
        return classification
