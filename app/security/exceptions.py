"""Security-layer exceptions. Typed, no HTTP."""

from app.domain.exceptions import ForbiddenError


class InvalidCredentialsError(ForbiddenError):
    """Raised when the bearer token is missing, rejected, or maps to no known user."""
