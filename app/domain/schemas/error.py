"""Externally visible error body."""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class ErrorType(str, Enum):
    BAD_REQUEST = "BAD_REQUEST"
    TOO_MANY_REQUESTS = "TOO_MANY_REQUESTS"
    FORBIDDEN = "FORBIDDEN"
    NOT_FOUND = "NOT_FOUND"
    NOT_IMPLEMENTED = "NOT_IMPLEMENTED"
    INTERNAL = "INTERNAL"


class ErrorResource(BaseModel):
    """Error body: a type discriminant and a human-readable message."""

    model_config = ConfigDict(frozen=True)

    type: ErrorType
    message: str
