"""Domain schemas. Request/response and validation."""

from app.domain.schemas.error import ErrorResource, ErrorType
from app.domain.schemas.user import StudentResource, TeacherResource, WhoamiResponse

__all__ = [
    "ErrorResource",
    "ErrorType",
    "StudentResource",
    "TeacherResource",
    "WhoamiResponse",
]
