"""Domain model for school members. Pure business semantics, no ORM or infrastructure."""

from dataclasses import dataclass
from enum import Enum


class Role(str, Enum):
    """Role a user holds in the school."""

    STUDENT = "STUDENT"
    TEACHER = "TEACHER"


class ResourceKind(str, Enum):
    """Kind of record a caller may request."""

    STUDENT = "STUDENT"
    TEACHER = "TEACHER"


# A user of a given role owns records of the matching kind.
ROLE_RESOURCE_KIND: dict[Role, ResourceKind] = {
    Role.STUDENT: ResourceKind.STUDENT,
    Role.TEACHER: ResourceKind.TEACHER,
}


@dataclass(frozen=True)
class User:
    """A student or a teacher."""

    id: str
    ref: str
    email: str
    first_name: str
    last_name: str
    role: Role


@dataclass(frozen=True)
class Caller:
    """Authenticated actor of the current request."""

    user_id: str
    email: str
    role: Role

    @classmethod
    def from_user(cls, user: User) -> "Caller":
        return cls(user_id=user.id, email=user.email, role=user.role)
