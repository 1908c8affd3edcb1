"""Pydantic schemas for the school-member API. Camel-case on the wire, no DB or infrastructure."""

from pydantic import BaseModel, ConfigDict, Field

from app.domain.models.user import Role, User


class _MemberResource(BaseModel):
    """Shared wire shape of students and teachers."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    ref: str
    first_name: str = Field(..., alias="firstName")
    last_name: str = Field(..., alias="lastName")
    email: str

    @classmethod
    def from_user(cls, user: User):
        return cls(
            id=user.id,
            ref=user.ref,
            first_name=user.first_name,
            last_name=user.last_name,
            email=user.email,
        )


class StudentResource(_MemberResource):
    """Response schema for a student read."""


class TeacherResource(_MemberResource):
    """Response schema for a teacher read."""


class WhoamiResponse(BaseModel):
    """Identity of the caller as resolved from its bearer token."""

    id: str
    email: str
    role: Role
