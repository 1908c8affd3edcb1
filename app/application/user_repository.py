"""User repository protocol. Application layer depends on this; infrastructure implements it."""

from typing import Optional, Protocol

from app.domain.models.user import Role, User


class UserRepository(Protocol):
    """Read access to school members."""

    async def find_by_id(self, user_id: str, role: Role) -> Optional[User]:
        """Return the user with this id and role, or None."""
        ...

    async def find_by_email(self, email: str) -> Optional[User]:
        """Return the user registered under this email, or None."""
        ...
