"""DB-backed user repository. Reads school members from PostgreSQL (users table)."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.domain.models.user import Role, User
from app.infrastructure.database.models import UserModel


def _to_domain(orm: UserModel) -> User:
    return User(
        id=orm.id,
        ref=orm.ref,
        email=orm.email,
        first_name=orm.first_name,
        last_name=orm.last_name,
        role=Role(orm.role),
    )


class DbUserRepository:
    """Implements UserRepository protocol over an AsyncSession."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, user_id: str, role: Role) -> Optional[User]:
        stmt = select(UserModel).where(
            UserModel.id == user_id,
            UserModel.role == role.value,
            UserModel.is_deleted == False,
        )
        result = await self._session.execute(stmt)
        orm = result.scalar_one_or_none()
        return _to_domain(orm) if orm is not None else None

    async def find_by_email(self, email: str) -> Optional[User]:
        stmt = select(UserModel).where(
            UserModel.email == email,
            UserModel.is_deleted == False,
        )
        result = await self._session.execute(stmt)
        orm = result.scalar_one_or_none()
        return _to_domain(orm) if orm is not None else None
