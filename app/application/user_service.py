"""Application service for reading school members. Access is checked before any lookup."""

import logging
from typing import Optional

from app.application.user_repository import UserRepository
from app.domain.exceptions import NotFoundError
from app.domain.models.user import Caller, ResourceKind, Role, User
from app.domain.validators.user_validator import validate_resource_id
from app.security.access_policy import AccessPolicy

_KIND_ROLE: dict[ResourceKind, Role] = {
    ResourceKind.STUDENT: Role.STUDENT,
    ResourceKind.TEACHER: Role.TEACHER,
}


class UserService:
    """
    Orchestrates: validate id -> AccessPolicy -> repository.
    A FORBIDDEN decision short-circuits before any lookup.
    """

    def __init__(
        self,
        repository: UserRepository,
        access_policy: AccessPolicy,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._repository = repository
        self._access_policy = access_policy
        self._logger = logger or logging.getLogger(__name__)

    async def get_student(self, caller: Caller, student_id: str) -> User:
        return await self._get(caller, ResourceKind.STUDENT, student_id)

    async def get_teacher(self, caller: Caller, teacher_id: str) -> User:
        return await self._get(caller, ResourceKind.TEACHER, teacher_id)

    async def _get(self, caller: Caller, kind: ResourceKind, target_id: str) -> User:
        validate_resource_id(target_id, field=f"{kind.value.lower()}_id")
        self._access_policy.check_access(caller, kind, target_id)
        user = await self._repository.find_by_id(target_id, _KIND_ROLE[kind])
        if user is None:
            raise NotFoundError(f"{kind.value.capitalize()}.{target_id} is not found")
        self._logger.debug("caller %s read %s %s", caller.user_id, kind.value, target_id)
        return user
