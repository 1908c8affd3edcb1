"""Teachers API router: GET /teachers/{teacher_id}."""

from typing import Annotated

from fastapi import APIRouter, Depends

from app.api.dependencies import get_caller, get_user_service
from app.application.user_service import UserService
from app.domain.models.user import Caller
from app.domain.schemas.user import TeacherResource

router = APIRouter()


@router.get("/{teacher_id}", response_model=TeacherResource)
async def get_teacher_by_id(
    teacher_id: str,
    caller: Annotated[Caller, Depends(get_caller)],
    user_service: Annotated[UserService, Depends(get_user_service)],
):
    """Teachers read only themselves; students read no teacher."""
    user = await user_service.get_teacher(caller, teacher_id)
    return TeacherResource.from_user(user)
