"""Students API router: GET /students/{student_id}."""

from typing import Annotated

from fastapi import APIRouter, Depends

from app.api.dependencies import get_caller, get_user_service
from app.application.user_service import UserService
from app.domain.models.user import Caller
from app.domain.schemas.user import StudentResource

router = APIRouter()


@router.get("/{student_id}", response_model=StudentResource)
async def get_student_by_id(
    student_id: str,
    caller: Annotated[Caller, Depends(get_caller)],
    user_service: Annotated[UserService, Depends(get_user_service)],
):
    """Students read themselves; teachers read any student."""
    user = await user_service.get_student(caller, student_id)
    return StudentResource.from_user(user)
