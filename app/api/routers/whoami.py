# app/api/routers/whoami.py

from typing import Annotated

from fastapi import APIRouter, Depends

from app.api.dependencies import get_caller
from app.domain.models.user import Caller
from app.domain.schemas.user import WhoamiResponse

router = APIRouter()


@router.get("/whoami", response_model=WhoamiResponse)
async def whoami(caller: Annotated[Caller, Depends(get_caller)]):
    """Return the identity the bearer token resolves to."""
    return WhoamiResponse(id=caller.user_id, email=caller.email, role=caller.role)
