"""
Identity routes.
GET /auth/user
"""
from __future__ import annotations

from fastapi import APIRouter

from teamdesk.core.dependencies import CurrentUser
from teamdesk.schemas.user import UserRead

router = APIRouter(prefix="/auth", tags=["Authentication"])


@router.get(
    "/user",
    response_model=UserRead,
    summary="Get the acting user",
)
async def get_auth_user(current_user: CurrentUser) -> UserRead:
    return UserRead.model_validate(current_user)
