"""Authentication routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends

from mindful.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
    UserResponse,
)
from mindful.interface.api.security import read_auth_token

router = APIRouter(prefix="/auth", tags=["authentication"], route_class=DishkaRoute)


@router.get("/user", response_model=UserResponse)
async def get_current_user(
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Depends(read_auth_token),
) -> UserResponse:
    """Get the authenticated user.

    The user record is refreshed from the token claims on every call.

    Args:
        get_current_user_use_case: Get current user use case from DI
        auth_token: JWT token from cookie or bearer header

    Returns:
        Current user details

    Raises:
        UnauthenticatedError: If the token is missing or invalid (401)
    """
    return await get_current_user_use_case.execute(
        GetCurrentUserRequest(token=auth_token)
    )
