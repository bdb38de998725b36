"""Analytics routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends

from mindful.application.usecase.analytics import (
    GetAnalyticsUseCase,
    PostAnalyticsResponse,
    TagAnalyticsItem,
    UserAnalyticsResponse,
)
from mindful.application.usecase.auth import GetCurrentUserRequest, GetCurrentUserUseCase
from mindful.interface.api.security import read_auth_token

router = APIRouter(prefix="/analytics", tags=["analytics"], route_class=DishkaRoute)


async def _authenticate(
    get_current_user_use_case: GetCurrentUserUseCase, auth_token: str | None
) -> None:
    await get_current_user_use_case.execute(GetCurrentUserRequest(token=auth_token))


@router.get("/posts", response_model=PostAnalyticsResponse)
async def post_analytics(
    analytics_use_case: FromDishka[GetAnalyticsUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Depends(read_auth_token),
) -> PostAnalyticsResponse:
    """Total and recent post counts with growth percentage."""
    await _authenticate(get_current_user_use_case, auth_token)
    return await analytics_use_case.posts()


@router.get("/tags", response_model=list[TagAnalyticsItem])
async def tag_analytics(
    analytics_use_case: FromDishka[GetAnalyticsUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Depends(read_auth_token),
) -> list[TagAnalyticsItem]:
    """Most used tags by number of linked posts."""
    await _authenticate(get_current_user_use_case, auth_token)
    return await analytics_use_case.tags()


@router.get("/users", response_model=UserAnalyticsResponse)
async def user_analytics(
    analytics_use_case: FromDishka[GetAnalyticsUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Depends(read_auth_token),
) -> UserAnalyticsResponse:
    """Total and recently active user counts with growth percentage."""
    await _authenticate(get_current_user_use_case, auth_token)
    return await analytics_use_case.users()
