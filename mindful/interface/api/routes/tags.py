"""Tag routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from mindful.application.usecase.tag import ListTagsUseCase, TagResponse

router = APIRouter(
    prefix="/tags",
    tags=["tags"],
    route_class=DishkaRoute,
)


@router.get(
    "",
    response_model=list[TagResponse],
    summary="List all available tags",
    description="Get every tag used to categorize posts, ordered by name.",
)
async def list_tags(use_case: FromDishka[ListTagsUseCase]) -> list[TagResponse]:
    """List all available tags.

    Args:
        use_case: List tags use case (injected)

    Returns:
        List of tags
    """
    with logfire.span("api.list_tags"):
        return await use_case.execute()
