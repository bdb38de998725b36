"""Comment routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends
from pydantic import Field

from mindful.application.usecase.auth import GetCurrentUserRequest, GetCurrentUserUseCase
from mindful.application.usecase.comment import (
    CommentResponse,
    CreateCommentRequest,
    CreateCommentUseCase,
    GetCommentsRequest,
    GetCommentsUseCase,
)
from mindful.interface.api.schema import APIRequest
from mindful.interface.api.security import read_auth_token

router = APIRouter(prefix="/posts", tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(APIRequest):
    """API request for creating a comment."""

    content: str = Field(min_length=1, max_length=10000)
    parent_id: int | None = None


@router.get("/{post_id}/comments", response_model=list[CommentResponse])
async def get_comments(
    post_id: int,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
) -> list[CommentResponse]:
    """List a post's comments, newest first."""
    return await get_comments_use_case.execute(GetCommentsRequest(post_id=post_id))


@router.post("/{post_id}/comments", response_model=CommentResponse)
async def create_comment(
    post_id: int,
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Depends(read_auth_token),
) -> CommentResponse:
    """Comment on a post, optionally replying to another comment.

    Raises:
        UnauthenticatedError: If not authenticated (401)
        NotFoundError: If the post does not exist (404)
        ValidationError: If the parent comment is not on this post (400)
        ContentFlaggedError: If moderation rejects the comment (400)
    """
    user = await get_current_user_use_case.execute(
        GetCurrentUserRequest(token=auth_token)
    )
    return await create_comment_use_case.execute(
        CreateCommentRequest(
            post_id=post_id,
            content=request.content,
            parent_id=request.parent_id,
            author_id=user.id,
        )
    )
