"""Post routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, HTTPException, Query, status
from pydantic import Field

from mindful.application.usecase.auth import GetCurrentUserRequest, GetCurrentUserUseCase
from mindful.application.usecase.post import (
    CreatePostRequest,
    CreatePostUseCase,
    DeletePostRequest,
    DeletePostResponse,
    DeletePostUseCase,
    GetPostRequest,
    GetPostUseCase,
    ListMyPostsRequest,
    ListMyPostsUseCase,
    ListPostsRequest,
    ListPostsUseCase,
    PostResponse,
    SearchPostsRequest,
    SearchPostsUseCase,
    SuggestTitlesRequest,
    SuggestTitlesResponse,
    SuggestTitlesUseCase,
)
from mindful.domain.error import DomainError, ValidationError
from mindful.domain.service import JWTService
from mindful.interface.api.schema import APIRequest
from mindful.interface.api.security import read_auth_token

router = APIRouter(prefix="/posts", tags=["posts"], route_class=DishkaRoute)


class CreatePostAPIRequest(APIRequest):
    """API request for creating a post."""

    title: str = Field(min_length=1, max_length=255)
    content: str = Field(min_length=1)
    is_anonymous: bool = False
    tags: list[str] = Field(default_factory=list)


class SuggestTitlesAPIRequest(APIRequest):
    """API request for post title suggestions."""

    tags: list[str] = Field(default_factory=list)


@router.get("", response_model=list[PostResponse])
async def list_posts(
    list_posts_use_case: FromDishka[ListPostsUseCase],
    jwt_service: FromDishka[JWTService],
    limit: int = Query(default=50, ge=1, le=100),
    offset: int = Query(default=0, ge=0),
    auth_token: str | None = Depends(read_auth_token),
) -> list[PostResponse]:
    """List posts, newest first.

    Authentication is optional. Authenticated callers also get their own
    vote on each post as ``userVote``.

    Args:
        list_posts_use_case: List posts use case from DI
        jwt_service: JWT service for optional token verification
        limit: Page size (1-100)
        offset: Number of posts to skip
        auth_token: JWT token from cookie or bearer header

    Returns:
        Posts with their tags
    """
    payload = jwt_service.get_payload_from_token(auth_token)
    request = ListPostsRequest(
        limit=limit,
        offset=offset,
        user_id=payload.sub if payload else None,
    )
    return await list_posts_use_case.execute(request)


@router.get("/my", response_model=list[PostResponse])
async def list_my_posts(
    list_my_posts_use_case: FromDishka[ListMyPostsUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Depends(read_auth_token),
) -> list[PostResponse]:
    """List the caller's own posts, including anonymous ones."""
    user = await get_current_user_use_case.execute(
        GetCurrentUserRequest(token=auth_token)
    )
    return await list_my_posts_use_case.execute(ListMyPostsRequest(user_id=user.id))


@router.get("/search", response_model=list[PostResponse])
async def search_posts(
    search_posts_use_case: FromDishka[SearchPostsUseCase],
    q: str | None = None,
) -> list[PostResponse]:
    """Search posts by title or content (case-insensitive).

    Raises:
        ValidationError: If no query was given (400)
    """
    if not q:
        raise ValidationError("Search query required")
    return await search_posts_use_case.execute(SearchPostsRequest(query=q))


@router.post("/suggestions", response_model=SuggestTitlesResponse)
async def suggest_titles(
    request: SuggestTitlesAPIRequest,
    suggest_titles_use_case: FromDishka[SuggestTitlesUseCase],
) -> SuggestTitlesResponse:
    """Suggest post titles for a set of tags.

    An unavailable language model yields an empty list rather than an error.
    """
    return await suggest_titles_use_case.execute(
        SuggestTitlesRequest(tags=request.tags)
    )


@router.get("/{post_id}", response_model=PostResponse)
async def get_post(
    post_id: int,
    get_post_use_case: FromDishka[GetPostUseCase],
) -> PostResponse:
    """Get a single post.

    Raises:
        NotFoundError: If the post does not exist (404)
    """
    return await get_post_use_case.execute(GetPostRequest(post_id=post_id))


@router.post("", response_model=PostResponse)
async def create_post(
    request: CreatePostAPIRequest,
    create_post_use_case: FromDishka[CreatePostUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Depends(read_auth_token),
) -> PostResponse:
    """Create a new post.

    Requires authentication. Title and content are screened by moderation
    before anything is stored.

    Args:
        request: Post creation data
        create_post_use_case: Create post use case from DI
        get_current_user_use_case: Get current user use case from DI
        auth_token: JWT token from cookie or bearer header

    Returns:
        Created post with its tags

    Raises:
        UnauthenticatedError: If not authenticated (401)
        ContentFlaggedError: If moderation rejects the post (400)
        ValidationError: If a tag name is too long (400)
    """
    user = await get_current_user_use_case.execute(
        GetCurrentUserRequest(token=auth_token)
    )

    try:
        use_case_request = CreatePostRequest(
            title=request.title,
            content=request.content,
            is_anonymous=request.is_anonymous,
            tag_names=request.tags,
            author_id=user.id,
        )
        return await create_post_use_case.execute(use_case_request)
    except DomainError:
        raise
    except Exception as e:
        logfire.error("Unexpected error creating post", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create post",
        )


@router.delete("/{post_id}", response_model=DeletePostResponse)
async def delete_post(
    post_id: int,
    delete_post_use_case: FromDishka[DeletePostUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Depends(read_auth_token),
) -> DeletePostResponse:
    """Delete a post. Only its author may delete it.

    Raises:
        UnauthenticatedError: If not authenticated (401)
        NotAuthorizedError: If the caller is not the author (403)
        NotFoundError: If the post does not exist (404)
    """
    user = await get_current_user_use_case.execute(
        GetCurrentUserRequest(token=auth_token)
    )
    return await delete_post_use_case.execute(
        DeletePostRequest(post_id=post_id, user_id=user.id)
    )
