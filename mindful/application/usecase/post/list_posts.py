"""List posts use case."""

import logfire
from pydantic import BaseModel, Field

from mindful.domain.service import PostService, TagService, VoteService
from mindful.domain.value import UserId

from .common import PostResponse, build_post_responses


class ListPostsRequest(BaseModel):
    """List posts request."""

    limit: int = Field(default=50, ge=1, le=100)
    offset: int = Field(default=0, ge=0)
    user_id: str | None = None  # Current user ID (if authenticated)


class ListPostsUseCase:
    """Use case for listing posts newest first with pagination."""

    def __init__(
        self,
        post_service: PostService,
        tag_service: TagService,
        vote_service: VoteService,
    ) -> None:
        """Initialize list posts use case.

        Args:
            post_service: Post domain service
            tag_service: Tag domain service
            vote_service: Vote domain service
        """
        self.post_service = post_service
        self.tag_service = tag_service
        self.vote_service = vote_service

    async def execute(self, request: ListPostsRequest) -> list[PostResponse]:
        """Execute list posts flow.

        Args:
            request: List posts request with pagination

        Returns:
            Posts with tags, and the caller's votes when authenticated
        """
        with logfire.span(
            "list_posts.execute",
            limit=request.limit,
            offset=request.offset,
            authenticated=request.user_id is not None,
        ):
            posts = await self.post_service.list_posts(
                limit=request.limit, offset=request.offset
            )

            # Get user's votes for these posts (if authenticated)
            user_votes = None
            if request.user_id and posts:
                user_votes = await self.vote_service.get_user_votes_for_posts(
                    UserId(request.user_id),
                    [post.id for post in posts if post.id is not None],
                )

            return await build_post_responses(posts, self.tag_service, user_votes)
