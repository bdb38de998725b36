"""List the caller's own posts use case."""

from pydantic import BaseModel

from mindful.domain.service import PostService, TagService
from mindful.domain.value import UserId

from .common import PostResponse, build_post_responses


class ListMyPostsRequest(BaseModel):
    """List my posts request."""

    user_id: str


class ListMyPostsUseCase:
    """Use case for listing the authenticated user's posts."""

    def __init__(self, post_service: PostService, tag_service: TagService) -> None:
        self.post_service = post_service
        self.tag_service = tag_service

    async def execute(self, request: ListMyPostsRequest) -> list[PostResponse]:
        """Return the user's posts newest first, anonymous ones included."""
        posts = await self.post_service.list_posts_by_author(UserId(request.user_id))
        return await build_post_responses(posts, self.tag_service, reveal_author=True)
