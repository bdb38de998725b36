"""Search posts use case."""

from pydantic import BaseModel, Field

from mindful.domain.service import PostService, TagService

from .common import PostResponse, build_post_responses


class SearchPostsRequest(BaseModel):
    """Search posts request."""

    query: str = Field(min_length=1)


class SearchPostsUseCase:
    """Use case for case-insensitive search over post titles and content."""

    def __init__(self, post_service: PostService, tag_service: TagService) -> None:
        self.post_service = post_service
        self.tag_service = tag_service

    async def execute(self, request: SearchPostsRequest) -> list[PostResponse]:
        posts = await self.post_service.search_posts(request.query)
        return await build_post_responses(posts, self.tag_service)
