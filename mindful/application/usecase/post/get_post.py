"""Get post use case."""

from pydantic import BaseModel

from mindful.domain.service import PostService, TagService
from mindful.domain.value import PostId

from .common import PostResponse, build_post_responses


class GetPostRequest(BaseModel):
    """Get post request."""

    post_id: int


class GetPostUseCase:
    """Use case for fetching a single post with its tags."""

    def __init__(self, post_service: PostService, tag_service: TagService) -> None:
        """Initialize get post use case.

        Args:
            post_service: Post domain service
            tag_service: Tag domain service
        """
        self.post_service = post_service
        self.tag_service = tag_service

    async def execute(self, request: GetPostRequest) -> PostResponse:
        """Execute get post flow.

        Args:
            request: Get post request

        Returns:
            The post with its tags

        Raises:
            NotFoundError: If post not found
        """
        post = await self.post_service.require_post(PostId(request.post_id))
        [response] = await build_post_responses([post], self.tag_service)
        return response
