"""Get comments use case."""

import logfire
from pydantic import BaseModel

from mindful.domain.service import CommentService
from mindful.domain.value import PostId

from .common import CommentResponse


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    post_id: int


class GetCommentsUseCase:
    """Use case for listing the comments on a post."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize get comments use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: GetCommentsRequest) -> list[CommentResponse]:
        """Execute get comments flow.

        Args:
            request: Get comments request

        Returns:
            Comments on the post, newest first
        """
        with logfire.span("get_comments.execute", post_id=str(request.post_id)):
            comments = await self.comment_service.get_comments_for_post(
                PostId(request.post_id)
            )
            return [CommentResponse.from_comment(comment) for comment in comments]
