"""Create comment use case."""

import logfire
from pydantic import BaseModel, Field

from mindful.application.usecase.base import BaseUseCase
from mindful.domain.repository import UnitOfWork
from mindful.domain.service import AssistantService, CommentService, PostService
from mindful.domain.value import CommentId, PostId, UserId

from .common import CommentResponse

FLAGGED_COMMENT_MESSAGE = "Comment violates community guidelines"


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    post_id: int
    content: str = Field(min_length=1, max_length=10000)
    parent_id: int | None = None
    author_id: str  # User ID from authenticated user


class CreateCommentUseCase(BaseUseCase):
    """Use case for commenting on a post."""

    def __init__(
        self,
        comment_service: CommentService,
        post_service: PostService,
        assistant_service: AssistantService,
        unit_of_work: UnitOfWork,
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            post_service: Post domain service
            assistant_service: Assistant domain service (moderation)
            unit_of_work: Transaction boundary
        """
        self.comment_service = comment_service
        self.post_service = post_service
        self.assistant_service = assistant_service
        self.unit_of_work = unit_of_work

    async def execute(self, request: CreateCommentRequest) -> CommentResponse:
        """Execute comment creation flow.

        Steps:
        1. Verify the post exists
        2. Screen the content with the moderation model
        3. Save the comment (validating the parent)
        4. Atomically increment the post's comment count
        5. Commit

        Args:
            request: Create comment request

        Returns:
            The created comment

        Raises:
            NotFoundError: If post not found
            ContentFlaggedError: If moderation flags the content
            ValidationError: If the parent comment is invalid
        """
        post_id = PostId(request.post_id)
        with logfire.span(
            "create_comment.execute",
            post_id=str(post_id),
            author_id=request.author_id,
        ):
            await self.post_service.require_post(post_id)

            await self.assistant_service.ensure_allowed(
                request.content, FLAGGED_COMMENT_MESSAGE
            )

            comment = await self.comment_service.create_comment(
                post_id=post_id,
                author_id=UserId(request.author_id),
                content=request.content,
                parent_id=(
                    CommentId(request.parent_id)
                    if request.parent_id is not None
                    else None
                ),
            )
            await self.post_service.increment_comment_count(post_id)

            await self.unit_of_work.commit()

            return CommentResponse.from_comment(comment)
