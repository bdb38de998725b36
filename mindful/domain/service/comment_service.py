"""Comment domain service."""

import logfire

from mindful.domain.error import ValidationError
from mindful.domain.model.comment import Comment
from mindful.domain.repository import CommentRepository
from mindful.domain.value import CommentId, PostId, UserId

from .base import Service


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(self, comment_repository: CommentRepository) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
        """
        self.comment_repository = comment_repository

    async def create_comment(
        self,
        post_id: PostId,
        author_id: UserId,
        content: str,
        parent_id: CommentId | None = None,
    ) -> Comment:
        """Create a comment on a post or reply to another comment.

        Args:
            post_id: Post ID
            author_id: Author user ID
            content: Comment text
            parent_id: Parent comment ID for replies (None for top-level)

        Returns:
            Created comment

        Raises:
            ValidationError: If the parent comment is missing or belongs to
                another post
        """
        with logfire.span(
            "comment_service.create_comment",
            post_id=str(post_id),
            author_id=str(author_id),
            parent_id=str(parent_id) if parent_id else None,
        ):
            if parent_id is not None:
                parent = await self.comment_repository.find_by_id(parent_id)
                if not parent:
                    logfire.warn("Parent comment not found", parent_id=str(parent_id))
                    raise ValidationError("Parent comment not found")
                if parent.post_id != post_id:
                    logfire.warn(
                        "Parent comment does not belong to post",
                        parent_id=str(parent_id),
                        parent_post_id=str(parent.post_id),
                        target_post_id=str(post_id),
                    )
                    raise ValidationError("Parent comment does not belong to this post")

            comment = Comment(
                post_id=post_id,
                author_id=author_id,
                content=content,
                parent_id=parent_id,
            )
            saved = await self.comment_repository.save(comment)
            logfire.info("Comment created", comment_id=str(saved.id))
            return saved

    async def get_comments_for_post(self, post_id: PostId) -> list[Comment]:
        """Get all comments on a post, newest first."""
        with logfire.span("comment_service.get_comments_for_post", post_id=str(post_id)):
            comments = await self.comment_repository.find_by_post(post_id)
            logfire.info("Comments retrieved", post_id=str(post_id), count=len(comments))
            return comments
