"""Comment response model."""

from datetime import datetime

from mindful.application.usecase.base import ResponseModel
from mindful.domain.model import Comment


class CommentResponse(ResponseModel):
    """Comment in responses."""

    id: int
    content: str
    author_id: str
    post_id: int
    parent_id: int | None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_comment(cls, comment: Comment) -> "CommentResponse":
        return cls(
            id=comment.id,
            content=comment.content,
            author_id=str(comment.author_id),
            post_id=comment.post_id,
            parent_id=comment.parent_id,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
        )
