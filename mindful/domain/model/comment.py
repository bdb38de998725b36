"""Comment entity.

Comments are replies to posts. A comment may answer another comment on the
same post through ``parent_id``.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from mindful.domain.model.common import DomainModel, utcnow
from mindful.domain.value import CommentId, PostId, UserId


class Comment(DomainModel):
    """Comment entity."""

    id: Optional[CommentId] = None  # Assigned by the database on insert
    post_id: PostId
    author_id: UserId
    content: str = Field(min_length=1, max_length=10000)
    parent_id: Optional[CommentId] = None
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
