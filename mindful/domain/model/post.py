"""Post aggregate root.

Posts are the community's shared stories and questions. Each post carries a
denormalized vote tally and comment count that are only ever changed through
atomic increments in the store.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from mindful.domain.model.common import DomainModel, utcnow
from mindful.domain.value import PostId, UserId


class Post(DomainModel):
    """Post aggregate root.

    ``votes`` is the net tally (up votes minus down votes) and may be
    negative.
    """

    id: Optional[PostId] = None  # Assigned by the database on insert
    title: str = Field(min_length=1, max_length=255)
    content: str = Field(min_length=1)
    excerpt: Optional[str] = None
    author_id: UserId
    is_anonymous: bool = False
    votes: int = 0
    comment_count: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    @staticmethod
    def make_excerpt(content: str, length: int = 200) -> str:
        """Build the listing excerpt for a post body.

        Args:
            content: Full post content
            length: Maximum number of content characters to keep

        Returns:
            The leading characters of the content, suffixed with an ellipsis
            when the content was truncated
        """
        if len(content) > length:
            return content[:length] + "..."
        return content
