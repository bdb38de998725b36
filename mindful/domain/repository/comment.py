"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from mindful.domain.model.comment import Comment
from mindful.domain.value import CommentId, PostId


class CommentRepository(ABC):
    """Repository for Comment entity."""

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_post(self, post_id: PostId) -> List[Comment]:
        """Find all comments on a post, newest first.

        Args:
            post_id: The post's ID

        Returns:
            List of comments
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Insert a new comment.

        Args:
            comment: The comment to save

        Returns:
            The saved comment with its assigned ID
        """
        pass
