"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from mindful.domain.model.post import Post
from mindful.domain.value import PostId, UserId


class PostRepository(ABC):
    """Repository for Post aggregate.

    Defines the contract for post persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(
        self, post_id: PostId, for_update: bool = False
    ) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier
            for_update: Lock the post row until the transaction ends

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self, limit: int = 50, offset: int = 0) -> List[Post]:
        """Find posts newest first.

        Args:
            limit: Maximum number of posts to return
            offset: Number of posts to skip

        Returns:
            List of posts
        """
        pass

    @abstractmethod
    async def find_by_author(self, author_id: UserId) -> List[Post]:
        """Find posts by a specific author, newest first.

        Args:
            author_id: The author's user ID

        Returns:
            List of posts by the author
        """
        pass

    @abstractmethod
    async def search(self, query: str) -> List[Post]:
        """Find posts whose title or content contains ``query``.

        Matching is case-insensitive. Results are newest first.

        Args:
            query: Substring to look for

        Returns:
            Matching posts
        """
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Insert a new post.

        Args:
            post: The post to save

        Returns:
            The saved post with its assigned ID
        """
        pass

    @abstractmethod
    async def delete(self, post_id: PostId) -> None:
        """Delete a post together with its votes, comments and tag links.

        Args:
            post_id: The post ID to delete
        """
        pass

    @abstractmethod
    async def adjust_votes(self, post_id: PostId, delta: int) -> None:
        """Atomically add ``delta`` to the post's vote tally.

        Uses a SQL-level increment to avoid lost updates.

        Args:
            post_id: The post ID
            delta: Signed change to apply
        """
        pass

    @abstractmethod
    async def increment_comment_count(self, post_id: PostId) -> None:
        """Atomically increment the post's comment count by 1.

        Args:
            post_id: The post ID
        """
        pass
