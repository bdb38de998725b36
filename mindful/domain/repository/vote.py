"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from mindful.domain.model.vote import Vote
from mindful.domain.value import PostId, UserId, VoteId, VoteType


class VoteRepository(ABC):
    """Repository for Vote entity.

    Defines the contract for vote persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_user_and_post(
        self, user_id: UserId, post_id: PostId
    ) -> Optional[Vote]:
        """Find a user's standing vote on a post.

        Args:
            user_id: The user's ID
            post_id: The post's ID

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_user_and_posts(
        self, user_id: UserId, post_ids: Sequence[PostId]
    ) -> List[Vote]:
        """Find a user's votes on multiple posts (batch query).

        Args:
            user_id: The user's ID
            post_ids: Posts to check

        Returns:
            List of votes by the user on the specified posts
        """
        pass

    @abstractmethod
    async def find_by_post(self, post_id: PostId) -> List[Vote]:
        """Find all votes standing on a post.

        Args:
            post_id: The post's ID

        Returns:
            List of votes on the post
        """
        pass

    @abstractmethod
    async def save(self, vote: Vote) -> Vote:
        """Insert a new vote.

        Args:
            vote: The vote to save

        Returns:
            The saved vote with its assigned ID

        Raises:
            PersistenceConflictError: If the user already has a vote on the post
        """
        pass

    @abstractmethod
    async def update_vote_type(self, vote_id: VoteId, vote_type: VoteType) -> None:
        """Change the direction of an existing vote in place.

        Args:
            vote_id: The vote to update
            vote_type: The new direction
        """
        pass

    @abstractmethod
    async def delete(self, vote_id: VoteId) -> None:
        """Delete a vote.

        Args:
            vote_id: The vote ID to delete
        """
        pass
