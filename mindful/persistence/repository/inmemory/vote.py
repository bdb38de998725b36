"""In-memory vote repository for testing."""

from typing import Optional, Sequence

from mindful.domain.error import PersistenceConflictError
from mindful.domain.model import Vote
from mindful.domain.repository import VoteRepository
from mindful.domain.value import PostId, UserId, VoteId, VoteType

from .store import InMemoryStore


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find_by_user_and_post(
        self, user_id: UserId, post_id: PostId
    ) -> Optional[Vote]:
        """Find a vote by user and post."""
        for vote in self._store.votes.values():
            if vote.user_id == user_id and vote.post_id == post_id:
                return vote
        return None

    async def find_by_user_and_posts(
        self, user_id: UserId, post_ids: Sequence[PostId]
    ) -> list[Vote]:
        """Find a user's votes on multiple posts."""
        wanted = set(post_ids)
        return [
            v
            for v in self._store.votes.values()
            if v.user_id == user_id and v.post_id in wanted
        ]

    async def find_by_post(self, post_id: PostId) -> list[Vote]:
        """Find all votes on a post."""
        return [v for v in self._store.votes.values() if v.post_id == post_id]

    async def save(self, vote: Vote) -> Vote:
        """Save a vote.

        Raises:
            PersistenceConflictError: If vote already exists (duplicate)
        """
        if await self.find_by_user_and_post(vote.user_id, vote.post_id):
            raise PersistenceConflictError("Duplicate vote")

        saved = vote.model_copy(update={"id": VoteId(self._store.next_id())})
        self._store.votes[saved.id] = saved
        return saved

    async def update_vote_type(self, vote_id: VoteId, vote_type: VoteType) -> None:
        """Change a vote's direction."""
        vote = self._store.votes.get(vote_id)
        if vote:
            self._store.votes[vote_id] = vote.model_copy(
                update={"vote_type": vote_type}
            )

    async def delete(self, vote_id: VoteId) -> None:
        """Delete a vote."""
        self._store.votes.pop(vote_id, None)
