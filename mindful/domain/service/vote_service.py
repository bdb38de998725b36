"""Vote domain service.

Implements the vote ledger: every cast vote is planned as a transition over
the user's standing vote, and the post's tally moves by exactly the
transition's delta within the same transaction.
"""

import logfire

from mindful.domain.error import PersistenceConflictError, PersistenceError
from mindful.domain.model.vote import Vote, VoteAction, VoteTransition, plan_vote
from mindful.domain.repository import VoteRepository
from mindful.domain.value import PostId, UserId, VoteId, VoteType

from .base import Service
from .post_service import PostService


def _standing_vote_id(vote: Vote | None) -> VoteId:
    # Retract and flip are only planned over a stored vote
    if vote is None or vote.id is None:
        raise PersistenceError("Standing vote has no stored ID")
    return vote.id


class VoteService(Service):
    """Domain service for vote operations."""

    def __init__(
        self,
        vote_repository: VoteRepository,
        post_service: PostService,
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            post_service: Post domain service
        """
        self.vote_repository = vote_repository
        self.post_service = post_service

    async def cast_vote(
        self, user_id: UserId, post_id: PostId, vote_type: VoteType
    ) -> VoteTransition:
        """Cast a vote on a post.

        Casting the same direction as the standing vote retracts it; casting
        the opposite direction flips it. The post row is locked before the
        standing vote is read, so concurrent casts on the same post are
        evaluated one after another.

        Args:
            user_id: Voting user
            post_id: Target post
            vote_type: Requested direction

        Returns:
            The transition that was applied

        Raises:
            NotFoundError: If post not found (nothing is changed)
            PersistenceConflictError: If a concurrent cast created the same
                vote first
        """
        with logfire.span(
            "vote_service.cast_vote",
            post_id=str(post_id),
            user_id=str(user_id),
            vote_type=vote_type.value,
        ):
            await self.post_service.lock_post(post_id)

            existing = await self.vote_repository.find_by_user_and_post(
                user_id, post_id
            )
            transition = plan_vote(
                existing.vote_type if existing else None, vote_type
            )

            if transition.action is VoteAction.CREATE:
                try:
                    await self.vote_repository.save(
                        Vote(user_id=user_id, post_id=post_id, vote_type=vote_type)
                    )
                except PersistenceConflictError:
                    logfire.warn(
                        "Concurrent duplicate vote",
                        user_id=str(user_id),
                        post_id=str(post_id),
                    )
                    raise
            elif transition.action is VoteAction.RETRACT:
                await self.vote_repository.delete(_standing_vote_id(existing))
            else:
                await self.vote_repository.update_vote_type(
                    _standing_vote_id(existing), vote_type
                )

            await self.post_service.adjust_votes(post_id, transition.tally_delta)

            logfire.info(
                "Vote cast",
                post_id=str(post_id),
                user_id=str(user_id),
                action=transition.action.value,
                delta=transition.tally_delta,
            )
            return transition

    async def get_user_vote(self, user_id: UserId, post_id: PostId) -> VoteType | None:
        """Get the direction of a user's standing vote on a post.

        Args:
            user_id: User ID
            post_id: Post ID

        Returns:
            The vote type, or None if the user has not voted
        """
        vote = await self.vote_repository.find_by_user_and_post(user_id, post_id)
        return vote.vote_type if vote else None

    async def get_user_votes_for_posts(
        self, user_id: UserId, post_ids: list[PostId]
    ) -> dict[PostId, VoteType]:
        """Get a user's standing votes on several posts.

        Args:
            user_id: User ID
            post_ids: Posts to check

        Returns:
            Mapping of post ID to vote type for posts the user voted on
        """
        if not post_ids:
            return {}

        # Batch query to fetch all votes at once (avoid N+1)
        votes = await self.vote_repository.find_by_user_and_posts(user_id, post_ids)
        return {vote.post_id: vote.vote_type for vote in votes}
