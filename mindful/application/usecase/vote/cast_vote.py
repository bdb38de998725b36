"""Cast vote use case."""

import logfire
from pydantic import BaseModel

from mindful.application.usecase.base import BaseUseCase, ResponseModel
from mindful.domain.repository import UnitOfWork
from mindful.domain.service import VoteService
from mindful.domain.value import PostId, UserId, VoteType


class CastVoteRequest(BaseModel):
    """Cast vote request."""

    post_id: int
    user_id: str  # User ID from authenticated user
    vote_type: VoteType


class CastVoteResponse(ResponseModel):
    """Cast vote response."""

    message: str


class CastVoteUseCase(BaseUseCase):
    """Use case for casting, flipping or retracting a vote on a post."""

    def __init__(self, vote_service: VoteService, unit_of_work: UnitOfWork) -> None:
        """Initialize cast vote use case.

        Args:
            vote_service: Vote domain service
            unit_of_work: Transaction boundary
        """
        self.vote_service = vote_service
        self.unit_of_work = unit_of_work

    async def execute(self, request: CastVoteRequest) -> CastVoteResponse:
        """Execute cast vote flow.

        The vote change and the tally change are committed together before
        returning, so a failed commit reaches the caller as an error.

        Args:
            request: Cast vote request

        Returns:
            Confirmation message

        Raises:
            NotFoundError: If post not found
            PersistenceConflictError: If a concurrent modification was detected
            PersistenceUnavailableError: If the store cannot be reached
        """
        transition = await self.vote_service.cast_vote(
            UserId(request.user_id), PostId(request.post_id), request.vote_type
        )
        await self.unit_of_work.commit()

        logfire.info(
            "Vote committed",
            post_id=str(request.post_id),
            action=transition.action.value,
        )
        return CastVoteResponse(message="Vote recorded successfully")
