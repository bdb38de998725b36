"""Get the caller's vote on a post use case."""

from pydantic import BaseModel

from mindful.application.usecase.base import ResponseModel
from mindful.domain.service import PostService, VoteService
from mindful.domain.value import PostId, UserId, VoteType


class GetUserVoteRequest(BaseModel):
    """Get user vote request."""

    post_id: int
    user_id: str


class GetUserVoteResponse(ResponseModel):
    """The caller's standing vote, or null."""

    vote_type: VoteType | None


class GetUserVoteUseCase:
    """Use case for reading a user's standing vote on a post."""

    def __init__(self, vote_service: VoteService, post_service: PostService) -> None:
        self.vote_service = vote_service
        self.post_service = post_service

    async def execute(self, request: GetUserVoteRequest) -> GetUserVoteResponse:
        """Return the user's vote.

        Raises:
            NotFoundError: If post not found
        """
        post_id = PostId(request.post_id)
        await self.post_service.require_post(post_id)
        vote_type = await self.vote_service.get_user_vote(
            UserId(request.user_id), post_id
        )
        return GetUserVoteResponse(vote_type=vote_type)
