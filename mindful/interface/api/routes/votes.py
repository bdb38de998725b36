"""Vote routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, HTTPException, status

from mindful.application.usecase.auth import GetCurrentUserRequest, GetCurrentUserUseCase
from mindful.application.usecase.vote import (
    CastVoteRequest,
    CastVoteResponse,
    CastVoteUseCase,
    GetUserVoteRequest,
    GetUserVoteResponse,
    GetUserVoteUseCase,
)
from mindful.domain.error import DomainError
from mindful.domain.value import VoteType
from mindful.interface.api.schema import APIRequest
from mindful.interface.api.security import read_auth_token

router = APIRouter(prefix="/posts", tags=["votes"], route_class=DishkaRoute)


class CastVoteAPIRequest(APIRequest):
    """API request for casting a vote."""

    vote_type: VoteType


@router.post("/{post_id}/vote", response_model=CastVoteResponse)
async def cast_vote(
    post_id: int,
    request: CastVoteAPIRequest,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Depends(read_auth_token),
) -> CastVoteResponse:
    """Cast an up or down vote on a post.

    Casting the same direction again retracts the vote; casting the opposite
    direction flips it. The post's tally is updated in the same transaction,
    which is committed before this returns.

    Args:
        post_id: Post ID
        request: Vote direction
        cast_vote_use_case: Cast vote use case from DI
        get_current_user_use_case: Get current user use case from DI
        auth_token: JWT token from cookie or bearer header

    Returns:
        Confirmation message

    Raises:
        UnauthenticatedError: If not authenticated (401)
        NotFoundError: If the post does not exist (404)
        PersistenceConflictError: If a concurrent vote won the race (409)
        PersistenceUnavailableError: If the store cannot be reached (503)
    """
    user = await get_current_user_use_case.execute(
        GetCurrentUserRequest(token=auth_token)
    )

    try:
        use_case_request = CastVoteRequest(
            post_id=post_id,
            user_id=user.id,
            vote_type=request.vote_type,
        )
        return await cast_vote_use_case.execute(use_case_request)
    except DomainError:
        raise
    except Exception as e:
        logfire.error(
            "Unexpected error recording vote", post_id=post_id, error=str(e)
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to record vote",
        )


@router.get("/{post_id}/vote", response_model=GetUserVoteResponse)
async def get_user_vote(
    post_id: int,
    get_user_vote_use_case: FromDishka[GetUserVoteUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Depends(read_auth_token),
) -> GetUserVoteResponse:
    """Get the caller's standing vote on a post (``voteType`` is null if none)."""
    user = await get_current_user_use_case.execute(
        GetCurrentUserRequest(token=auth_token)
    )
    return await get_user_vote_use_case.execute(
        GetUserVoteRequest(post_id=post_id, user_id=user.id)
    )
