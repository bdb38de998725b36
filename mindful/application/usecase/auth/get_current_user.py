"""Get current user use case."""

from datetime import datetime

from pydantic import BaseModel

from mindful.application.usecase.base import BaseUseCase, ResponseModel
from mindful.domain.error import UnauthenticatedError
from mindful.domain.model import User
from mindful.domain.repository import UnitOfWork
from mindful.domain.service import JWTService, UserService
from mindful.util.jwt import JWTError


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    token: str | None  # JWT token, if the request carried one


class UserResponse(ResponseModel):
    """User profile response."""

    id: str
    email: str | None
    first_name: str | None
    last_name: str | None
    profile_image_url: str | None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        return cls(
            id=str(user.id),
            email=user.email,
            first_name=user.first_name,
            last_name=user.last_name,
            profile_image_url=user.profile_image_url,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


class GetCurrentUserUseCase(BaseUseCase):
    """Use case for resolving the authenticated user.

    The user record is refreshed from the token claims on every call, so
    any user returned here exists in the database.
    """

    def __init__(
        self,
        jwt_service: JWTService,
        user_service: UserService,
        unit_of_work: UnitOfWork,
    ) -> None:
        """Initialize get current user use case.

        Args:
            jwt_service: JWT token domain service
            user_service: User domain service
            unit_of_work: Transaction boundary
        """
        self.jwt_service = jwt_service
        self.user_service = user_service
        self.unit_of_work = unit_of_work

    async def execute(self, request: GetCurrentUserRequest) -> UserResponse:
        """Execute get current user flow.

        Steps:
        1. Verify JWT token via JWT service
        2. Upsert the user from the token claims
        3. Commit so later writes can reference the user

        Args:
            request: Request with JWT token

        Returns:
            The authenticated user

        Raises:
            UnauthenticatedError: If the token is missing, invalid or expired
        """
        if not request.token:
            raise UnauthenticatedError()

        try:
            claims = self.jwt_service.verify_token(request.token)
        except JWTError:
            raise UnauthenticatedError()

        user = await self.user_service.upsert_from_claims(claims)
        await self.unit_of_work.commit()

        return UserResponse.from_user(user)
