"""User domain service."""

import logfire

from mindful.domain.error import NotFoundError
from mindful.domain.model import User
from mindful.domain.model.common import utcnow
from mindful.domain.repository import UserRepository
from mindful.domain.value import UserId
from mindful.util.jwt import TokenPayload

from .base import Service


class UserService(Service):
    """Domain service for user operations."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def upsert_from_claims(self, claims: TokenPayload) -> User:
        """Create or refresh a user from identity provider claims.

        Args:
            claims: Verified token payload

        Returns:
            The stored user
        """
        with logfire.span("user_service.upsert_from_claims", user_id=claims.sub):
            now = utcnow()
            user = User(
                id=UserId(claims.sub),
                email=claims.email,
                first_name=claims.first_name,
                last_name=claims.last_name,
                profile_image_url=claims.profile_image_url,
                created_at=now,
                updated_at=now,
            )
            saved = await self.user_repository.upsert(user)
            logfire.info("User upserted", user_id=str(saved.id))
            return saved
