"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from mindful.domain.model.user import User
from mindful.domain.value import UserId


class UserRepository(ABC):
    """Repository for User aggregate."""

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def upsert(self, user: User) -> User:
        """Insert the user, or refresh the profile fields of an existing one.

        ``created_at`` of an existing user is preserved.

        Args:
            user: The user to store

        Returns:
            The stored user
        """
        pass
