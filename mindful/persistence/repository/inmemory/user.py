"""In-memory user repository for testing."""

from typing import Optional

from mindful.domain.model import User
from mindful.domain.repository import UserRepository
from mindful.domain.value import UserId

from .store import InMemoryStore


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._store.users.get(user_id)

    async def upsert(self, user: User) -> User:
        """Insert or refresh a user, keeping the original created_at."""
        existing = self._store.users.get(user.id)
        if existing:
            user = user.model_copy(update={"created_at": existing.created_at})
        self._store.users[user.id] = user
        return user
