"""In-memory chat message repository for testing."""

from mindful.domain.model import ChatMessage
from mindful.domain.repository import ChatMessageRepository
from mindful.domain.value import ChatMessageId, UserId

from .store import InMemoryStore


class InMemoryChatMessageRepository(ChatMessageRepository):
    """In-memory implementation of ChatMessageRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find_recent_by_user(
        self, user_id: UserId, limit: int = 50
    ) -> list[ChatMessage]:
        """Find the most recent messages, oldest first."""
        messages = sorted(
            (m for m in self._store.chat_messages.values() if m.user_id == user_id),
            key=lambda m: (m.created_at, m.id or 0),
        )
        return messages[-limit:] if limit > 0 else []

    async def save(self, message: ChatMessage) -> ChatMessage:
        """Save a new message."""
        saved = message.model_copy(
            update={"id": ChatMessageId(self._store.next_id())}
        )
        self._store.chat_messages[saved.id] = saved
        return saved
