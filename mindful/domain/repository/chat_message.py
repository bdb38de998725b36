"""Chat message repository interface."""

from abc import ABC, abstractmethod
from typing import List

from mindful.domain.model.chat_message import ChatMessage
from mindful.domain.value import UserId


class ChatMessageRepository(ABC):
    """Repository for assistant conversation history."""

    @abstractmethod
    async def find_recent_by_user(
        self, user_id: UserId, limit: int = 50
    ) -> List[ChatMessage]:
        """Find a user's most recent messages.

        Args:
            user_id: The user's ID
            limit: Maximum number of messages to return

        Returns:
            Up to ``limit`` most recent messages, oldest first
        """
        pass

    @abstractmethod
    async def save(self, message: ChatMessage) -> ChatMessage:
        """Insert a new message.

        Args:
            message: The message to save

        Returns:
            The saved message with its assigned ID
        """
        pass
