"""Assistant chat domain service."""

import logfire

from mindful.domain.model.chat_message import ChatMessage
from mindful.domain.repository import ChatMessageRepository
from mindful.domain.value import UserId

from .assistant_service import AssistantService
from .base import Service


class ChatService(Service):
    """Domain service for conversations with the assistant."""

    def __init__(
        self,
        chat_message_repository: ChatMessageRepository,
        assistant_service: AssistantService,
    ) -> None:
        """Initialize chat service.

        Args:
            chat_message_repository: Chat message repository
            assistant_service: Assistant domain service
        """
        self.chat_message_repository = chat_message_repository
        self.assistant_service = assistant_service

    async def get_history(self, user_id: UserId, limit: int) -> list[ChatMessage]:
        """Get a user's most recent messages, oldest first."""
        with logfire.span("chat_service.get_history", user_id=str(user_id), limit=limit):
            return await self.chat_message_repository.find_recent_by_user(
                user_id, limit=limit
            )

    async def send_message(
        self, user_id: UserId, content: str, history_window: int
    ) -> tuple[ChatMessage, ChatMessage]:
        """Store a user message and the assistant's reply to it.

        The reply is generated from the new message plus up to
        ``history_window`` earlier turns of the same user's conversation.

        Args:
            user_id: User sending the message
            content: Message text
            history_window: Number of earlier messages given to the model

        Returns:
            The stored user message and the stored assistant reply
        """
        with logfire.span("chat_service.send_message", user_id=str(user_id)):
            history: list[ChatMessage] = []
            if history_window > 0:
                history = await self.chat_message_repository.find_recent_by_user(
                    user_id, limit=history_window
                )

            user_message = await self.chat_message_repository.save(
                ChatMessage(user_id=user_id, content=content, is_from_user=True)
            )

            reply = await self.assistant_service.reply(
                content, [(m.is_from_user, m.content) for m in history]
            )

            ai_message = await self.chat_message_repository.save(
                ChatMessage(user_id=user_id, content=reply, is_from_user=False)
            )

            logfire.info(
                "Chat exchange stored",
                user_id=str(user_id),
                user_message_id=str(user_message.id),
                ai_message_id=str(ai_message.id),
            )
            return user_message, ai_message
