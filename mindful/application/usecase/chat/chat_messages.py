"""Assistant chat use cases."""

import logfire
from datetime import datetime

from pydantic import BaseModel, Field

from mindful.application.usecase.base import BaseUseCase, ResponseModel
from mindful.config import ChatSettings
from mindful.domain.model import ChatMessage
from mindful.domain.repository import UnitOfWork
from mindful.domain.service import ChatService
from mindful.domain.value import UserId


class ChatMessageResponse(ResponseModel):
    """Chat message in responses."""

    id: int
    user_id: str
    content: str
    is_from_user: bool
    created_at: datetime

    @classmethod
    def from_message(cls, message: ChatMessage) -> "ChatMessageResponse":
        return cls(
            id=message.id,
            user_id=str(message.user_id),
            content=message.content,
            is_from_user=message.is_from_user,
            created_at=message.created_at,
        )


class GetChatMessagesRequest(BaseModel):
    """Get chat messages request."""

    user_id: str
    limit: int = Field(default=50, ge=1, le=100)


class SendChatMessageRequest(BaseModel):
    """Send chat message request."""

    user_id: str
    content: str = Field(min_length=1)


class SendChatMessageResponse(ResponseModel):
    """The stored user message and the assistant's reply."""

    user_message: ChatMessageResponse
    ai_message: ChatMessageResponse


class GetChatMessagesUseCase:
    """Use case for reading the caller's assistant conversation."""

    def __init__(self, chat_service: ChatService) -> None:
        self.chat_service = chat_service

    async def execute(self, request: GetChatMessagesRequest) -> list[ChatMessageResponse]:
        """Return the most recent messages in chronological order."""
        messages = await self.chat_service.get_history(
            UserId(request.user_id), request.limit
        )
        return [ChatMessageResponse.from_message(m) for m in messages]


class SendChatMessageUseCase(BaseUseCase):
    """Use case for talking to the assistant."""

    def __init__(
        self,
        chat_service: ChatService,
        unit_of_work: UnitOfWork,
        chat_settings: ChatSettings,
    ) -> None:
        """Initialize send chat message use case.

        Args:
            chat_service: Chat domain service
            unit_of_work: Transaction boundary
            chat_settings: Chat settings
        """
        self.chat_service = chat_service
        self.unit_of_work = unit_of_work
        self.chat_settings = chat_settings

    async def execute(self, request: SendChatMessageRequest) -> SendChatMessageResponse:
        """Execute send message flow.

        A failing language model never fails this request; the assistant
        answers with a fixed fallback message instead.

        Args:
            request: Send message request

        Returns:
            Both stored messages
        """
        with logfire.span("send_chat_message.execute", user_id=request.user_id):
            user_message, ai_message = await self.chat_service.send_message(
                UserId(request.user_id),
                request.content,
                history_window=self.chat_settings.history_window,
            )
            await self.unit_of_work.commit()

            return SendChatMessageResponse(
                user_message=ChatMessageResponse.from_message(user_message),
                ai_message=ChatMessageResponse.from_message(ai_message),
            )
