"""Assistant chat use cases."""

from .chat_messages import (
    ChatMessageResponse,
    GetChatMessagesRequest,
    GetChatMessagesUseCase,
    SendChatMessageRequest,
    SendChatMessageResponse,
    SendChatMessageUseCase,
)

__all__ = [
    "ChatMessageResponse",
    "GetChatMessagesRequest",
    "GetChatMessagesUseCase",
    "SendChatMessageRequest",
    "SendChatMessageResponse",
    "SendChatMessageUseCase",
]
