"""Chat message entity for the AI assistant conversation."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from mindful.domain.model.common import DomainModel, utcnow
from mindful.domain.value import ChatMessageId, UserId


class ChatMessage(DomainModel):
    """One turn of a user's conversation with the assistant.

    Both sides of the conversation are stored under the user's id;
    ``is_from_user`` tells them apart.
    """

    id: Optional[ChatMessageId] = None
    user_id: UserId
    content: str = Field(min_length=1)
    is_from_user: bool
    created_at: datetime = Field(default_factory=utcnow)
