"""Domain value objects for Mindful."""

from mindful.domain.value.identifiers import (
    ChatMessageId,
    CommentId,
    DoctorConnectionId,
    DoctorId,
    PostId,
    TagId,
    UserId,
    VoteId,
)
from mindful.domain.value.types import (
    ConnectionStatus,
    ModerationResult,
    TagName,
    VoteType,
)

__all__ = [
    # Identifiers
    "UserId",
    "PostId",
    "CommentId",
    "VoteId",
    "TagId",
    "DoctorId",
    "DoctorConnectionId",
    "ChatMessageId",
    # Types
    "ConnectionStatus",
    "ModerationResult",
    "TagName",
    "VoteType",
]
