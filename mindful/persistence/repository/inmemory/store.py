"""Shared state for the in-memory repositories.

One store backs every in-memory repository of a container, so data written
through one request is visible to the next, like a database would be.
"""

import itertools
from dataclasses import dataclass, field

from mindful.domain.model import (
    ChatMessage,
    Comment,
    Doctor,
    DoctorConnection,
    Post,
    Tag,
    User,
    Vote,
)
from mindful.domain.value import (
    ChatMessageId,
    CommentId,
    DoctorConnectionId,
    DoctorId,
    PostId,
    TagId,
    UserId,
    VoteId,
)


@dataclass
class InMemoryStore:
    """Tables of the in-memory database."""

    users: dict[UserId, User] = field(default_factory=dict)
    posts: dict[PostId, Post] = field(default_factory=dict)
    comments: dict[CommentId, Comment] = field(default_factory=dict)
    votes: dict[VoteId, Vote] = field(default_factory=dict)
    tags: dict[TagId, Tag] = field(default_factory=dict)
    post_tags: set[tuple[PostId, TagId]] = field(default_factory=set)
    doctors: dict[DoctorId, Doctor] = field(default_factory=dict)
    doctor_connections: dict[DoctorConnectionId, DoctorConnection] = field(
        default_factory=dict
    )
    chat_messages: dict[ChatMessageId, ChatMessage] = field(default_factory=dict)

    _sequence: itertools.count = field(default_factory=lambda: itertools.count(1))

    def next_id(self) -> int:
        """Next value of the store-wide serial sequence."""
        return next(self._sequence)
