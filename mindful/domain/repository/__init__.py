"""Repository interfaces for Mindful domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from mindful.domain.repository.analytics import AnalyticsRepository
from mindful.domain.repository.chat_message import ChatMessageRepository
from mindful.domain.repository.comment import CommentRepository
from mindful.domain.repository.doctor import (
    DoctorConnectionRepository,
    DoctorRepository,
)
from mindful.domain.repository.post import PostRepository
from mindful.domain.repository.tag import TagRepository
from mindful.domain.repository.unit_of_work import UnitOfWork
from mindful.domain.repository.user import UserRepository
from mindful.domain.repository.vote import VoteRepository

__all__ = [
    "AnalyticsRepository",
    "ChatMessageRepository",
    "CommentRepository",
    "DoctorConnectionRepository",
    "DoctorRepository",
    "PostRepository",
    "TagRepository",
    "UnitOfWork",
    "UserRepository",
    "VoteRepository",
]
