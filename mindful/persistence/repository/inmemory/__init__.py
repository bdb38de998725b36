"""In-memory repository implementations for testing."""

from .analytics import InMemoryAnalyticsRepository
from .chat_message import InMemoryChatMessageRepository
from .comment import InMemoryCommentRepository
from .doctor import InMemoryDoctorConnectionRepository, InMemoryDoctorRepository
from .post import InMemoryPostRepository
from .store import InMemoryStore
from .tag import InMemoryTagRepository
from .unit_of_work import InMemoryUnitOfWork
from .user import InMemoryUserRepository
from .vote import InMemoryVoteRepository

__all__ = [
    "InMemoryAnalyticsRepository",
    "InMemoryChatMessageRepository",
    "InMemoryCommentRepository",
    "InMemoryDoctorConnectionRepository",
    "InMemoryDoctorRepository",
    "InMemoryPostRepository",
    "InMemoryStore",
    "InMemoryTagRepository",
    "InMemoryUnitOfWork",
    "InMemoryUserRepository",
    "InMemoryVoteRepository",
]
