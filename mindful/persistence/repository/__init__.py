"""PostgreSQL repository implementations."""

from mindful.persistence.repository.analytics import PostgresAnalyticsRepository
from mindful.persistence.repository.chat_message import PostgresChatMessageRepository
from mindful.persistence.repository.comment import PostgresCommentRepository
from mindful.persistence.repository.doctor import (
    PostgresDoctorConnectionRepository,
    PostgresDoctorRepository,
)
from mindful.persistence.repository.post import PostgresPostRepository
from mindful.persistence.repository.tag import PostgresTagRepository
from mindful.persistence.repository.unit_of_work import SqlAlchemyUnitOfWork
from mindful.persistence.repository.user import PostgresUserRepository
from mindful.persistence.repository.vote import PostgresVoteRepository

__all__ = [
    "PostgresAnalyticsRepository",
    "PostgresChatMessageRepository",
    "PostgresCommentRepository",
    "PostgresDoctorConnectionRepository",
    "PostgresDoctorRepository",
    "PostgresPostRepository",
    "PostgresTagRepository",
    "PostgresUserRepository",
    "PostgresVoteRepository",
    "SqlAlchemyUnitOfWork",
]
