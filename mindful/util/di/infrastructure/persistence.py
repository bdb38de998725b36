"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from mindful.config import Settings
from mindful.domain.repository import (
    AnalyticsRepository,
    ChatMessageRepository,
    CommentRepository,
    DoctorConnectionRepository,
    DoctorRepository,
    PostRepository,
    TagRepository,
    UnitOfWork,
    UserRepository,
    VoteRepository,
)
from mindful.persistence.database import create_engine, create_session_factory
from mindful.persistence.repository import (
    PostgresAnalyticsRepository,
    PostgresChatMessageRepository,
    PostgresCommentRepository,
    PostgresDoctorConnectionRepository,
    PostgresDoctorRepository,
    PostgresPostRepository,
    PostgresTagRepository,
    PostgresUserRepository,
    PostgresVoteRepository,
    SqlAlchemyUnitOfWork,
)
from mindful.util.di.base import ProviderBase
from mindful.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Provide database engine, disposed when the container closes."""
        engine = create_engine(settings)
        # Instrument SQLAlchemy for observability
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        Write use cases commit through the unit of work before responding.
        Anything still pending when the request ends (read-only work) is
        committed here, and an exception rolls the transaction back.
        """
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise

    @provide(scope=Scope.REQUEST)
    def get_unit_of_work(self, session: AsyncSession) -> UnitOfWork:
        """Provide unit of work bound to the request session."""
        return SqlAlchemyUnitOfWork(session)

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, session: AsyncSession) -> UserRepository:
        """Provide User repository."""
        return PostgresUserRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_post_repository(self, session: AsyncSession) -> PostRepository:
        """Provide Post repository."""
        return PostgresPostRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self, session: AsyncSession) -> CommentRepository:
        """Provide Comment repository."""
        return PostgresCommentRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_vote_repository(self, session: AsyncSession) -> VoteRepository:
        """Provide Vote repository."""
        return PostgresVoteRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_tag_repository(self, session: AsyncSession) -> TagRepository:
        """Provide Tag repository."""
        return PostgresTagRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_doctor_repository(self, session: AsyncSession) -> DoctorRepository:
        """Provide Doctor repository."""
        return PostgresDoctorRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_doctor_connection_repository(
        self, session: AsyncSession
    ) -> DoctorConnectionRepository:
        """Provide DoctorConnection repository."""
        return PostgresDoctorConnectionRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_chat_message_repository(
        self, session: AsyncSession
    ) -> ChatMessageRepository:
        """Provide ChatMessage repository."""
        return PostgresChatMessageRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_analytics_repository(self, session: AsyncSession) -> AnalyticsRepository:
        """Provide Analytics repository."""
        return PostgresAnalyticsRepository(session)
