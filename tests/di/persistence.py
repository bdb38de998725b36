"""Mock persistence providers for testing."""

from dishka import Scope, provide

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
from mindful.persistence.repository.inmemory import (
    InMemoryAnalyticsRepository,
    InMemoryChatMessageRepository,
    InMemoryCommentRepository,
    InMemoryDoctorConnectionRepository,
    InMemoryDoctorRepository,
    InMemoryPostRepository,
    InMemoryStore,
    InMemoryTagRepository,
    InMemoryUnitOfWork,
    InMemoryUserRepository,
    InMemoryVoteRepository,
)
from mindful.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    The store is APP-scoped so data survives across requests of one
    container, and each container (each test) starts empty.
    Repositories are REQUEST-scoped views over that store.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_store(self) -> InMemoryStore:
        """Provide the shared in-memory store."""
        return InMemoryStore()

    @provide(scope=Scope.REQUEST)
    def get_unit_of_work(self) -> UnitOfWork:
        """Provide in-memory unit of work."""
        return InMemoryUnitOfWork()

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, store: InMemoryStore) -> UserRepository:
        """Provide in-memory user repository."""
        return InMemoryUserRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_post_repository(self, store: InMemoryStore) -> PostRepository:
        """Provide in-memory post repository."""
        return InMemoryPostRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self, store: InMemoryStore) -> CommentRepository:
        """Provide in-memory comment repository."""
        return InMemoryCommentRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_vote_repository(self, store: InMemoryStore) -> VoteRepository:
        """Provide in-memory vote repository."""
        return InMemoryVoteRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_tag_repository(self, store: InMemoryStore) -> TagRepository:
        """Provide in-memory tag repository."""
        return InMemoryTagRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_doctor_repository(self, store: InMemoryStore) -> DoctorRepository:
        """Provide in-memory doctor repository."""
        return InMemoryDoctorRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_doctor_connection_repository(
        self, store: InMemoryStore
    ) -> DoctorConnectionRepository:
        """Provide in-memory doctor connection repository."""
        return InMemoryDoctorConnectionRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_chat_message_repository(
        self, store: InMemoryStore
    ) -> ChatMessageRepository:
        """Provide in-memory chat message repository."""
        return InMemoryChatMessageRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_analytics_repository(self, store: InMemoryStore) -> AnalyticsRepository:
        """Provide in-memory analytics repository."""
        return InMemoryAnalyticsRepository(store)
