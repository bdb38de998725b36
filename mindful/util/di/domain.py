"""Domain layer DI providers."""

from dishka import Scope, provide

from mindful.config import AuthSettings
from mindful.domain.repository import (
    AnalyticsRepository,
    ChatMessageRepository,
    CommentRepository,
    DoctorConnectionRepository,
    DoctorRepository,
    PostRepository,
    TagRepository,
    UserRepository,
    VoteRepository,
)
from mindful.domain.service import (
    AnalyticsService,
    AssistantClient,
    AssistantService,
    ChatService,
    CommentService,
    DoctorService,
    JWTService,
    PostService,
    TagService,
    UserService,
    VoteService,
)
from mindful.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_assistant_service(
        self, assistant_client: AssistantClient
    ) -> AssistantService:
        """Provide assistant domain service."""
        return AssistantService(assistant_client=assistant_client)

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_post_service(self, post_repository: PostRepository) -> PostService:
        """Provide post domain service."""
        return PostService(post_repository=post_repository)

    @provide
    def get_tag_service(self, tag_repository: TagRepository) -> TagService:
        """Provide tag domain service."""
        return TagService(tag_repository=tag_repository)

    @provide
    def get_comment_service(
        self, comment_repository: CommentRepository
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(comment_repository=comment_repository)

    @provide
    def get_vote_service(
        self, vote_repository: VoteRepository, post_service: PostService
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(vote_repository=vote_repository, post_service=post_service)

    @provide
    def get_doctor_service(
        self,
        doctor_repository: DoctorRepository,
        connection_repository: DoctorConnectionRepository,
    ) -> DoctorService:
        """Provide doctor directory domain service."""
        return DoctorService(
            doctor_repository=doctor_repository,
            connection_repository=connection_repository,
        )

    @provide
    def get_chat_service(
        self,
        chat_message_repository: ChatMessageRepository,
        assistant_service: AssistantService,
    ) -> ChatService:
        """Provide chat domain service."""
        return ChatService(
            chat_message_repository=chat_message_repository,
            assistant_service=assistant_service,
        )

    @provide
    def get_analytics_service(
        self, analytics_repository: AnalyticsRepository
    ) -> AnalyticsService:
        """Provide analytics domain service."""
        return AnalyticsService(analytics_repository=analytics_repository)
