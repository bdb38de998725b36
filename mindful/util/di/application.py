"""Application layer DI providers."""

from dishka import Scope, provide

from mindful.application.usecase.analytics import GetAnalyticsUseCase
from mindful.application.usecase.auth import GetCurrentUserUseCase
from mindful.application.usecase.chat import (
    GetChatMessagesUseCase,
    SendChatMessageUseCase,
)
from mindful.application.usecase.comment import (
    CreateCommentUseCase,
    GetCommentsUseCase,
)
from mindful.application.usecase.doctor import (
    ConnectDoctorUseCase,
    GetDoctorUseCase,
    ListConnectionsUseCase,
    ListDoctorsUseCase,
    SearchDoctorsUseCase,
)
from mindful.application.usecase.post import (
    CreatePostUseCase,
    DeletePostUseCase,
    GetPostUseCase,
    ListMyPostsUseCase,
    ListPostsUseCase,
    SearchPostsUseCase,
    SuggestTitlesUseCase,
)
from mindful.application.usecase.tag import ListTagsUseCase
from mindful.application.usecase.vote import CastVoteUseCase, GetUserVoteUseCase
from mindful.config import AnalyticsSettings, ChatSettings, PostSettings
from mindful.domain.repository import UnitOfWork
from mindful.domain.service import (
    AnalyticsService,
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


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_current_user_use_case(
        self,
        jwt_service: JWTService,
        user_service: UserService,
        unit_of_work: UnitOfWork,
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(
            jwt_service=jwt_service,
            user_service=user_service,
            unit_of_work=unit_of_work,
        )

    # Post use cases
    @provide(scope=Scope.REQUEST)
    def get_list_posts_use_case(
        self,
        post_service: PostService,
        tag_service: TagService,
        vote_service: VoteService,
    ) -> ListPostsUseCase:
        """Provide list posts use case."""
        return ListPostsUseCase(
            post_service=post_service,
            tag_service=tag_service,
            vote_service=vote_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_list_my_posts_use_case(
        self, post_service: PostService, tag_service: TagService
    ) -> ListMyPostsUseCase:
        """Provide list my posts use case."""
        return ListMyPostsUseCase(post_service=post_service, tag_service=tag_service)

    @provide(scope=Scope.REQUEST)
    def get_search_posts_use_case(
        self, post_service: PostService, tag_service: TagService
    ) -> SearchPostsUseCase:
        """Provide search posts use case."""
        return SearchPostsUseCase(post_service=post_service, tag_service=tag_service)

    @provide(scope=Scope.REQUEST)
    def get_get_post_use_case(
        self, post_service: PostService, tag_service: TagService
    ) -> GetPostUseCase:
        """Provide get post use case."""
        return GetPostUseCase(post_service=post_service, tag_service=tag_service)

    @provide(scope=Scope.REQUEST)
    def get_create_post_use_case(
        self,
        post_service: PostService,
        tag_service: TagService,
        assistant_service: AssistantService,
        unit_of_work: UnitOfWork,
        post_settings: PostSettings,
    ) -> CreatePostUseCase:
        """Provide create post use case."""
        return CreatePostUseCase(
            post_service=post_service,
            tag_service=tag_service,
            assistant_service=assistant_service,
            unit_of_work=unit_of_work,
            post_settings=post_settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_post_use_case(
        self, post_service: PostService, unit_of_work: UnitOfWork
    ) -> DeletePostUseCase:
        """Provide delete post use case."""
        return DeletePostUseCase(post_service=post_service, unit_of_work=unit_of_work)

    @provide(scope=Scope.REQUEST)
    def get_suggest_titles_use_case(
        self, assistant_service: AssistantService
    ) -> SuggestTitlesUseCase:
        """Provide suggest titles use case."""
        return SuggestTitlesUseCase(assistant_service=assistant_service)

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_cast_vote_use_case(
        self, vote_service: VoteService, unit_of_work: UnitOfWork
    ) -> CastVoteUseCase:
        """Provide cast vote use case."""
        return CastVoteUseCase(vote_service=vote_service, unit_of_work=unit_of_work)

    @provide(scope=Scope.REQUEST)
    def get_user_vote_use_case(
        self, vote_service: VoteService, post_service: PostService
    ) -> GetUserVoteUseCase:
        """Provide get user vote use case."""
        return GetUserVoteUseCase(vote_service=vote_service, post_service=post_service)

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_get_comments_use_case(
        self, comment_service: CommentService
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self,
        comment_service: CommentService,
        post_service: PostService,
        assistant_service: AssistantService,
        unit_of_work: UnitOfWork,
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            comment_service=comment_service,
            post_service=post_service,
            assistant_service=assistant_service,
            unit_of_work=unit_of_work,
        )

    # Tag use cases
    @provide(scope=Scope.REQUEST)
    def get_list_tags_use_case(self, tag_service: TagService) -> ListTagsUseCase:
        """Provide list tags use case."""
        return ListTagsUseCase(tag_service=tag_service)

    # Doctor use cases
    @provide(scope=Scope.REQUEST)
    def get_list_doctors_use_case(
        self, doctor_service: DoctorService
    ) -> ListDoctorsUseCase:
        """Provide list doctors use case."""
        return ListDoctorsUseCase(doctor_service=doctor_service)

    @provide(scope=Scope.REQUEST)
    def get_search_doctors_use_case(
        self, doctor_service: DoctorService
    ) -> SearchDoctorsUseCase:
        """Provide search doctors use case."""
        return SearchDoctorsUseCase(doctor_service=doctor_service)

    @provide(scope=Scope.REQUEST)
    def get_get_doctor_use_case(self, doctor_service: DoctorService) -> GetDoctorUseCase:
        """Provide get doctor use case."""
        return GetDoctorUseCase(doctor_service=doctor_service)

    @provide(scope=Scope.REQUEST)
    def get_connect_doctor_use_case(
        self, doctor_service: DoctorService, unit_of_work: UnitOfWork
    ) -> ConnectDoctorUseCase:
        """Provide connect doctor use case."""
        return ConnectDoctorUseCase(
            doctor_service=doctor_service, unit_of_work=unit_of_work
        )

    @provide(scope=Scope.REQUEST)
    def get_list_connections_use_case(
        self, doctor_service: DoctorService
    ) -> ListConnectionsUseCase:
        """Provide list connections use case."""
        return ListConnectionsUseCase(doctor_service=doctor_service)

    # Chat use cases
    @provide(scope=Scope.REQUEST)
    def get_get_chat_messages_use_case(
        self, chat_service: ChatService
    ) -> GetChatMessagesUseCase:
        """Provide get chat messages use case."""
        return GetChatMessagesUseCase(chat_service=chat_service)

    @provide(scope=Scope.REQUEST)
    def get_send_chat_message_use_case(
        self,
        chat_service: ChatService,
        unit_of_work: UnitOfWork,
        chat_settings: ChatSettings,
    ) -> SendChatMessageUseCase:
        """Provide send chat message use case."""
        return SendChatMessageUseCase(
            chat_service=chat_service,
            unit_of_work=unit_of_work,
            chat_settings=chat_settings,
        )

    # Analytics use cases
    @provide(scope=Scope.REQUEST)
    def get_analytics_use_case(
        self,
        analytics_service: AnalyticsService,
        analytics_settings: AnalyticsSettings,
    ) -> GetAnalyticsUseCase:
        """Provide analytics use case."""
        return GetAnalyticsUseCase(
            analytics_service=analytics_service,
            analytics_settings=analytics_settings,
        )
