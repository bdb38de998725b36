"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from mindful.config import (
    AnalyticsSettings,
    AuthSettings,
    ChatSettings,
    OpenAISettings,
    PostSettings,
    Settings,
)
from mindful.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Provide auth settings."""
        return settings.auth

    @provide(scope=Scope.APP)
    def provide_openai_settings(self, settings: Settings) -> OpenAISettings:
        """Provide language model settings."""
        return settings.openai

    @provide(scope=Scope.APP)
    def provide_chat_settings(self, settings: Settings) -> ChatSettings:
        """Provide chat settings."""
        return settings.chat

    @provide(scope=Scope.APP)
    def provide_post_settings(self, settings: Settings) -> PostSettings:
        """Provide post settings."""
        return settings.posts

    @provide(scope=Scope.APP)
    def provide_analytics_settings(self, settings: Settings) -> AnalyticsSettings:
        """Provide analytics settings."""
        return settings.analytics
