"""Mock assistant providers for testing."""

from dishka import Scope, provide

from mindful.adapter.openai import MockAssistantClient
from mindful.domain.service import AssistantClient
from mindful.util.di.infrastructure.assistant import AssistantProvider


class MockAssistantProvider(AssistantProvider):
    """Mock assistant provider with deterministic replies and moderation."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_mock_client(self) -> MockAssistantClient:
        """Provide the mock client itself, so tests can inspect its calls."""
        return MockAssistantClient()

    @provide(scope=Scope.APP)
    def get_assistant_client(self, client: MockAssistantClient) -> AssistantClient:
        """Provide mock assistant client."""
        return client
