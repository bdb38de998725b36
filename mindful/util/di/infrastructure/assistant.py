"""Language model infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide

from mindful.adapter.openai import OpenAIAssistantClient
from mindful.config import OpenAISettings
from mindful.domain.service import AssistantClient
from mindful.util.di.base import ProviderBase


class AssistantProvider(ProviderBase):
    """Assistant component base."""

    __mock_component__ = "assistant"


class ProdAssistantProvider(AssistantProvider):
    """Production assistant provider using the hosted OpenAI API."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    async def get_assistant_client(
        self, openai_settings: OpenAISettings
    ) -> AsyncIterator[AssistantClient]:
        """Provide OpenAI assistant client, closed when the container closes."""
        client = OpenAIAssistantClient(openai_settings)
        yield client
        await client.close()
