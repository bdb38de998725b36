"""OpenAI assistant client implementation.

Chat replies, moderation and post title suggestions are served by the hosted
OpenAI API through the official async SDK.
"""

import json

import httpx
import logfire
import openai

from mindful.config import OpenAISettings
from mindful.domain.service.assistant_service import AssistantClient, AssistantError
from mindful.domain.value import ModerationResult

SYSTEM_PROMPT = """You are a compassionate mental health assistant named Mindful AI. \
You provide supportive, empathetic responses to users seeking mental health guidance. Always:
- Be warm, understanding, and non-judgmental
- Provide practical coping strategies and techniques
- Encourage professional help when appropriate
- Avoid diagnosing or prescribing medication
- Keep responses helpful but not overly long
- Use a calm, reassuring tone
- Remember this is for general guidance only and not a replacement for professional care"""

SUGGESTIONS_PROMPT = (
    "You are a helpful assistant that generates thoughtful mental health post "
    "suggestions based on tags. Respond with JSON in this format: "
    '{ "suggestions": ["suggestion1", "suggestion2", "suggestion3"] }'
)


class OpenAIAssistantClient(AssistantClient):
    """Assistant client backed by the OpenAI chat and moderation endpoints."""

    def __init__(
        self,
        settings: OpenAISettings,
        client: openai.AsyncOpenAI | None = None,
    ) -> None:
        """Initialize OpenAI assistant client.

        Args:
            settings: Model names, sampling parameters and credentials
            client: Preconfigured SDK client (built from settings if omitted)
        """
        self.settings = settings
        self.client = client or openai.AsyncOpenAI(
            api_key=settings.api_key,
            base_url=settings.base_url,
            http_client=httpx.AsyncClient(timeout=settings.timeout),
        )

    async def close(self) -> None:
        """Release the underlying HTTP connections."""
        await self.client.close()

    async def generate_reply(
        self, message: str, history: list[tuple[bool, str]]
    ) -> str:
        messages = [{"role": "system", "content": SYSTEM_PROMPT}]
        for is_from_user, content in history:
            messages.append(
                {"role": "user" if is_from_user else "assistant", "content": content}
            )
        messages.append({"role": "user", "content": message})

        try:
            response = await self.client.chat.completions.create(
                model=self.settings.chat_model,
                messages=messages,
                max_completion_tokens=self.settings.max_completion_tokens,
                temperature=self.settings.temperature,
            )
        except openai.OpenAIError as e:
            logfire.error("OpenAI chat completion failed", error=str(e))
            raise AssistantError(f"Chat completion failed: {e}") from e

        if not response.choices:
            return ""
        return response.choices[0].message.content or ""

    async def moderate(self, text: str) -> ModerationResult:
        try:
            response = await self.client.moderations.create(
                model=self.settings.moderation_model,
                input=text,
            )
        except openai.OpenAIError as e:
            logfire.error("OpenAI moderation failed", error=str(e))
            raise AssistantError(f"Moderation failed: {e}") from e

        result = response.results[0]
        if not result.flagged:
            return ModerationResult(flagged=False)

        categories = result.categories.model_dump(by_alias=True)
        flagged = [name for name, hit in categories.items() if hit]
        return ModerationResult(
            flagged=True,
            reason=f"Content flagged for: {', '.join(flagged)}",
        )

    async def suggest_post_titles(self, tags: list[str]) -> list[str]:
        try:
            response = await self.client.chat.completions.create(
                model=self.settings.chat_model,
                messages=[
                    {"role": "system", "content": SUGGESTIONS_PROMPT},
                    {
                        "role": "user",
                        "content": (
                            "Generate 3 thoughtful post title suggestions for mental "
                            f"health topics related to these tags: {', '.join(tags)}"
                        ),
                    },
                ],
                response_format={"type": "json_object"},
            )
        except openai.OpenAIError as e:
            logfire.error("OpenAI suggestion request failed", error=str(e))
            raise AssistantError(f"Suggestion request failed: {e}") from e

        raw = response.choices[0].message.content if response.choices else None
        try:
            payload = json.loads(raw or '{"suggestions": []}')
        except json.JSONDecodeError as e:
            raise AssistantError(f"Suggestions were not valid JSON: {e}") from e

        suggestions = payload.get("suggestions") if isinstance(payload, dict) else None
        if suggestions is None:
            return []
        if not isinstance(suggestions, list):
            raise AssistantError("Suggestions were not a list")
        return [str(s) for s in suggestions]


class MockAssistantClient(AssistantClient):
    """Mock assistant client for testing.

    Replies echo the user's message, text containing ``[flagged]`` is
    rejected by moderation and suggestions are derived from the tags.
    """

    FLAG_MARKER = "[flagged]"

    def __init__(self) -> None:
        """Initialize mock client."""
        self.calls: list[tuple[str, object]] = []

    async def generate_reply(
        self, message: str, history: list[tuple[bool, str]]
    ) -> str:
        self.calls.append(("generate_reply", (message, list(history))))
        return f"Thank you for sharing. You said: {message}"

    async def moderate(self, text: str) -> ModerationResult:
        self.calls.append(("moderate", text))
        if self.FLAG_MARKER in text:
            return ModerationResult(
                flagged=True, reason="Content flagged for: harassment"
            )
        return ModerationResult(flagged=False)

    async def suggest_post_titles(self, tags: list[str]) -> list[str]:
        self.calls.append(("suggest_post_titles", list(tags)))
        return [f"Living with {tag}" for tag in tags][:3]

    async def close(self) -> None:
        pass
