"""Language model assistant domain service."""

import logfire

from mindful.domain.error import ContentFlaggedError
from mindful.domain.value import ModerationResult

from .base import Service

FALLBACK_REPLY = (
    "I apologize, but I'm experiencing technical difficulties. Please try again "
    "in a moment, or consider reaching out to a mental health professional if "
    "you need immediate support."
)
EMPTY_REPLY = (
    "I'm here to help, but I'm having trouble responding right now. "
    "Please try again."
)


class AssistantError(Exception):
    """Raised by assistant clients when the language model call fails."""

    pass


class AssistantClient:
    """Generic language model client interface."""

    async def generate_reply(self, message: str, history: list[tuple[bool, str]]) -> str:
        """Generate the assistant's reply to a user message.

        Args:
            message: The user's new message
            history: Previous turns, oldest first, as ``(is_from_user, content)``

        Returns:
            The reply text (may be empty)

        Raises:
            AssistantError: If the model could not be reached
        """
        raise NotImplementedError

    async def moderate(self, text: str) -> ModerationResult:
        """Screen user-generated text.

        Args:
            text: Text to screen

        Returns:
            Moderation outcome

        Raises:
            AssistantError: If the moderation call failed
        """
        raise NotImplementedError

    async def suggest_post_titles(self, tags: list[str]) -> list[str]:
        """Suggest post titles for a set of topics.

        Args:
            tags: Topics the user wants to write about

        Returns:
            Suggested titles

        Raises:
            AssistantError: If the model could not be reached or answered
                with something other than a list of titles
        """
        raise NotImplementedError


class AssistantService(Service):
    """Domain service wrapping the language model.

    Model failures never fail the caller's request: replies fall back to a
    fixed supportive message, moderation fails open and suggestions come
    back empty.
    """

    def __init__(self, assistant_client: AssistantClient) -> None:
        """Initialize assistant service.

        Args:
            assistant_client: Language model client implementation
        """
        self.assistant_client = assistant_client

    async def reply(self, message: str, history: list[tuple[bool, str]]) -> str:
        """Generate a reply, falling back to a fixed message on failure.

        Args:
            message: The user's new message
            history: Previous turns, oldest first, as ``(is_from_user, content)``

        Returns:
            Non-empty reply text
        """
        with logfire.span("assistant_service.reply", history_length=len(history)):
            try:
                reply = await self.assistant_client.generate_reply(message, history)
            except AssistantError as e:
                logfire.error("Assistant reply failed, using fallback", error=str(e))
                return FALLBACK_REPLY

            if not reply or not reply.strip():
                logfire.warn("Assistant returned empty reply, using fallback")
                return EMPTY_REPLY

            return reply

    async def screen(self, text: str) -> ModerationResult:
        """Screen text, treating a failed moderation call as not flagged.

        Args:
            text: Text to screen

        Returns:
            Moderation outcome
        """
        with logfire.span("assistant_service.screen", text_length=len(text)):
            try:
                result = await self.assistant_client.moderate(text)
            except AssistantError as e:
                logfire.error("Moderation failed, allowing content", error=str(e))
                return ModerationResult(flagged=False)

            if result.flagged:
                logfire.info("Content flagged", reason=result.reason)
            return result

    async def ensure_allowed(self, text: str, message: str) -> None:
        """Screen text and reject it if flagged.

        Args:
            text: Text to screen
            message: Error message used when the text is flagged

        Raises:
            ContentFlaggedError: If moderation flags the text
        """
        result = await self.screen(text)
        if result.flagged:
            raise ContentFlaggedError(message, reason=result.reason)

    async def suggest_titles(self, tags: list[str]) -> list[str]:
        """Suggest post titles, returning an empty list on failure.

        Args:
            tags: Topics the user wants to write about

        Returns:
            Suggested titles
        """
        with logfire.span("assistant_service.suggest_titles", tag_count=len(tags)):
            try:
                suggestions = await self.assistant_client.suggest_post_titles(tags)
            except AssistantError as e:
                logfire.error("Post suggestions failed", error=str(e))
                return []

            logfire.info("Post suggestions generated", count=len(suggestions))
            return suggestions
