"""OpenAI assistant adapter."""

from .client import MockAssistantClient, OpenAIAssistantClient

__all__ = ["OpenAIAssistantClient", "MockAssistantClient"]
