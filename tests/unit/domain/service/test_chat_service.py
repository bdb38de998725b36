"""Unit tests for ChatService."""

import pytest

from mindful.adapter.openai import MockAssistantClient
from mindful.domain.repository import ChatMessageRepository
from mindful.domain.service import ChatService
from mindful.domain.value import UserId
from tests.harness import create_env_fixture

unit_env = create_env_fixture()

ALICE = UserId("alice")


class TestSendMessage:
    """Tests for send_message."""

    @pytest.mark.asyncio
    async def test_stores_both_sides_of_the_exchange(self, unit_env):
        chat_service = await unit_env.get(ChatService)

        user_message, ai_message = await chat_service.send_message(
            ALICE, "I can't sleep", history_window=10
        )

        assert user_message.is_from_user is True
        assert ai_message.is_from_user is False
        assert ai_message.user_id == ALICE
        assert "I can't sleep" in ai_message.content
        history = await chat_service.get_history(ALICE, limit=50)
        assert [m.id for m in history] == [user_message.id, ai_message.id]

    @pytest.mark.asyncio
    async def test_history_excludes_new_message_and_respects_window(self, unit_env):
        """The model sees earlier turns, oldest first, capped by the window."""
        # Arrange
        chat_service = await unit_env.get(ChatService)
        client = await unit_env.get(MockAssistantClient)
        await chat_service.send_message(ALICE, "first", history_window=10)
        await chat_service.send_message(ALICE, "second", history_window=10)
        client.calls.clear()

        # Act
        await chat_service.send_message(ALICE, "third", history_window=3)

        # Assert
        name, (message, history) = client.calls[-1]
        assert name == "generate_reply"
        assert message == "third"
        assert len(history) == 3
        assert history[0] == (False, "Thank you for sharing. You said: first")
        assert history[1] == (True, "second")
        assert history[2][0] is False

    @pytest.mark.asyncio
    async def test_history_is_per_user(self, unit_env):
        chat_service = await unit_env.get(ChatService)
        repo = await unit_env.get(ChatMessageRepository)
        await chat_service.send_message(UserId("bob"), "hello", history_window=10)

        await chat_service.send_message(ALICE, "hi", history_window=10)

        assert len(await repo.find_recent_by_user(ALICE, limit=50)) == 2
        assert len(await repo.find_recent_by_user(UserId("bob"), limit=50)) == 2

    @pytest.mark.asyncio
    async def test_get_history_returns_latest_in_chronological_order(self, unit_env):
        chat_service = await unit_env.get(ChatService)
        for text in ["one", "two", "three"]:
            await chat_service.send_message(ALICE, text, history_window=0)

        history = await chat_service.get_history(ALICE, limit=2)

        assert [m.is_from_user for m in history] == [True, False]
        assert history[0].content == "three"
