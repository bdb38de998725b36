"""Unit tests for comment and chat use cases."""

import pytest

from mindful.application.usecase.chat import (
    GetChatMessagesRequest,
    GetChatMessagesUseCase,
    SendChatMessageRequest,
    SendChatMessageUseCase,
)
from mindful.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
    GetCommentsRequest,
    GetCommentsUseCase,
)
from mindful.domain.error import ContentFlaggedError, NotFoundError
from mindful.domain.repository import PostRepository, UnitOfWork
from tests.conftest import make_post
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestCreateComment:
    """Tests for CreateCommentUseCase."""

    @pytest.mark.asyncio
    async def test_creates_comment_and_increments_count(self, unit_env):
        use_case = await unit_env.get(CreateCommentUseCase)
        post_repo = await unit_env.get(PostRepository)
        unit_of_work = await unit_env.get(UnitOfWork)
        post = await post_repo.save(make_post())

        response = await use_case.execute(
            CreateCommentRequest(post_id=post.id, content="Sending hugs", author_id="bob")
        )

        assert response.post_id == post.id
        assert (await post_repo.find_by_id(post.id)).comment_count == 1
        assert unit_of_work.commits == 1

    @pytest.mark.asyncio
    async def test_missing_post(self, unit_env):
        use_case = await unit_env.get(CreateCommentUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                CreateCommentRequest(post_id=9, content="Hi", author_id="bob")
            )

    @pytest.mark.asyncio
    async def test_flagged_comment_rejected(self, unit_env):
        use_case = await unit_env.get(CreateCommentUseCase)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post())

        with pytest.raises(ContentFlaggedError, match="Comment violates community guidelines"):
            await use_case.execute(
                CreateCommentRequest(
                    post_id=post.id, content="mean [flagged]", author_id="bob"
                )
            )

        assert (await post_repo.find_by_id(post.id)).comment_count == 0

    @pytest.mark.asyncio
    async def test_comments_on_missing_post_are_empty(self, unit_env):
        use_case = await unit_env.get(GetCommentsUseCase)

        assert await use_case.execute(GetCommentsRequest(post_id=77)) == []


class TestChat:
    """Tests for chat use cases."""

    @pytest.mark.asyncio
    async def test_send_then_read_back(self, unit_env):
        send = await unit_env.get(SendChatMessageUseCase)
        read = await unit_env.get(GetChatMessagesUseCase)
        unit_of_work = await unit_env.get(UnitOfWork)

        sent = await send.execute(SendChatMessageRequest(user_id="alice", content="Hi"))
        history = await read.execute(GetChatMessagesRequest(user_id="alice"))

        assert sent.user_message.is_from_user is True
        assert sent.ai_message.is_from_user is False
        assert [m.id for m in history] == [sent.user_message.id, sent.ai_message.id]
        assert unit_of_work.commits == 1
        assert set(sent.model_dump(by_alias=True)) == {"userMessage", "aiMessage"}

    def test_limit_bounds(self):
        with pytest.raises(ValueError):
            GetChatMessagesRequest(user_id="alice", limit=101)
