"""Unit tests for CommentService."""

import pytest

from mindful.domain.error import ValidationError
from mindful.domain.repository import PostRepository
from mindful.domain.service import CommentService
from mindful.domain.value import CommentId, UserId
from tests.conftest import make_post
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestCreateComment:
    """Tests for create_comment."""

    @pytest.mark.asyncio
    async def test_reply_to_comment_on_same_post(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post())

        parent = await comment_service.create_comment(
            post.id, UserId("alice"), "You are not alone."
        )
        reply = await comment_service.create_comment(
            post.id, UserId("bob"), "Thank you!", parent_id=parent.id
        )

        assert reply.parent_id == parent.id
        comments = await comment_service.get_comments_for_post(post.id)
        assert [c.id for c in comments] == [reply.id, parent.id]

    @pytest.mark.asyncio
    async def test_missing_parent_rejected(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post())

        with pytest.raises(ValidationError, match="Parent comment not found"):
            await comment_service.create_comment(
                post.id, UserId("alice"), "Hello", parent_id=CommentId(999)
            )

    @pytest.mark.asyncio
    async def test_parent_on_other_post_rejected(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post(title="One"))
        other = await post_repo.save(make_post(title="Two"))
        parent = await comment_service.create_comment(other.id, UserId("alice"), "Hi")

        with pytest.raises(ValidationError):
            await comment_service.create_comment(
                post.id, UserId("bob"), "Reply", parent_id=parent.id
            )
