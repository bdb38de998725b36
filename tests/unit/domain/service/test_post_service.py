"""Unit tests for PostService."""

from unittest.mock import patch

import pytest

from mindful.domain.error import NotAuthorizedError, NotFoundError
from mindful.domain.model import Comment, Vote
from mindful.domain.repository import (
    CommentRepository,
    PostRepository,
    TagRepository,
    VoteRepository,
)
from mindful.domain.service import PostService, TagService
from mindful.domain.value import PostId, TagName, UserId, VoteType
from tests.conftest import make_post
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestQueries:
    """Tests for post lookups."""

    @pytest.mark.asyncio
    async def test_require_post_missing_raises(self, unit_env):
        post_service = await unit_env.get(PostService)

        with pytest.raises(NotFoundError, match="Post not found"):
            await post_service.require_post(PostId(404))

    @pytest.mark.asyncio
    async def test_list_posts_newest_first_with_paging(self, unit_env):
        post_service = await unit_env.get(PostService)
        first = await post_service.save_post(make_post(title="First"))
        second = await post_service.save_post(make_post(title="Second"))
        third = await post_service.save_post(make_post(title="Third"))

        page = await post_service.list_posts(limit=2, offset=0)
        rest = await post_service.list_posts(limit=2, offset=2)

        assert [p.id for p in page] == [third.id, second.id]
        assert [p.id for p in rest] == [first.id]

    @pytest.mark.asyncio
    async def test_search_is_case_insensitive_over_title_and_content(self, unit_env):
        post_service = await unit_env.get(PostService)
        by_title = await post_service.save_post(make_post(title="Coping with ANXIETY"))
        by_content = await post_service.save_post(
            make_post(title="Evenings", content="My anxiety peaks at night.")
        )
        await post_service.save_post(make_post(title="Sleep", content="Unrelated"))

        results = await post_service.search_posts("anxiety")

        assert {p.id for p in results} == {by_title.id, by_content.id}

    @pytest.mark.asyncio
    async def test_list_posts_by_author(self, unit_env):
        post_service = await unit_env.get(PostService)
        mine = await post_service.save_post(make_post(author_id="me", is_anonymous=True))
        await post_service.save_post(make_post(author_id="someone-else"))

        results = await post_service.list_posts_by_author(UserId("me"))

        assert [p.id for p in results] == [mine.id]


class TestDeletePost:
    """Tests for delete_post."""

    @pytest.mark.asyncio
    async def test_author_can_delete_and_children_are_removed(self, unit_env):
        """Deleting a post removes its votes, comments and tag links."""
        # Arrange
        post_service = await unit_env.get(PostService)
        tag_service = await unit_env.get(TagService)
        post_repo = await unit_env.get(PostRepository)
        vote_repo = await unit_env.get(VoteRepository)
        comment_repo = await unit_env.get(CommentRepository)
        tag_repo = await unit_env.get(TagRepository)

        post = await post_repo.save(make_post(author_id="author"))
        await vote_repo.save(
            Vote(user_id=UserId("voter"), post_id=post.id, vote_type=VoteType.UP)
        )
        await comment_repo.save(
            Comment(post_id=post.id, author_id=UserId("voter"), content="Hugs")
        )
        await tag_service.tag_post(post.id, [TagName("anxiety")])

        # Act
        await post_service.delete_post(post.id, UserId("author"))

        # Assert
        assert await post_repo.find_by_id(post.id) is None
        assert await vote_repo.find_by_post(post.id) == []
        assert await comment_repo.find_by_post(post.id) == []
        assert (await tag_repo.find_by_posts([post.id]))[post.id] == []
        # The tag itself survives
        assert len(await tag_repo.find_all()) == 1

    @pytest.mark.asyncio
    async def test_non_author_cannot_delete(self, unit_env):
        post_service = await unit_env.get(PostService)
        post = await post_service.save_post(make_post(author_id="author"))

        with pytest.raises(NotAuthorizedError, match="Not authorized to delete this post"):
            await post_service.delete_post(post.id, UserId("intruder"))

        assert await post_service.get_post_by_id(post.id) is not None

    @pytest.mark.asyncio
    async def test_delete_missing_post_raises_not_found(self, unit_env):
        post_service = await unit_env.get(PostService)

        with pytest.raises(NotFoundError):
            await post_service.delete_post(PostId(123), UserId("author"))


class TestCounters:
    """Tests for denormalized counters."""

    @pytest.mark.asyncio
    async def test_adjust_votes_and_comment_count(self, unit_env):
        post_service = await unit_env.get(PostService)
        post = await post_service.save_post(make_post())

        await post_service.adjust_votes(post.id, -2)
        await post_service.adjust_votes(post.id, 0)
        await post_service.increment_comment_count(post.id)

        updated = await post_service.require_post(post.id)
        assert updated.votes == -2
        assert updated.comment_count == 1


class TestTelemetry:
    """Post text never reaches span or log attributes."""

    @pytest.mark.asyncio
    async def test_save_and_search_record_no_user_text(self, unit_env):
        # Arrange
        post_service = await unit_env.get(PostService)
        title = "My panic attack at work"

        # Act
        with patch("mindful.domain.service.post_service.logfire") as logfire:
            await post_service.save_post(make_post(title=title))
            await post_service.search_posts("panic attack")

        # Assert
        recorded = [
            value
            for call in logfire.span.call_args_list + logfire.info.call_args_list
            for value in call.kwargs.values()
        ]
        assert recorded
        assert title not in recorded
        assert "panic attack" not in recorded
        for call in logfire.span.call_args_list:
            assert "title" not in call.kwargs
            assert "query" not in call.kwargs
