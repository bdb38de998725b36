"""Unit tests for GetAnalyticsUseCase."""

import pytest

from mindful.application.usecase.analytics import GetAnalyticsUseCase
from mindful.application.usecase.post import CreatePostRequest, CreatePostUseCase
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestGetAnalytics:
    """Tests for GetAnalyticsUseCase."""

    @pytest.mark.asyncio
    async def test_empty_store(self, unit_env):
        use_case = await unit_env.get(GetAnalyticsUseCase)

        posts = await use_case.posts()
        users = await use_case.users()

        assert (posts.total_posts, posts.recent_posts, posts.growth) == (0, 0, 0)
        assert (users.total_users, users.active_users, users.growth) == (0, 0, 0)
        assert await use_case.tags() == []

    @pytest.mark.asyncio
    async def test_camel_case_payloads(self, unit_env):
        create = await unit_env.get(CreatePostUseCase)
        use_case = await unit_env.get(GetAnalyticsUseCase)
        await create.execute(
            CreatePostRequest(
                title="T", content="C", tag_names=["sleep"], author_id="alice"
            )
        )

        posts = (await use_case.posts()).model_dump(by_alias=True)
        tags = [t.model_dump(by_alias=True) for t in await use_case.tags()]

        assert posts == {"totalPosts": 1, "recentPosts": 1, "growth": 100.0}
        assert tags == [{"tagName": "sleep", "tagColor": "#3b82f6", "count": 1}]
