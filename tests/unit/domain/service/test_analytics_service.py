"""Unit tests for AnalyticsService."""

from datetime import timedelta

import pytest

from mindful.domain.model import User
from mindful.domain.model.common import utcnow
from mindful.domain.repository import PostRepository, UserRepository
from mindful.domain.service import AnalyticsService, TagService
from mindful.domain.value import TagName, UserId
from tests.conftest import make_post
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestAnalyticsService:
    """Tests for AnalyticsService."""

    @pytest.mark.asyncio
    async def test_post_stats_counts_recent_window(self, unit_env):
        analytics_service = await unit_env.get(AnalyticsService)
        post_repo = await unit_env.get(PostRepository)
        old = utcnow() - timedelta(days=30)
        await post_repo.save(make_post(created_at=old, updated_at=old))
        await post_repo.save(make_post())

        stats = await analytics_service.post_stats(window_days=7)

        assert stats.total_posts == 2
        assert stats.recent_posts == 1
        assert stats.growth == 50.0

    @pytest.mark.asyncio
    async def test_user_stats_use_last_activity(self, unit_env):
        analytics_service = await unit_env.get(AnalyticsService)
        user_repo = await unit_env.get(UserRepository)
        old = utcnow() - timedelta(days=30)
        await user_repo.upsert(User(id=UserId("idle"), created_at=old, updated_at=old))
        await user_repo.upsert(User(id=UserId("active")))

        stats = await analytics_service.user_stats(window_days=7)

        assert stats.total_users == 2
        assert stats.active_users == 1

    @pytest.mark.asyncio
    async def test_top_tags_include_unused_tags(self, unit_env):
        analytics_service = await unit_env.get(AnalyticsService)
        tag_service = await unit_env.get(TagService)
        post_repo = await unit_env.get(PostRepository)
        first = await post_repo.save(make_post())
        second = await post_repo.save(make_post())
        await tag_service.tag_post(first.id, [TagName("sleep"), TagName("stress")])
        await tag_service.tag_post(second.id, [TagName("sleep")])
        await tag_service.get_or_create_tag(TagName("grief"))

        usage = await analytics_service.top_tags(limit=10)

        assert [(u.tag_name, u.count) for u in usage] == [
            ("sleep", 2),
            ("stress", 1),
            ("grief", 0),
        ]
