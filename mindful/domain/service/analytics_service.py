"""Analytics domain service."""

from datetime import timedelta

import logfire

from mindful.domain.model.analytics import PostStats, TagUsage, UserStats
from mindful.domain.model.common import utcnow
from mindful.domain.repository import AnalyticsRepository

from .base import Service


class AnalyticsService(Service):
    """Domain service for community analytics."""

    def __init__(self, analytics_repository: AnalyticsRepository) -> None:
        """Initialize analytics service.

        Args:
            analytics_repository: Analytics repository
        """
        self.analytics_repository = analytics_repository

    async def post_stats(self, window_days: int) -> PostStats:
        """Post totals and posts created within the last ``window_days``."""
        with logfire.span("analytics_service.post_stats", window_days=window_days):
            since = utcnow() - timedelta(days=window_days)
            return await self.analytics_repository.post_stats(since)

    async def user_stats(self, window_days: int) -> UserStats:
        """User totals and users active within the last ``window_days``."""
        with logfire.span("analytics_service.user_stats", window_days=window_days):
            since = utcnow() - timedelta(days=window_days)
            return await self.analytics_repository.user_stats(since)

    async def top_tags(self, limit: int) -> list[TagUsage]:
        """Most used tags."""
        with logfire.span("analytics_service.top_tags", limit=limit):
            return await self.analytics_repository.top_tags(limit)
