"""Analytics repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List

from mindful.domain.model.analytics import PostStats, TagUsage, UserStats


class AnalyticsRepository(ABC):
    """Read-only aggregate queries over community activity."""

    @abstractmethod
    async def post_stats(self, since: datetime) -> PostStats:
        """Count all posts and the posts created at or after ``since``."""
        pass

    @abstractmethod
    async def user_stats(self, since: datetime) -> UserStats:
        """Count all users and the users updated at or after ``since``."""
        pass

    @abstractmethod
    async def top_tags(self, limit: int = 10) -> List[TagUsage]:
        """Rank tags by number of linked posts.

        Tags without posts are included with a count of zero.

        Args:
            limit: Maximum number of tags to return

        Returns:
            Tag usage, most used first
        """
        pass
