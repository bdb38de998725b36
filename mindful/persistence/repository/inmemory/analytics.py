"""In-memory analytics repository for testing."""

from collections import Counter
from datetime import datetime

from mindful.domain.model import PostStats, TagUsage, UserStats
from mindful.domain.repository import AnalyticsRepository

from .store import InMemoryStore


class InMemoryAnalyticsRepository(AnalyticsRepository):
    """In-memory implementation of AnalyticsRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def post_stats(self, since: datetime) -> PostStats:
        posts = list(self._store.posts.values())
        return PostStats(
            total_posts=len(posts),
            recent_posts=sum(1 for p in posts if p.created_at >= since),
        )

    async def user_stats(self, since: datetime) -> UserStats:
        users = list(self._store.users.values())
        return UserStats(
            total_users=len(users),
            active_users=sum(1 for u in users if u.updated_at >= since),
        )

    async def top_tags(self, limit: int = 10) -> list[TagUsage]:
        counts = Counter(tag_id for _, tag_id in self._store.post_tags)
        usage = [
            TagUsage(tag_name=tag.name.root, tag_color=tag.color, count=counts[tag_id])
            for tag_id, tag in self._store.tags.items()
        ]
        usage.sort(key=lambda u: (-u.count, u.tag_name))
        return usage[:limit]
