"""PostgreSQL implementation of Analytics repository."""

from datetime import datetime
from typing import List

from sqlalchemy import desc, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from mindful.domain.model import PostStats, TagUsage, UserStats
from mindful.domain.repository import AnalyticsRepository
from mindful.persistence.error import execute
from mindful.persistence.tables import post_tags_table, posts_table, tags_table, users_table


class PostgresAnalyticsRepository(AnalyticsRepository):
    """PostgreSQL implementation of AnalyticsRepository.

    Each statistic is computed with a single aggregate query.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def post_stats(self, since: datetime) -> PostStats:
        """Count all posts and recently created posts."""
        stmt = select(
            func.count().label("total"),
            func.count().filter(posts_table.c.created_at >= since).label("recent"),
        ).select_from(posts_table)
        result = await execute(self.session, stmt)
        row = result.one()
        return PostStats(total_posts=row.total, recent_posts=row.recent)

    async def user_stats(self, since: datetime) -> UserStats:
        """Count all users and recently active users."""
        stmt = select(
            func.count().label("total"),
            func.count().filter(users_table.c.updated_at >= since).label("active"),
        ).select_from(users_table)
        result = await execute(self.session, stmt)
        row = result.one()
        return UserStats(total_users=row.total, active_users=row.active)

    async def top_tags(self, limit: int = 10) -> List[TagUsage]:
        """Rank tags by number of linked posts, including unused tags."""
        post_count = func.count(post_tags_table.c.post_id).label("count")
        stmt = (
            select(tags_table.c.name, tags_table.c.color, post_count)
            .select_from(tags_table)
            .outerjoin(post_tags_table, post_tags_table.c.tag_id == tags_table.c.id)
            .group_by(tags_table.c.id, tags_table.c.name, tags_table.c.color)
            .order_by(desc(post_count), tags_table.c.name)
            .limit(limit)
        )
        result = await execute(self.session, stmt)
        return [
            TagUsage(tag_name=row.name, tag_color=row.color, count=row.count)
            for row in result.fetchall()
        ]
