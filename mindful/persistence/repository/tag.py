"""PostgreSQL implementation of Tag repository."""

from collections import defaultdict
from typing import Dict, List, Optional, Sequence

from sqlalchemy import insert, select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from mindful.domain.model import Tag
from mindful.domain.repository import TagRepository
from mindful.domain.value import PostId, TagId, TagName
from mindful.persistence.error import execute
from mindful.persistence.mappers import row_to_tag, tag_to_dict
from mindful.persistence.tables import post_tags_table, tags_table


class PostgresTagRepository(TagRepository):
    """PostgreSQL implementation of TagRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_all(self) -> List[Tag]:
        """Find all tags ordered by name."""
        stmt = select(tags_table).order_by(tags_table.c.name)
        result = await execute(self.session, stmt)
        return [row_to_tag(row._asdict()) for row in result.fetchall()]

    async def find_by_name(self, name: TagName) -> Optional[Tag]:
        """Find a tag by its unique name."""
        stmt = select(tags_table).where(tags_table.c.name == name.root)
        result = await execute(self.session, stmt)
        row = result.fetchone()
        return row_to_tag(row._asdict()) if row else None

    async def save(self, tag: Tag) -> Tag:
        """Insert a new tag."""
        stmt = insert(tags_table).values(**tag_to_dict(tag)).returning(tags_table)
        result = await execute(self.session, stmt)
        return row_to_tag(result.one()._asdict())

    async def link_to_post(self, post_id: PostId, tag_id: TagId) -> None:
        """Link a tag to a post, ignoring an existing link."""
        stmt = (
            pg_insert(post_tags_table)
            .values(post_id=post_id, tag_id=tag_id)
            .on_conflict_do_nothing()
        )
        await execute(self.session, stmt)

    async def find_by_posts(self, post_ids: Sequence[PostId]) -> Dict[PostId, List[Tag]]:
        """Find the tags of multiple posts in a single query."""
        if not post_ids:
            return {}

        stmt = (
            select(post_tags_table.c.post_id, tags_table)
            .select_from(post_tags_table)
            .join(tags_table, post_tags_table.c.tag_id == tags_table.c.id)
            .where(post_tags_table.c.post_id.in_(post_ids))
            .order_by(tags_table.c.name)
        )
        result = await execute(self.session, stmt)

        # Build lookup: post_id -> [tags]
        post_tag_map: Dict[PostId, List[Tag]] = defaultdict(list)
        for row in result.mappings().all():
            post_tag_map[PostId(row["post_id"])].append(row_to_tag(dict(row)))

        return {post_id: post_tag_map.get(post_id, []) for post_id in post_ids}
