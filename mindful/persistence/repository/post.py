"""PostgreSQL implementation of Post repository."""

from typing import List, Optional

import logfire
from sqlalchemy import delete, desc, func, insert, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from mindful.domain.model import Post
from mindful.domain.repository import PostRepository
from mindful.domain.value import PostId, UserId
from mindful.persistence.error import execute
from mindful.persistence.mappers import post_to_dict, row_to_post
from mindful.persistence.tables import posts_table


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(
        self, post_id: PostId, for_update: bool = False
    ) -> Optional[Post]:
        """Find a post by ID, optionally locking its row."""
        with logfire.span(
            "post_repository.find_by_id", post_id=str(post_id), for_update=for_update
        ):
            stmt = select(posts_table).where(posts_table.c.id == post_id)
            if for_update:
                stmt = stmt.with_for_update()
            result = await execute(self.session, stmt)
            row = result.fetchone()
            return row_to_post(row._asdict()) if row else None

    async def find_all(self, limit: int = 50, offset: int = 0) -> List[Post]:
        """Find posts newest first."""
        stmt = (
            select(posts_table)
            .order_by(desc(posts_table.c.created_at), desc(posts_table.c.id))
            .limit(limit)
            .offset(offset)
        )
        result = await execute(self.session, stmt)
        return [row_to_post(row._asdict()) for row in result.fetchall()]

    async def find_by_author(self, author_id: UserId) -> List[Post]:
        """Find posts by a specific author, newest first."""
        stmt = (
            select(posts_table)
            .where(posts_table.c.author_id == author_id)
            .order_by(desc(posts_table.c.created_at), desc(posts_table.c.id))
        )
        result = await execute(self.session, stmt)
        return [row_to_post(row._asdict()) for row in result.fetchall()]

    async def search(self, query: str) -> List[Post]:
        """Case-insensitive substring search on title or content."""
        stmt = (
            select(posts_table)
            .where(
                or_(
                    posts_table.c.title.icontains(query, autoescape=True),
                    posts_table.c.content.icontains(query, autoescape=True),
                )
            )
            .order_by(desc(posts_table.c.created_at), desc(posts_table.c.id))
        )
        result = await execute(self.session, stmt)
        return [row_to_post(row._asdict()) for row in result.fetchall()]

    async def save(self, post: Post) -> Post:
        """Insert a new post."""
        stmt = insert(posts_table).values(**post_to_dict(post)).returning(posts_table)
        result = await execute(self.session, stmt)
        return row_to_post(result.one()._asdict())

    async def delete(self, post_id: PostId) -> None:
        """Delete a post. Votes, comments and tag links cascade."""
        stmt = delete(posts_table).where(posts_table.c.id == post_id)
        await execute(self.session, stmt)

    async def adjust_votes(self, post_id: PostId, delta: int) -> None:
        """Atomically add ``delta`` to the vote tally."""
        stmt = (
            update(posts_table)
            .where(posts_table.c.id == post_id)
            .values(votes=posts_table.c.votes + delta, updated_at=func.now())
        )
        await execute(self.session, stmt)

    async def increment_comment_count(self, post_id: PostId) -> None:
        """Atomically increment the comment count."""
        stmt = (
            update(posts_table)
            .where(posts_table.c.id == post_id)
            .values(comment_count=posts_table.c.comment_count + 1)
        )
        await execute(self.session, stmt)
