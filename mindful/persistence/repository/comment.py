"""PostgreSQL implementation of Comment repository."""

from typing import List, Optional

from sqlalchemy import desc, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from mindful.domain.model import Comment
from mindful.domain.repository import CommentRepository
from mindful.domain.value import CommentId, PostId
from mindful.persistence.error import execute
from mindful.persistence.mappers import comment_to_dict, row_to_comment
from mindful.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await execute(self.session, stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_by_post(self, post_id: PostId) -> List[Comment]:
        """Find all comments on a post, newest first."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.post_id == post_id)
            .order_by(desc(comments_table.c.created_at), desc(comments_table.c.id))
        )
        result = await execute(self.session, stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def save(self, comment: Comment) -> Comment:
        """Insert a new comment."""
        stmt = (
            insert(comments_table)
            .values(**comment_to_dict(comment))
            .returning(comments_table)
        )
        result = await execute(self.session, stmt)
        return row_to_comment(result.one()._asdict())
