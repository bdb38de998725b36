"""PostgreSQL implementation of Vote repository."""

from typing import List, Optional, Sequence

from sqlalchemy import and_, delete, insert, select, update
from sqlalchemy.exc import DBAPIError
from sqlalchemy.ext.asyncio import AsyncSession

from mindful.domain.model import Vote
from mindful.domain.repository import VoteRepository
from mindful.domain.value import PostId, UserId, VoteId, VoteType
from mindful.persistence.error import execute, translate_database_error
from mindful.persistence.mappers import row_to_vote, vote_to_dict
from mindful.persistence.tables import post_votes_table


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_user_and_post(
        self, user_id: UserId, post_id: PostId
    ) -> Optional[Vote]:
        """Find a user's standing vote on a post."""
        stmt = select(post_votes_table).where(
            and_(
                post_votes_table.c.user_id == user_id,
                post_votes_table.c.post_id == post_id,
            )
        )
        result = await execute(self.session, stmt)
        row = result.fetchone()
        return row_to_vote(row._asdict()) if row else None

    async def find_by_user_and_posts(
        self, user_id: UserId, post_ids: Sequence[PostId]
    ) -> List[Vote]:
        """Find a user's votes on multiple posts (batch query)."""
        if not post_ids:
            return []

        stmt = select(post_votes_table).where(
            and_(
                post_votes_table.c.user_id == user_id,
                post_votes_table.c.post_id.in_(post_ids),
            )
        )
        result = await execute(self.session, stmt)
        return [row_to_vote(row._asdict()) for row in result.fetchall()]

    async def find_by_post(self, post_id: PostId) -> List[Vote]:
        """Find all votes standing on a post."""
        stmt = select(post_votes_table).where(post_votes_table.c.post_id == post_id)
        result = await execute(self.session, stmt)
        return [row_to_vote(row._asdict()) for row in result.fetchall()]

    async def save(self, vote: Vote) -> Vote:
        """Insert a new vote.

        Raises:
            PersistenceConflictError: If the user already has a vote on the post
        """
        stmt = (
            insert(post_votes_table)
            .values(**vote_to_dict(vote))
            .returning(post_votes_table)
        )
        try:
            # Savepoint keeps the surrounding transaction usable after a
            # unique violation
            async with self.session.begin_nested():
                result = await execute(self.session, stmt)
        except DBAPIError as e:
            raise translate_database_error(e) from e
        return row_to_vote(result.one()._asdict())

    async def update_vote_type(self, vote_id: VoteId, vote_type: VoteType) -> None:
        """Change the direction of an existing vote in place."""
        stmt = (
            update(post_votes_table)
            .where(post_votes_table.c.id == vote_id)
            .values(vote_type=vote_type.value)
        )
        await execute(self.session, stmt)

    async def delete(self, vote_id: VoteId) -> None:
        """Delete a vote."""
        stmt = delete(post_votes_table).where(post_votes_table.c.id == vote_id)
        await execute(self.session, stmt)
