"""PostgreSQL implementation of User repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from mindful.domain.model import User
from mindful.domain.repository import UserRepository
from mindful.domain.value import UserId
from mindful.persistence.error import execute
from mindful.persistence.mappers import row_to_user, user_to_dict
from mindful.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: User ID to look up

        Returns:
            User if found, None otherwise
        """
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await execute(self.session, stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def upsert(self, user: User) -> User:
        """Insert the user or refresh the profile of an existing one.

        Args:
            user: User to store

        Returns:
            The stored user
        """
        values = user_to_dict(user)
        stmt = pg_insert(users_table).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=[users_table.c.id],
            set_={
                "email": stmt.excluded.email,
                "first_name": stmt.excluded.first_name,
                "last_name": stmt.excluded.last_name,
                "profile_image_url": stmt.excluded.profile_image_url,
                "updated_at": stmt.excluded.updated_at,
            },
        ).returning(users_table)
        result = await execute(self.session, stmt)
        return row_to_user(dict(result.mappings().one()))
