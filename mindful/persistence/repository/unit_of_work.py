"""SQLAlchemy session backed unit of work."""

import logfire
from sqlalchemy.exc import DBAPIError
from sqlalchemy.ext.asyncio import AsyncSession

from mindful.domain.repository import UnitOfWork
from mindful.persistence.error import translate_database_error


class SqlAlchemyUnitOfWork(UnitOfWork):
    """Unit of work over the request's database session."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize unit of work.

        Args:
            session: SQLAlchemy async session shared with the repositories
        """
        self.session = session

    async def commit(self) -> None:
        """Commit the session's transaction.

        Raises:
            PersistenceError: Translated from the driver error if the commit
                fails; the transaction is rolled back first
        """
        try:
            await self.session.commit()
        except DBAPIError as e:
            await self.session.rollback()
            raise translate_database_error(e) from e
        logfire.debug("Transaction committed")

    async def rollback(self) -> None:
        """Roll back the session's transaction."""
        await self.session.rollback()
