"""Translation of database driver errors into domain persistence errors."""

import logfire
from sqlalchemy.engine import Result
from sqlalchemy.exc import DBAPIError, IntegrityError, InterfaceError, OperationalError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import Executable

from mindful.domain.error import (
    PersistenceConflictError,
    PersistenceError,
    PersistenceUnavailableError,
)

# SQLSTATE codes raised when PostgreSQL aborts a transaction because of
# concurrent activity
SERIALIZATION_FAILURE = "40001"
DEADLOCK_DETECTED = "40P01"


def _sqlstate(error: DBAPIError) -> str | None:
    orig = error.orig
    return getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)


def translate_database_error(error: DBAPIError) -> PersistenceError:
    """Map a SQLAlchemy driver error to a persistence error.

    Args:
        error: The error raised by SQLAlchemy

    Returns:
        The matching persistence error (not raised)
    """
    if isinstance(error, IntegrityError) or _sqlstate(error) in (
        SERIALIZATION_FAILURE,
        DEADLOCK_DETECTED,
    ):
        logfire.warn("Database conflict", error=str(error.orig))
        return PersistenceConflictError(
            "The resource was modified concurrently; please retry"
        )

    if (
        isinstance(error, (OperationalError, InterfaceError))
        or error.connection_invalidated
    ):
        logfire.error("Database unavailable", error=str(error.orig))
        return PersistenceUnavailableError("The database is unavailable")

    logfire.error("Database error", error=str(error.orig))
    return PersistenceError("Unexpected database error")


async def execute(session: AsyncSession, statement: Executable) -> Result:
    """Execute a statement on the session, translating driver errors.

    Args:
        session: Request's database session
        statement: Statement to execute

    Returns:
        The statement's result

    Raises:
        PersistenceConflictError: On a constraint violation, serialization
            failure or deadlock
        PersistenceUnavailableError: If the database cannot be reached
    """
    try:
        return await session.execute(statement)
    except DBAPIError as e:
        raise translate_database_error(e) from e
