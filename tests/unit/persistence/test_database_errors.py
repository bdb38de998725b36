"""Unit tests for driver error translation in the PostgreSQL repositories."""

import pytest
from sqlalchemy.exc import DBAPIError, IntegrityError, OperationalError

from mindful.domain.error import (
    PersistenceConflictError,
    PersistenceError,
    PersistenceUnavailableError,
)
from mindful.domain.model import Vote
from mindful.domain.value import PostId, UserId, VoteId, VoteType
from mindful.persistence.error import translate_database_error
from mindful.persistence.repository.post import PostgresPostRepository
from mindful.persistence.repository.vote import PostgresVoteRepository


class _DriverError(Exception):
    """Stands in for an asyncpg error carrying a SQLSTATE."""

    def __init__(self, sqlstate: str | None = None) -> None:
        super().__init__(f"driver error {sqlstate}")
        self.sqlstate = sqlstate


class FailingSession:
    """Session whose every statement fails with the given error."""

    def __init__(self, error: Exception) -> None:
        self.error = error
        self.statements = []

    async def execute(self, statement):
        self.statements.append(statement)
        raise self.error

    def begin_nested(self):
        return _Savepoint()


class _Savepoint:
    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        return False


def connection_refused() -> OperationalError:
    return OperationalError("SELECT", {}, ConnectionRefusedError("refused"))


def deadlock() -> DBAPIError:
    return DBAPIError("UPDATE", {}, _DriverError("40P01"))


class TestTranslateDatabaseError:
    """Tests for translate_database_error."""

    def test_operational_error_is_unavailable(self):
        assert isinstance(
            translate_database_error(connection_refused()), PersistenceUnavailableError
        )

    def test_deadlock_is_conflict(self):
        assert isinstance(translate_database_error(deadlock()), PersistenceConflictError)

    def test_serialization_failure_is_conflict(self):
        error = DBAPIError("UPDATE", {}, _DriverError("40001"))

        assert isinstance(translate_database_error(error), PersistenceConflictError)

    def test_unique_violation_is_conflict(self):
        error = IntegrityError("INSERT", {}, _DriverError("23505"))

        assert isinstance(translate_database_error(error), PersistenceConflictError)

    def test_other_driver_errors_are_generic(self):
        error = translate_database_error(DBAPIError("SELECT", {}, _DriverError("42P01")))

        assert type(error) is PersistenceError


class TestPostRepositoryErrors:
    """Driver errors never escape PostgresPostRepository untranslated."""

    @pytest.mark.asyncio
    async def test_lock_on_unreachable_database(self):
        repo = PostgresPostRepository(FailingSession(connection_refused()))

        with pytest.raises(PersistenceUnavailableError) as exc_info:
            await repo.find_by_id(PostId(1), for_update=True)

        assert isinstance(exc_info.value.__cause__, OperationalError)

    @pytest.mark.asyncio
    async def test_tally_update_deadlock(self):
        repo = PostgresPostRepository(FailingSession(deadlock()))

        with pytest.raises(PersistenceConflictError):
            await repo.adjust_votes(PostId(1), 2)


class TestVoteRepositoryErrors:
    """Driver errors never escape PostgresVoteRepository untranslated."""

    @pytest.mark.asyncio
    async def test_read_on_unreachable_database(self):
        repo = PostgresVoteRepository(FailingSession(connection_refused()))

        with pytest.raises(PersistenceUnavailableError):
            await repo.find_by_user_and_post(UserId("alice"), PostId(1))

    @pytest.mark.asyncio
    async def test_flip_deadlock(self):
        repo = PostgresVoteRepository(FailingSession(deadlock()))

        with pytest.raises(PersistenceConflictError):
            await repo.update_vote_type(VoteId(1), VoteType.DOWN)

    @pytest.mark.asyncio
    async def test_retract_on_unreachable_database(self):
        repo = PostgresVoteRepository(FailingSession(connection_refused()))

        with pytest.raises(PersistenceUnavailableError):
            await repo.delete(VoteId(1))

    @pytest.mark.asyncio
    async def test_duplicate_insert(self):
        session = FailingSession(IntegrityError("INSERT", {}, _DriverError("23505")))
        repo = PostgresVoteRepository(session)

        with pytest.raises(PersistenceConflictError):
            await repo.save(
                Vote(user_id=UserId("alice"), post_id=PostId(1), vote_type=VoteType.UP)
            )
