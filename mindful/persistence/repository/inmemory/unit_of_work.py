"""In-memory unit of work for testing."""

from mindful.domain.repository import UnitOfWork


class InMemoryUnitOfWork(UnitOfWork):
    """Unit of work whose writes are applied immediately.

    Counts commits so tests can assert that a use case committed.
    """

    def __init__(self) -> None:
        self.commits = 0

    async def commit(self) -> None:
        self.commits += 1

    async def rollback(self) -> None:
        pass
