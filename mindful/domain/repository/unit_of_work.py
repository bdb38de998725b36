"""Unit of work interface."""

from abc import ABC, abstractmethod


class UnitOfWork(ABC):
    """Transaction boundary for a single request.

    Write use cases commit explicitly so that a failing commit is reported
    to the caller instead of after the response has been sent.
    """

    @abstractmethod
    async def commit(self) -> None:
        """Commit all changes made in the current transaction.

        Raises:
            PersistenceConflictError: If the store rejects the transaction
                because of a concurrent modification
            PersistenceUnavailableError: If the store cannot be reached
        """
        pass

    @abstractmethod
    async def rollback(self) -> None:
        """Discard all changes made in the current transaction."""
        pass
