"""In-memory doctor directory repositories for testing."""

from typing import Optional

from mindful.domain.model import Doctor, DoctorConnection
from mindful.domain.repository import DoctorConnectionRepository, DoctorRepository
from mindful.domain.value import (
    ConnectionStatus,
    DoctorConnectionId,
    DoctorId,
    UserId,
)

from .store import InMemoryStore


class InMemoryDoctorRepository(DoctorRepository):
    """In-memory implementation of DoctorRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find_by_id(self, doctor_id: DoctorId) -> Optional[Doctor]:
        """Find a doctor by ID."""
        return self._store.doctors.get(doctor_id)

    async def find_all(self, specialization: Optional[str] = None) -> list[Doctor]:
        """Find doctors ordered by name."""
        doctors = [
            d
            for d in self._store.doctors.values()
            if not specialization or d.specialization == specialization
        ]
        return sorted(doctors, key=lambda d: d.name)

    async def search(self, query: str) -> list[Doctor]:
        """Case-insensitive search on name or specialization."""
        needle = query.lower()
        doctors = [
            d
            for d in self._store.doctors.values()
            if needle in d.name.lower() or needle in d.specialization.lower()
        ]
        return sorted(doctors, key=lambda d: d.name)

    async def save(self, doctor: Doctor) -> Doctor:
        """Save a new doctor."""
        saved = doctor.model_copy(update={"id": DoctorId(self._store.next_id())})
        self._store.doctors[saved.id] = saved
        return saved


class InMemoryDoctorConnectionRepository(DoctorConnectionRepository):
    """In-memory implementation of DoctorConnectionRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find_by_user(self, user_id: UserId) -> list[DoctorConnection]:
        """Find a user's requests, newest first."""
        connections = [
            c for c in self._store.doctor_connections.values() if c.user_id == user_id
        ]
        return sorted(
            connections, key=lambda c: (c.created_at, c.id or 0), reverse=True
        )

    async def find_pending(
        self, user_id: UserId, doctor_id: DoctorId
    ) -> Optional[DoctorConnection]:
        """Find the pending request for a user and doctor."""
        for connection in self._store.doctor_connections.values():
            if (
                connection.user_id == user_id
                and connection.doctor_id == doctor_id
                and connection.status == ConnectionStatus.PENDING
            ):
                return connection
        return None

    async def save(self, connection: DoctorConnection) -> DoctorConnection:
        """Save a new request."""
        saved = connection.model_copy(
            update={"id": DoctorConnectionId(self._store.next_id())}
        )
        self._store.doctor_connections[saved.id] = saved
        return saved
