"""PostgreSQL implementation of the doctor directory repositories."""

from typing import List, Optional

from sqlalchemy import and_, desc, insert, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from mindful.domain.model import Doctor, DoctorConnection
from mindful.domain.repository import DoctorConnectionRepository, DoctorRepository
from mindful.domain.value import ConnectionStatus, DoctorId, UserId
from mindful.persistence.error import execute
from mindful.persistence.mappers import (
    doctor_connection_to_dict,
    doctor_to_dict,
    row_to_doctor,
    row_to_doctor_connection,
)
from mindful.persistence.tables import doctor_connections_table, doctors_table


class PostgresDoctorRepository(DoctorRepository):
    """PostgreSQL implementation of DoctorRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, doctor_id: DoctorId) -> Optional[Doctor]:
        """Find a doctor by ID."""
        stmt = select(doctors_table).where(doctors_table.c.id == doctor_id)
        result = await execute(self.session, stmt)
        row = result.fetchone()
        return row_to_doctor(row._asdict()) if row else None

    async def find_all(self, specialization: Optional[str] = None) -> List[Doctor]:
        """Find doctors ordered by name."""
        stmt = select(doctors_table).order_by(doctors_table.c.name)
        if specialization:
            stmt = stmt.where(doctors_table.c.specialization == specialization)
        result = await execute(self.session, stmt)
        return [row_to_doctor(row._asdict()) for row in result.fetchall()]

    async def search(self, query: str) -> List[Doctor]:
        """Case-insensitive search on name or specialization."""
        stmt = (
            select(doctors_table)
            .where(
                or_(
                    doctors_table.c.name.icontains(query, autoescape=True),
                    doctors_table.c.specialization.icontains(query, autoescape=True),
                )
            )
            .order_by(doctors_table.c.name)
        )
        result = await execute(self.session, stmt)
        return [row_to_doctor(row._asdict()) for row in result.fetchall()]

    async def save(self, doctor: Doctor) -> Doctor:
        """Insert a new doctor."""
        stmt = (
            insert(doctors_table)
            .values(**doctor_to_dict(doctor))
            .returning(doctors_table)
        )
        result = await execute(self.session, stmt)
        return row_to_doctor(result.one()._asdict())


class PostgresDoctorConnectionRepository(DoctorConnectionRepository):
    """PostgreSQL implementation of DoctorConnectionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_user(self, user_id: UserId) -> List[DoctorConnection]:
        """Find a user's connection requests, newest first."""
        stmt = (
            select(doctor_connections_table)
            .where(doctor_connections_table.c.user_id == user_id)
            .order_by(
                desc(doctor_connections_table.c.created_at),
                desc(doctor_connections_table.c.id),
            )
        )
        result = await execute(self.session, stmt)
        return [row_to_doctor_connection(row._asdict()) for row in result.fetchall()]

    async def find_pending(
        self, user_id: UserId, doctor_id: DoctorId
    ) -> Optional[DoctorConnection]:
        """Find the user's pending request to a doctor."""
        stmt = select(doctor_connections_table).where(
            and_(
                doctor_connections_table.c.user_id == user_id,
                doctor_connections_table.c.doctor_id == doctor_id,
                doctor_connections_table.c.status == ConnectionStatus.PENDING.value,
            )
        )
        result = await execute(self.session, stmt)
        row = result.first()
        return row_to_doctor_connection(row._asdict()) if row else None

    async def save(self, connection: DoctorConnection) -> DoctorConnection:
        """Insert a new connection request."""
        stmt = (
            insert(doctor_connections_table)
            .values(**doctor_connection_to_dict(connection))
            .returning(doctor_connections_table)
        )
        result = await execute(self.session, stmt)
        return row_to_doctor_connection(result.one()._asdict())
