"""Doctor directory domain service."""

import logfire

from mindful.domain.error import BusinessRuleViolationError, NotFoundError
from mindful.domain.model.doctor import Doctor, DoctorConnection
from mindful.domain.repository import DoctorConnectionRepository, DoctorRepository
from mindful.domain.value import DoctorId, UserId

from .base import Service


class DoctorService(Service):
    """Domain service for the doctor directory and connection requests."""

    def __init__(
        self,
        doctor_repository: DoctorRepository,
        connection_repository: DoctorConnectionRepository,
    ) -> None:
        """Initialize doctor service.

        Args:
            doctor_repository: Doctor repository
            connection_repository: Doctor connection repository
        """
        self.doctor_repository = doctor_repository
        self.connection_repository = connection_repository

    async def list_doctors(self, specialization: str | None = None) -> list[Doctor]:
        """List doctors ordered by name, optionally by specialization."""
        with logfire.span(
            "doctor_service.list_doctors", specialization=specialization
        ):
            doctors = await self.doctor_repository.find_all(specialization)
            logfire.info("Doctors listed", count=len(doctors))
            return doctors

    async def search_doctors(self, query: str) -> list[Doctor]:
        """Search doctors by name or specialization."""
        with logfire.span("doctor_service.search_doctors", query_length=len(query)):
            return await self.doctor_repository.search(query)

    async def get_doctor(self, doctor_id: DoctorId) -> Doctor:
        """Get a doctor by ID.

        Raises:
            NotFoundError: If doctor not found
        """
        with logfire.span("doctor_service.get_doctor", doctor_id=str(doctor_id)):
            doctor = await self.doctor_repository.find_by_id(doctor_id)
            if not doctor:
                logfire.warn("Doctor not found", doctor_id=str(doctor_id))
                raise NotFoundError("Doctor", str(doctor_id))
            return doctor

    async def request_connection(
        self, user_id: UserId, doctor_id: DoctorId, message: str | None = None
    ) -> DoctorConnection:
        """Ask to be connected with a doctor.

        Args:
            user_id: Requesting user
            doctor_id: Doctor to connect with
            message: Optional note for the doctor

        Returns:
            The pending connection request

        Raises:
            NotFoundError: If doctor not found
            BusinessRuleViolationError: If the user already has a pending
                request to this doctor
        """
        with logfire.span(
            "doctor_service.request_connection",
            user_id=str(user_id),
            doctor_id=str(doctor_id),
        ):
            await self.get_doctor(doctor_id)

            pending = await self.connection_repository.find_pending(user_id, doctor_id)
            if pending:
                logfire.warn(
                    "Duplicate connection request",
                    user_id=str(user_id),
                    doctor_id=str(doctor_id),
                )
                raise BusinessRuleViolationError(
                    "Connection request already pending"
                )

            connection = await self.connection_repository.save(
                DoctorConnection(user_id=user_id, doctor_id=doctor_id, message=message)
            )
            logfire.info("Connection requested", connection_id=str(connection.id))
            return connection

    async def list_connections(self, user_id: UserId) -> list[DoctorConnection]:
        """List a user's connection requests, newest first."""
        with logfire.span("doctor_service.list_connections", user_id=str(user_id)):
            return await self.connection_repository.find_by_user(user_id)
