"""Doctor connection use cases."""

from pydantic import BaseModel, Field

from mindful.application.usecase.base import BaseUseCase
from mindful.domain.repository import UnitOfWork
from mindful.domain.service import DoctorService
from mindful.domain.value import DoctorId, UserId

from .common import ConnectionResponse


class ConnectDoctorRequest(BaseModel):
    """Connect with doctor request."""

    doctor_id: int
    user_id: str  # User ID from authenticated user
    message: str | None = Field(default=None, max_length=2000)


class ListConnectionsRequest(BaseModel):
    """List connection requests request."""

    user_id: str


class ConnectDoctorUseCase(BaseUseCase):
    """Use case for asking to be connected with a doctor."""

    def __init__(self, doctor_service: DoctorService, unit_of_work: UnitOfWork) -> None:
        """Initialize connect doctor use case.

        Args:
            doctor_service: Doctor domain service
            unit_of_work: Transaction boundary
        """
        self.doctor_service = doctor_service
        self.unit_of_work = unit_of_work

    async def execute(self, request: ConnectDoctorRequest) -> ConnectionResponse:
        """Execute connect flow.

        Args:
            request: Connect request

        Returns:
            The pending connection request

        Raises:
            NotFoundError: If doctor not found
            BusinessRuleViolationError: If a request is already pending
        """
        connection = await self.doctor_service.request_connection(
            UserId(request.user_id), DoctorId(request.doctor_id), request.message
        )
        await self.unit_of_work.commit()
        return ConnectionResponse.from_connection(connection)


class ListConnectionsUseCase:
    """Use case for listing the caller's connection requests."""

    def __init__(self, doctor_service: DoctorService) -> None:
        self.doctor_service = doctor_service

    async def execute(self, request: ListConnectionsRequest) -> list[ConnectionResponse]:
        connections = await self.doctor_service.list_connections(
            UserId(request.user_id)
        )
        return [ConnectionResponse.from_connection(c) for c in connections]
