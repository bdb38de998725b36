"""Get doctor use case."""

from pydantic import BaseModel

from mindful.domain.service import DoctorService
from mindful.domain.value import DoctorId

from .common import DoctorResponse


class GetDoctorRequest(BaseModel):
    """Get doctor request."""

    doctor_id: int


class GetDoctorUseCase:
    """Use case for fetching one doctor."""

    def __init__(self, doctor_service: DoctorService) -> None:
        self.doctor_service = doctor_service

    async def execute(self, request: GetDoctorRequest) -> DoctorResponse:
        """Return the doctor.

        Raises:
            NotFoundError: If doctor not found
        """
        doctor = await self.doctor_service.get_doctor(DoctorId(request.doctor_id))
        return DoctorResponse.from_doctor(doctor)
