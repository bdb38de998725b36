"""List and search doctors use cases."""

from pydantic import BaseModel, Field

from mindful.domain.service import DoctorService

from .common import DoctorResponse


class ListDoctorsRequest(BaseModel):
    """List doctors request."""

    specialization: str | None = None


class SearchDoctorsRequest(BaseModel):
    """Search doctors request."""

    query: str = Field(min_length=1)


class ListDoctorsUseCase:
    """Use case for browsing the doctor directory."""

    def __init__(self, doctor_service: DoctorService) -> None:
        self.doctor_service = doctor_service

    async def execute(self, request: ListDoctorsRequest) -> list[DoctorResponse]:
        """Return doctors ordered by name, optionally by specialization."""
        doctors = await self.doctor_service.list_doctors(request.specialization)
        return [DoctorResponse.from_doctor(doctor) for doctor in doctors]


class SearchDoctorsUseCase:
    """Use case for searching the doctor directory."""

    def __init__(self, doctor_service: DoctorService) -> None:
        self.doctor_service = doctor_service

    async def execute(self, request: SearchDoctorsRequest) -> list[DoctorResponse]:
        """Return doctors whose name or specialization matches the query."""
        doctors = await self.doctor_service.search_doctors(request.query)
        return [DoctorResponse.from_doctor(doctor) for doctor in doctors]
