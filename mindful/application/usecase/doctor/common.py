"""Doctor directory response models."""

from datetime import datetime

from mindful.application.usecase.base import ResponseModel
from mindful.domain.model import Doctor, DoctorConnection
from mindful.domain.value import ConnectionStatus


class DoctorResponse(ResponseModel):
    """Doctor in responses."""

    id: int
    name: str
    specialization: str
    experience: int
    rating: int
    bio: str | None
    profile_image_url: str | None
    is_available: bool
    next_available: str | None
    created_at: datetime

    @classmethod
    def from_doctor(cls, doctor: Doctor) -> "DoctorResponse":
        return cls(
            id=doctor.id,
            name=doctor.name,
            specialization=doctor.specialization,
            experience=doctor.experience,
            rating=doctor.rating,
            bio=doctor.bio,
            profile_image_url=doctor.profile_image_url,
            is_available=doctor.is_available,
            next_available=doctor.next_available,
            created_at=doctor.created_at,
        )


class ConnectionResponse(ResponseModel):
    """Doctor connection request in responses."""

    id: int
    user_id: str
    doctor_id: int
    status: ConnectionStatus
    message: str | None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_connection(cls, connection: DoctorConnection) -> "ConnectionResponse":
        return cls(
            id=connection.id,
            user_id=str(connection.user_id),
            doctor_id=connection.doctor_id,
            status=connection.status,
            message=connection.message,
            created_at=connection.created_at,
            updated_at=connection.updated_at,
        )
