"""Doctor directory entities.

Doctors are listed in a curated directory. Users can ask to be put in touch
with a doctor through a connection request, which the practice later approves
or declines out of band.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from mindful.domain.model.common import DomainModel, utcnow
from mindful.domain.value import (
    ConnectionStatus,
    DoctorConnectionId,
    DoctorId,
    UserId,
)


class Doctor(DomainModel):
    """Doctor listed in the directory.

    ``rating`` is stored in tenths of a star (45 is 4.5 stars).
    """

    id: Optional[DoctorId] = None
    name: str = Field(min_length=1, max_length=255)
    specialization: str = Field(min_length=1, max_length=255)
    experience: int = Field(ge=0)  # Years in practice
    rating: int = Field(default=0, ge=0, le=50)
    bio: Optional[str] = None
    profile_image_url: Optional[str] = None
    is_available: bool = True
    next_available: Optional[str] = None
    created_at: datetime = Field(default_factory=utcnow)


class DoctorConnection(DomainModel):
    """A user's request to connect with a doctor."""

    id: Optional[DoctorConnectionId] = None
    user_id: UserId
    doctor_id: DoctorId
    status: ConnectionStatus = ConnectionStatus.PENDING
    message: Optional[str] = None
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
