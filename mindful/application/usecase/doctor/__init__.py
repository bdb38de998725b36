"""Doctor directory use cases."""

from .common import ConnectionResponse, DoctorResponse
from .connect_doctor import (
    ConnectDoctorRequest,
    ConnectDoctorUseCase,
    ListConnectionsRequest,
    ListConnectionsUseCase,
)
from .get_doctor import GetDoctorRequest, GetDoctorUseCase
from .list_doctors import (
    ListDoctorsRequest,
    ListDoctorsUseCase,
    SearchDoctorsRequest,
    SearchDoctorsUseCase,
)

__all__ = [
    "ConnectionResponse",
    "DoctorResponse",
    "ConnectDoctorRequest",
    "ConnectDoctorUseCase",
    "ListConnectionsRequest",
    "ListConnectionsUseCase",
    "GetDoctorRequest",
    "GetDoctorUseCase",
    "ListDoctorsRequest",
    "ListDoctorsUseCase",
    "SearchDoctorsRequest",
    "SearchDoctorsUseCase",
]
