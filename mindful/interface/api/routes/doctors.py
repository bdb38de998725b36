"""Doctor directory routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends
from pydantic import Field

from mindful.application.usecase.auth import GetCurrentUserRequest, GetCurrentUserUseCase
from mindful.application.usecase.doctor import (
    ConnectDoctorRequest,
    ConnectDoctorUseCase,
    ConnectionResponse,
    DoctorResponse,
    GetDoctorRequest,
    GetDoctorUseCase,
    ListConnectionsRequest,
    ListConnectionsUseCase,
    ListDoctorsRequest,
    ListDoctorsUseCase,
    SearchDoctorsRequest,
    SearchDoctorsUseCase,
)
from mindful.domain.error import ValidationError
from mindful.interface.api.schema import APIRequest
from mindful.interface.api.security import read_auth_token

router = APIRouter(prefix="/doctors", tags=["doctors"], route_class=DishkaRoute)


class ConnectDoctorAPIRequest(APIRequest):
    """API request for a connection to a doctor."""

    message: str | None = Field(default=None, max_length=2000)


@router.get("", response_model=list[DoctorResponse])
async def list_doctors(
    list_doctors_use_case: FromDishka[ListDoctorsUseCase],
    specialization: str | None = None,
) -> list[DoctorResponse]:
    """List doctors ordered by name, optionally for one specialization."""
    return await list_doctors_use_case.execute(
        ListDoctorsRequest(specialization=specialization or None)
    )


@router.get("/search", response_model=list[DoctorResponse])
async def search_doctors(
    search_doctors_use_case: FromDishka[SearchDoctorsUseCase],
    q: str | None = None,
) -> list[DoctorResponse]:
    """Search doctors by name or specialization.

    Raises:
        ValidationError: If no query was given (400)
    """
    if not q:
        raise ValidationError("Search query required")
    return await search_doctors_use_case.execute(SearchDoctorsRequest(query=q))


@router.get("/connections", response_model=list[ConnectionResponse])
async def list_connections(
    list_connections_use_case: FromDishka[ListConnectionsUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Depends(read_auth_token),
) -> list[ConnectionResponse]:
    """List the caller's connection requests, newest first."""
    user = await get_current_user_use_case.execute(
        GetCurrentUserRequest(token=auth_token)
    )
    return await list_connections_use_case.execute(
        ListConnectionsRequest(user_id=user.id)
    )


@router.get("/{doctor_id}", response_model=DoctorResponse)
async def get_doctor(
    doctor_id: int,
    get_doctor_use_case: FromDishka[GetDoctorUseCase],
) -> DoctorResponse:
    """Get a single doctor.

    Raises:
        NotFoundError: If the doctor does not exist (404)
    """
    return await get_doctor_use_case.execute(GetDoctorRequest(doctor_id=doctor_id))


@router.post("/{doctor_id}/connect", response_model=ConnectionResponse)
async def connect_doctor(
    doctor_id: int,
    request: ConnectDoctorAPIRequest,
    connect_doctor_use_case: FromDishka[ConnectDoctorUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Depends(read_auth_token),
) -> ConnectionResponse:
    """Ask a doctor for a connection.

    Raises:
        UnauthenticatedError: If not authenticated (401)
        NotFoundError: If the doctor does not exist (404)
        BusinessRuleViolationError: If a request is already pending (409)
    """
    user = await get_current_user_use_case.execute(
        GetCurrentUserRequest(token=auth_token)
    )
    return await connect_doctor_use_case.execute(
        ConnectDoctorRequest(
            doctor_id=doctor_id,
            user_id=user.id,
            message=request.message,
        )
    )
