"""Auth use cases."""

from .get_current_user import (
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
    UserResponse,
)

__all__ = [
    "GetCurrentUserRequest",
    "GetCurrentUserUseCase",
    "UserResponse",
]
