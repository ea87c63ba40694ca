"""Auth use cases."""

from .common import UserResponse
from .ensure_admin import EnsureAdminUserUseCase
from .get_current_user import GetCurrentUserRequest, GetCurrentUserUseCase
from .login import LoginRequest, LoginResponse, LoginUseCase

__all__ = [
    "EnsureAdminUserUseCase",
    "GetCurrentUserRequest",
    "GetCurrentUserUseCase",
    "LoginRequest",
    "LoginResponse",
    "LoginUseCase",
    "UserResponse",
]
