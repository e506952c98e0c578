"""Pydantic request/response schemas."""

from electroleed.schemas.auth import (
    AreaHomeResponse,
    ErrorResponse,
    LoginRequest,
    LoginResponse,
    PageResponse,
    Principal,
    RegisterRequest,
    RegisterResponse,
    UserInfoResponse,
    UserListItem,
    UsersListResponse,
    UserUpdateRequest,
)
from electroleed.schemas.health import HealthResponse

__all__ = [
    "AreaHomeResponse",
    "ErrorResponse",
    "HealthResponse",
    "LoginRequest",
    "LoginResponse",
    "PageResponse",
    "Principal",
    "RegisterRequest",
    "RegisterResponse",
    "UserInfoResponse",
    "UserListItem",
    "UsersListResponse",
    "UserUpdateRequest",
]
