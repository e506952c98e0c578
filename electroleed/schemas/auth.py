"""Request/response schemas for auth and user administration endpoints."""

from typing import Literal

from pydantic import BaseModel, Field

from electroleed.core.security import (
    LOGIN_MAX_LEN,
    LOGIN_MIN_LEN,
    PASSWORD_MAX_LEN,
    PASSWORD_MIN_LEN,
)
from electroleed.models.role import Role


class LoginRequest(BaseModel):
    """
    Credentials for login, with the role the client asks to act as.

    No length limits: any login or password that does not match an account
    is answered as invalid credentials.
    """

    login: str
    password: str
    role: Role | None = Field(default=None, description="Requested role")


class LoginResponse(BaseModel):
    """Token and stored role returned after a successful login."""

    jwt_token: str = Field(..., serialization_alias="jwt-token")
    role: Role


class RegisterRequest(BaseModel):
    """New account created by an administrator."""

    login: str = Field(..., min_length=LOGIN_MIN_LEN, max_length=LOGIN_MAX_LEN)
    password: str = Field(..., min_length=PASSWORD_MIN_LEN, max_length=PASSWORD_MAX_LEN)
    role: Role


class RegisterResponse(BaseModel):
    jwt_token: str = Field(..., serialization_alias="jwt-token")


class ErrorResponse(BaseModel):
    error: str


class Principal(BaseModel):
    """Authenticated identity attached to a request; one role, one authority."""

    user_id: int
    login: str
    role: Role

    class Config:
        frozen = True

    @property
    def authorities(self) -> list[str]:
        return [self.role.authority]


class UserInfoResponse(BaseModel):
    """Current user (no password)."""

    id: int
    login: str
    role: Role

    class Config:
        from_attributes = True


class UserListItem(BaseModel):
    """User entry for admin list (no password)."""

    id: int
    login: str
    role: Role

    class Config:
        from_attributes = True


class UsersListResponse(BaseModel):
    """Response for GET /admin/user."""

    users: list[UserListItem]
    keyword: str | None = None


class UserUpdateRequest(BaseModel):
    """Partial account update; omitted fields stay unchanged."""

    login: str | None = Field(default=None, min_length=LOGIN_MIN_LEN, max_length=LOGIN_MAX_LEN)
    password: str | None = Field(
        default=None, min_length=PASSWORD_MIN_LEN, max_length=PASSWORD_MAX_LEN
    )
    role: Role | None = None


class AreaHomeResponse(BaseModel):
    """Landing payload of a role area: who is signed in and with which authorities."""

    area: str
    username: str
    roles: list[str]


class PageResponse(BaseModel):
    """Public page descriptor."""

    page: Literal["auth/login", "auth/about_author"]
