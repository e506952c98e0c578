"""Administrator endpoints: account registration and user management (ADMIN only)."""

import logging
from typing import Annotated, Literal

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from electroleed.core.database import get_db
from electroleed.core.errors import DuplicateLogin
from electroleed.schemas.auth import (
    ErrorResponse,
    RegisterRequest,
    RegisterResponse,
    UserListItem,
    UsersListResponse,
    UserUpdateRequest,
)
from electroleed.services.auth import register
from electroleed.services.credentials import CredentialStore

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/register",
    response_model=RegisterResponse,
    responses={409: {"model": ErrorResponse}},
)
def register_user(
    body: RegisterRequest,
    db: Annotated[Session, Depends(get_db)],
) -> RegisterResponse:
    """Create an account with a hashed password and return a token for it."""
    try:
        token = register(CredentialStore(db), body.login, body.password, body.role)
    except DuplicateLogin:
        logger.info("Registration rejected: login taken", extra={"login": body.login})
        raise
    return RegisterResponse(jwt_token=token)


@router.get("/user", response_model=UsersListResponse)
def list_users(
    db: Annotated[Session, Depends(get_db)],
    keyword: str | None = None,
    sort: Literal["login", "role"] | None = None,
    order: Literal["asc", "desc"] = "asc",
) -> UsersListResponse:
    """List accounts; search by keyword or sort by login/role."""
    users = CredentialStore(db).list_users(keyword=keyword, sort=sort, order=order)
    return UsersListResponse(
        users=[UserListItem.model_validate(u) for u in users],
        keyword=keyword,
    )


@router.post("/edit/{user_id}", response_model=UserListItem)
def edit_user(
    user_id: int,
    body: UserUpdateRequest,
    db: Annotated[Session, Depends(get_db)],
) -> UserListItem:
    """Change an account's login, password or role."""
    user = CredentialStore(db).update(
        user_id, login=body.login, password=body.password, role=body.role
    )
    return UserListItem.model_validate(user)


@router.delete("/delete/{login}")
def delete_user(
    login: str,
    db: Annotated[Session, Depends(get_db)],
) -> dict[str, str]:
    """Delete an account by login; its employee profile goes with it."""
    CredentialStore(db).delete(login)
    return {"message": f"Пользователь с логином {login} успешно удален."}
