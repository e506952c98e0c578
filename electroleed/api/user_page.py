"""Information about the signed-in user."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from electroleed.core.database import get_db
from electroleed.core.errors import UserNotFound
from electroleed.schemas.auth import Principal, UserInfoResponse
from electroleed.security.gate import require_principal
from electroleed.services.credentials import CredentialStore

router = APIRouter()


@router.get("/info", response_model=UserInfoResponse)
def get_user_info(
    principal: Annotated[Principal, Depends(require_principal)],
    db: Annotated[Session, Depends(get_db)],
) -> UserInfoResponse:
    """Account of the current principal (login and role, never the password hash)."""
    user = CredentialStore(db).find_by_login(principal.login)
    if user is None:
        raise UserNotFound()
    return UserInfoResponse.model_validate(user)
