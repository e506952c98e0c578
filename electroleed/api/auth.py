"""Login endpoint: exchange login and password for a session token."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from electroleed.core.database import get_db
from electroleed.schemas.auth import ErrorResponse, LoginRequest, LoginResponse
from electroleed.services.auth import authenticate
from electroleed.services.credentials import CredentialStore

router = APIRouter()


@router.post(
    "/login",
    response_model=LoginResponse,
    responses={401: {"model": ErrorResponse}},
)
def login(
    body: LoginRequest,
    db: Annotated[Session, Depends(get_db)],
) -> LoginResponse:
    """
    Authenticate with login and password; returns the token and the stored role.
    Send the token back in the jwt-token cookie (or as Authorization: Bearer <token>).
    """
    result = authenticate(CredentialStore(db), body.login, body.password, body.role)
    return LoginResponse(jwt_token=result.token, role=result.role)
