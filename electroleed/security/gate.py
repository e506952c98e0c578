"""Request gate: read the session token, verify it and install the principal for the request."""

import logging
from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from electroleed.core.config import get_settings
from electroleed.core.database import get_db
from electroleed.core.errors import Forbidden, TokenInvalid, Unauthorized, UserNotFound
from electroleed.core.tokens import verify_access_token
from electroleed.schemas.auth import Principal
from electroleed.security.policy import check_access, match_rule
from electroleed.services.credentials import CredentialStore
from electroleed.services.principal import resolve_principal

logger = logging.getLogger(__name__)

BEARER_PREFIX = "bearer "


def extract_token(request: Request, cookie_name: str | None = None) -> str | None:
    """Token from the session cookie, else from an Authorization: Bearer header. Blank is absent."""
    cookie_name = cookie_name or get_settings().TOKEN_COOKIE_NAME
    token = request.cookies.get(cookie_name)
    if token and token.strip():
        return token.strip()
    header = request.headers.get("authorization", "")
    if header.lower().startswith(BEARER_PREFIX):
        token = header[len(BEARER_PREFIX):].strip()
        if token:
            return token
    return None


def authenticate_request(request: Request, db: Session) -> Principal | None:
    """
    Resolve the principal for this request.

    No token: returns None and the request continues unauthenticated.
    Invalid token: raises TokenInvalid; nothing is installed.
    Valid token: the principal is stored on request.state unless one is already there.
    Valid token for a removed account: anonymous on public paths, UserNotFound elsewhere.
    """
    existing = getattr(request.state, "principal", None)
    if existing is not None:
        return existing

    token = extract_token(request)
    if token is None:
        return None

    path = request.url.path
    try:
        info = verify_access_token(token)
    except TokenInvalid:
        logger.info("Rejected invalid token", extra={"path": path})
        raise

    try:
        principal = resolve_principal(CredentialStore(db), info.login)
    except UserNotFound:
        rule = match_rule(path)
        if rule is not None and rule.is_public:
            logger.info("Token for removed account ignored", extra={"path": path})
            return None
        raise
    request.state.principal = principal
    return principal


def authorize(path: str, principal: Principal | None) -> None:
    """Apply the access rules to path, logging denials."""
    try:
        check_access(path, principal)
    except Forbidden:
        logger.warning(
            "Access denied",
            extra={"path": path, "login": principal.login if principal else None},
        )
        raise


def get_principal(
    request: Request,
    db: Annotated[Session, Depends(get_db)],
) -> Principal | None:
    """Dependency: the request's principal, or None for anonymous requests."""
    return authenticate_request(request, db)


def enforce_access(
    request: Request,
    principal: Annotated[Principal | None, Depends(get_principal)],
) -> Principal | None:
    """Application-wide dependency: apply the access rules before any handler runs."""
    authorize(request.url.path, principal)
    return principal


def guard_unrouted_request(request: Request) -> None:
    """
    Gate and access rules for a request no route matched.

    Route dependencies never run for such requests, so the session comes from
    get_db (or its override) directly. Raises like enforce_access.
    """
    session_factory = request.app.dependency_overrides.get(get_db, get_db)
    sessions = session_factory()
    db = next(sessions)
    try:
        authorize(request.url.path, authenticate_request(request, db))
    finally:
        sessions.close()


def require_principal(
    principal: Annotated[Principal | None, Depends(get_principal)],
) -> Principal:
    """Dependency: the authenticated principal. Raises Unauthorized for anonymous requests."""
    if principal is None:
        raise Unauthorized()
    return principal
