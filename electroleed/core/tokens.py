"""Signed session tokens (JWT, HMAC) carrying the login and role of a user."""

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Any

import jwt

from electroleed.core.config import Settings, get_settings
from electroleed.core.errors import TokenConfigError, TokenInvalid

REQUIRED_CLAIMS = ["login", "role", "iat", "iss", "sub"]


@dataclass(frozen=True)
class TokenInfo:
    """Claims extracted from a verified token."""

    login: str
    role: str


def _secret(secret: str | None, settings: Settings) -> str:
    value = secret if secret is not None else settings.JWT_SECRET.get_secret_value()
    if not value or not value.strip():
        raise TokenConfigError()
    return value


def create_access_token(
    login: str,
    role: str,
    *,
    issued_at: datetime | None = None,
    secret: str | None = None,
    settings: Settings | None = None,
) -> str:
    """
    Create a signed token with login, role, iat and the fixed issuer/subject.

    exp is only added when JWT_EXPIRE_MINUTES is configured. Raises
    TokenConfigError when the signing secret is empty.
    """
    settings = settings or get_settings()
    key = _secret(secret, settings)
    now = issued_at or datetime.now(UTC)
    payload: dict[str, Any] = {
        "sub": settings.JWT_SUBJECT,
        "login": login,
        "role": role,
        "iat": now,
        "iss": settings.JWT_ISSUER,
    }
    if settings.JWT_EXPIRE_MINUTES is not None:
        payload["exp"] = now + timedelta(minutes=settings.JWT_EXPIRE_MINUTES)
    return jwt.encode(payload, key, algorithm=settings.JWT_ALGORITHM)


def verify_access_token(
    token: str,
    *,
    secret: str | None = None,
    settings: Settings | None = None,
) -> TokenInfo:
    """
    Verify signature, issuer and subject; return the login and role claims.
    Raises TokenInvalid on any verification failure.
    """
    settings = settings or get_settings()
    key = _secret(secret, settings)
    required = REQUIRED_CLAIMS + (["exp"] if settings.JWT_EXPIRE_MINUTES is not None else [])
    try:
        payload = jwt.decode(
            token,
            key,
            algorithms=[settings.JWT_ALGORITHM],
            issuer=settings.JWT_ISSUER,
            subject=settings.JWT_SUBJECT,
            options={"require": required},
        )
    except jwt.PyJWTError as e:
        raise TokenInvalid(cause=e) from e
    login = payload.get("login")
    role = payload.get("role")
    if not isinstance(login, str) or not login or not isinstance(role, str):
        raise TokenInvalid()
    return TokenInfo(login=login, role=role)
