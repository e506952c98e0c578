"""Login and registration: check credentials, store accounts, issue tokens."""

import logging
from dataclasses import dataclass

from electroleed.core.errors import Unauthorized
from electroleed.core.security import verify_password
from electroleed.core.tokens import create_access_token
from electroleed.models import Role
from electroleed.services.credentials import CredentialStore

logger = logging.getLogger(__name__)

# Same message for unknown login and wrong password.
INVALID_CREDENTIALS_MESSAGE = "Неверные учетные данные"


@dataclass(frozen=True)
class LoginResult:
    token: str
    role: Role


def authenticate(
    store: CredentialStore,
    login: str,
    password: str,
    requested_role: Role | None = None,
) -> LoginResult:
    """
    Verify login and password and issue a token.

    The token carries the requested role (the stored role when none is
    requested); the returned role is always the stored one. Access checks
    use the stored role, so a token claim that differs grants nothing extra.
    """
    user = store.find_by_login(login)
    if user is None or not verify_password(password, user.password_hash):
        logger.info("Login failed", extra={"login": login})
        raise Unauthorized(INVALID_CREDENTIALS_MESSAGE)

    token_role = requested_role or user.role
    if token_role != user.role:
        logger.warning(
            "Login requested role differs from stored role",
            extra={
                "login": login,
                "requested_role": token_role.value,
                "stored_role": user.role.value,
            },
        )
    token = create_access_token(user.login, token_role.value)
    logger.info("Login succeeded", extra={"login": login, "role": user.role.value})
    return LoginResult(token=token, role=user.role)


def register(store: CredentialStore, login: str, password: str, role: Role) -> str:
    """Create an account and return a token for it. Raises DuplicateLogin if login is taken."""
    user = store.create(login, password, role)
    return create_access_token(user.login, user.role.value)
