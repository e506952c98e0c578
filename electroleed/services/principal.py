"""Principal resolution: rebuild the authenticated identity from the stored account."""

from electroleed.core.errors import UserNotFound
from electroleed.schemas.auth import Principal
from electroleed.services.credentials import CredentialStore


def resolve_principal(store: CredentialStore, login: str) -> Principal:
    """
    Load the account for login and return its principal.

    The role always comes from the stored account, never from token claims.
    Raises UserNotFound when no account has this login.
    """
    user = store.find_by_login(login)
    if user is None:
        raise UserNotFound(f"Невозможно найти пользователя с login: {login}")
    return Principal(user_id=user.id, login=user.login, role=user.role)
