"""Domain errors raised by the auth core and mapped to JSON responses at the boundary."""

from fastapi import status


class AuthError(Exception):
    """Base for errors that become an {"error": message} response."""

    status_code: int = status.HTTP_400_BAD_REQUEST
    default_message: str = "Request rejected"

    def __init__(self, message: str | None = None, cause: Exception | None = None) -> None:
        self.message = message or self.default_message
        self.cause = cause
        super().__init__(self.message)


class TokenInvalid(AuthError):
    """Bad signature, tampered payload, wrong issuer/subject or malformed token."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid JWT Token"


class TokenConfigError(AuthError):
    """Signing secret missing or empty; fatal misconfiguration."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Token signing is not configured"


class Unauthorized(AuthError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Unauthorized"


class UserNotFound(Unauthorized):
    """Login absent while authenticating or resolving a principal."""

    default_message = "User not found"


class Forbidden(AuthError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Forbidden"


class NotFound(AuthError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class DuplicateLogin(AuthError):
    status_code = status.HTTP_409_CONFLICT
    default_message = "Пользователь с таким логином уже существует"
