"""Python client for the userhub API."""

from .container import ClientContainer, build_client
from .entities import AuthUser, SessionState, User
from .errors import ApiRequestError, AuthError, ClientValidationError, UserApiError
from .store import AuthStore

__all__ = [
    "ApiRequestError",
    "AuthError",
    "AuthStore",
    "AuthUser",
    "ClientContainer",
    "ClientValidationError",
    "SessionState",
    "User",
    "UserApiError",
    "build_client",
]
