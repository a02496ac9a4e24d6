"""Error taxonomy shared by the services and rendered by the API layer."""

from __future__ import annotations

from http import HTTPStatus
from typing import Optional


class DomainError(Exception):
    """Base error carrying the HTTP status and the client-facing message."""

    status_code: HTTPStatus = HTTPStatus.BAD_REQUEST
    default_message: str = "Request failed"

    def __init__(self, message: Optional[str] = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class DuplicateEmail(DomainError):
    status_code = HTTPStatus.BAD_REQUEST
    default_message = "Email already exists"


class InvalidCredentials(DomainError):
    status_code = HTTPStatus.UNAUTHORIZED
    default_message = "Invalid email or password"


class AuthenticationRequired(DomainError):
    status_code = HTTPStatus.UNAUTHORIZED
    default_message = "Access denied. No token provided."


class TokenInvalid(DomainError):
    status_code = HTTPStatus.UNAUTHORIZED
    default_message = "Invalid token."


class TokenExpired(TokenInvalid):
    default_message = "Token has expired."


class NotFound(DomainError):
    status_code = HTTPStatus.NOT_FOUND
    default_message = "User not found"


class HashingError(DomainError):
    status_code = HTTPStatus.INTERNAL_SERVER_ERROR
    default_message = "Error hashing password"
