"""Client use cases: input checks in front of the auth repository."""

from __future__ import annotations

from email_validator import EmailNotValidError, validate_email

from .entities import AuthUser
from .errors import ClientValidationError
from .ports import AuthRepository

PASSWORD_MIN_LENGTH = 6


def _require_email_format(email: str) -> None:
    try:
        validate_email(email, check_deliverability=False)
    except EmailNotValidError:
        raise ClientValidationError("Invalid email format") from None


class RegisterUserUseCase:
    def __init__(self, auth_repository: AuthRepository) -> None:
        self._auth_repository = auth_repository

    async def execute(self, name: str, email: str, password: str) -> AuthUser:
        if not name or not email or not password:
            raise ClientValidationError("Name, email and password are required")
        _require_email_format(email)
        if len(password) < PASSWORD_MIN_LENGTH:
            raise ClientValidationError(
                f"Password must be at least {PASSWORD_MIN_LENGTH} characters long"
            )
        return await self._auth_repository.register(name, email, password)


class LoginUserUseCase:
    def __init__(self, auth_repository: AuthRepository) -> None:
        self._auth_repository = auth_repository

    async def execute(self, email: str, password: str) -> AuthUser:
        if not email or not password:
            raise ClientValidationError("Email and password are required")
        _require_email_format(email)
        return await self._auth_repository.login(email, password)


class GetCurrentUserUseCase:
    def __init__(self, auth_repository: AuthRepository) -> None:
        self._auth_repository = auth_repository

    async def execute(self) -> AuthUser:
        return await self._auth_repository.get_current_user()


class LogoutUserUseCase:
    def __init__(self, auth_repository: AuthRepository) -> None:
        self._auth_repository = auth_repository

    async def execute(self) -> None:
        await self._auth_repository.logout()
