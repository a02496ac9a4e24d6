from dataclasses import dataclass

from ..application.services.access_guard import AccessGuard
from ..application.services.auth_service import AuthService
from ..application.services.user_service import UserService
from .config import Settings
from ..domain.ports.persistence import PasswordHasher, UserRepository
from ..infrastructure.persistence.memory import InMemoryUserStore
from ..infrastructure.security.passwords import BcryptPasswordHasher
from ..infrastructure.security.tokens import JwtTokenService


@dataclass(slots=True)
class ApplicationContainer:
    """Dependency registry shared across the FastAPI application lifecycle."""

    settings: Settings
    user_store: UserRepository
    password_hasher: PasswordHasher
    token_service: JwtTokenService
    auth_service: AuthService
    user_service: UserService
    access_guard: AccessGuard


def build_container(settings: Settings) -> ApplicationContainer:
    user_store = InMemoryUserStore()
    password_hasher = BcryptPasswordHasher(rounds=settings.bcrypt_rounds)
    token_service = JwtTokenService(
        secret_key=settings.jwt_secret,
        expires_in_seconds=settings.jwt_expires_in_seconds,
    )
    return ApplicationContainer(
        settings=settings,
        user_store=user_store,
        password_hasher=password_hasher,
        token_service=token_service,
        auth_service=AuthService(user_store, password_hasher, token_service),
        user_service=UserService(
            user_store,
            password_hasher,
            default_password=settings.default_user_password,
        ),
        access_guard=AccessGuard(token_service, user_store),
    )
