from __future__ import annotations

import logging
from dataclasses import dataclass

from ...domain.errors import DuplicateEmail, InvalidCredentials
from ...domain.models import User
from ...domain.ports.persistence import PasswordHasher, UserRepository
from ...infrastructure.security.tokens import JwtTokenService

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class AuthResult:
    user: User
    token: str


class AuthService:
    """Coordinates registration, login and session lookups for user accounts."""

    def __init__(
        self,
        users: UserRepository,
        hasher: PasswordHasher,
        tokens: JwtTokenService,
    ) -> None:
        self._users = users
        self._hasher = hasher
        self._tokens = tokens

    def register(self, name: str, email: str, password: str) -> AuthResult:
        if self._users.email_exists(email):
            raise DuplicateEmail("Email already registered")
        password_hash = self._hasher.hash(password)
        try:
            user = self._users.create(name=name, email=email, password_hash=password_hash)
        except DuplicateEmail as exc:
            # a concurrent registration claimed the email after the check above
            raise DuplicateEmail("Email already registered") from exc
        logger.info("User %s registered (%s)", user.id, user.email)
        return AuthResult(user=user, token=self._issue(user))

    def login(self, email: str, password: str) -> AuthResult:
        user = self._users.find_by_email(email)
        # same message for unknown email and wrong password
        if user is None or not self._hasher.verify(password, user.password_hash):
            logger.info("Failed login attempt for %s", email)
            raise InvalidCredentials()
        logger.info("User %s logged in", user.id)
        return AuthResult(user=user, token=self._issue(user))

    def me(self, user: User) -> User:
        return user

    def logout(self, user: User) -> None:
        logger.info("User %s logged out", user.id)

    def _issue(self, user: User) -> str:
        return self._tokens.issue(user.id, user.email, user.name)
