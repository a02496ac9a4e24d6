"""Service for user account management (CRUD on the user list)."""

import logging
from typing import List, Optional

from ...domain.errors import DuplicateEmail, NotFound
from ...domain.models import User
from ...domain.ports.persistence import PasswordHasher, UserRepository

logger = logging.getLogger(__name__)


class UserService:
    """Service for listing, creating, updating and deleting users."""

    def __init__(
        self,
        users: UserRepository,
        hasher: PasswordHasher,
        default_password: str,
    ) -> None:
        self._users = users
        self._hasher = hasher
        self._default_password = default_password

    def list_users(self) -> List[User]:
        return self._users.list_all()

    def get_user(self, user_id: int) -> User:
        """
        Get a user by ID.

        Raises:
            NotFound: If no user has this ID
        """
        user = self._users.find_by_id(user_id)
        if user is None:
            raise NotFound()
        return user

    def create_user(self, name: str, email: str, password: Optional[str] = None) -> User:
        """
        Create a user on behalf of an operator.

        Args:
            name: Display name
            email: Email address (normalised by the caller)
            password: Plain text password; the configured default is used when omitted

        Raises:
            DuplicateEmail: If the email is already taken
        """
        if self._users.email_exists(email):
            raise DuplicateEmail()
        password_hash = self._hasher.hash(password or self._default_password)
        user = self._users.create(name=name, email=email, password_hash=password_hash)
        logger.info("User %s created (%s)", user.id, user.email)
        return user

    def update_user(
        self,
        user_id: int,
        *,
        name: Optional[str] = None,
        email: Optional[str] = None,
        password: Optional[str] = None,
    ) -> User:
        """
        Apply a partial update; only provided fields change.

        Raises:
            NotFound: If no user has this ID
            DuplicateEmail: If another user already has the new email
        """
        password_hash = self._hasher.hash(password) if password else None
        user = self._users.update(user_id, name=name, email=email, password_hash=password_hash)
        logger.info("User %s updated", user_id)
        return user

    def delete_user(self, user_id: int) -> None:
        if not self._users.delete(user_id):
            raise NotFound()
        logger.info("User %s deleted", user_id)
