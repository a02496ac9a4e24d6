from __future__ import annotations

from typing import List, Optional, Protocol

from ..models import User


class UserRepository(Protocol):
    """Storage contract for user accounts."""

    def create(self, name: str, email: str, password_hash: str) -> User:
        ...

    def find_by_id(self, user_id: int) -> Optional[User]:
        ...

    def find_by_email(self, email: str) -> Optional[User]:
        ...

    def email_exists(self, email: str) -> bool:
        ...

    def list_all(self) -> List[User]:
        ...

    def update(
        self,
        user_id: int,
        *,
        name: Optional[str] = None,
        email: Optional[str] = None,
        password_hash: Optional[str] = None,
    ) -> User:
        ...

    def delete(self, user_id: int) -> bool:
        ...


class PasswordHasher(Protocol):
    """Salted one-way password digests."""

    def hash(self, password: str) -> str:
        ...

    def verify(self, password: str, password_hash: str) -> bool:
        ...
