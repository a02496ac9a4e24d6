from __future__ import annotations

from typing import Any, List, Mapping, Optional, Protocol

from .entities import AuthUser, User


class AuthRepository(Protocol):
    """Authentication operations the use cases depend on."""

    async def register(self, name: str, email: str, password: str) -> AuthUser:
        ...

    async def login(self, email: str, password: str) -> AuthUser:
        ...

    async def get_current_user(self) -> AuthUser:
        ...

    async def logout(self) -> None:
        ...

    def is_authenticated(self) -> bool:
        ...


class UserRepository(Protocol):
    """User list operations exposed by the API."""

    async def get_users(self) -> List[User]:
        ...

    async def get_user(self, user_id: int) -> User:
        ...

    async def create_user(self, name: str, email: str, password: Optional[str] = None) -> User:
        ...

    async def update_user(self, user_id: int, changes: Mapping[str, Any]) -> User:
        ...

    async def delete_user(self, user_id: int) -> bool:
        ...
