"""Client-side entities built from API responses."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional


@dataclass(frozen=True, slots=True)
class User:
    id: int
    name: str
    email: str
    created_at: Optional[str] = None

    @property
    def display_name(self) -> str:
        return self.name or self.email

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "User":
        return cls(
            id=data["id"],
            name=data.get("name", ""),
            email=data.get("email", ""),
            created_at=data.get("createdAt"),
        )


@dataclass(frozen=True, slots=True)
class AuthUser:
    """Authenticated user together with the token that proves it."""

    id: int
    name: str
    email: str
    token: Optional[str] = None

    @property
    def is_authenticated(self) -> bool:
        return bool(self.token)

    @property
    def display_name(self) -> str:
        return self.name or self.email

    @classmethod
    def from_json(cls, data: Mapping[str, Any], token: Optional[str]) -> "AuthUser":
        return cls(id=data["id"], name=data.get("name", ""), email=data.get("email", ""), token=token)


@dataclass(frozen=True, slots=True)
class SessionState:
    """Snapshot of the client session handed to store listeners."""

    user: Optional[AuthUser] = None
    loading: bool = False
    error: Optional[str] = None

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None
