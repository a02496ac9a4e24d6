"""User domain model shared by the store, the services and the API layer."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict


def utcnow() -> datetime:
    return datetime.now(tz=timezone.utc)


@dataclass(slots=True)
class User:
    """
    Registered user account.

    Attributes:
        id: Identifier assigned by the store, never reused
        name: Display name
        email: Email address, unique case-insensitively
        password_hash: bcrypt digest, never exposed to clients
        created_at: Account creation timestamp (UTC)
    """

    id: int
    name: str
    email: str
    password_hash: str
    created_at: datetime

    def to_public_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "createdAt": self.created_at.replace(microsecond=0).isoformat(),
        }

    def __repr__(self) -> str:
        return f"<User id={self.id} email={self.email}>"
