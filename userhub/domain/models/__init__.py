"""Domain models for the userhub service."""

from .user import User, utcnow

__all__ = [
    "User",
    "utcnow",
]
