"""Signed, time-limited identity tokens (HS256 JWT)."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

import jwt

from ...domain.errors import TokenExpired, TokenInvalid
from ...domain.models import utcnow

logger = logging.getLogger(__name__)

_BEARER_PREFIX = "Bearer "


@dataclass(frozen=True, slots=True)
class TokenClaims:
    user_id: int
    email: str
    name: str
    issued_at: datetime
    expires_at: datetime


class JwtTokenService:
    """Issues and verifies user tokens signed with a shared secret."""

    def __init__(
        self,
        secret_key: str,
        expires_in_seconds: int = 24 * 60 * 60,
        algorithm: str = "HS256",
        clock: Callable[[], datetime] = utcnow,
    ) -> None:
        if not secret_key:
            raise RuntimeError("JWT_SECRET is not configured.")
        if secret_key == "change-me":
            logger.warning("JWT_SECRET is using the default value. Configure a secure secret in production.")
        self._secret_key = secret_key
        self._expires_in = timedelta(seconds=expires_in_seconds)
        self._algorithm = algorithm
        self._clock = clock

    def issue(self, user_id: int, email: str, name: str) -> str:
        now = self._clock()
        payload = {
            "id": user_id,
            "email": email,
            "name": name,
            "iat": now,
            "exp": now + self._expires_in,
        }
        return jwt.encode(payload, self._secret_key, algorithm=self._algorithm)

    def verify(self, token: str) -> TokenClaims:
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                options={"require": ["exp", "iat"]},
            )
        except jwt.ExpiredSignatureError as exc:
            raise TokenExpired() from exc
        except jwt.InvalidTokenError as exc:
            raise TokenInvalid() from exc

        user_id = payload.get("id")
        if isinstance(user_id, bool) or not isinstance(user_id, int):
            raise TokenInvalid()
        return TokenClaims(
            user_id=user_id,
            email=str(payload.get("email", "")),
            name=str(payload.get("name", "")),
            issued_at=datetime.fromtimestamp(payload["iat"], tz=timezone.utc),
            expires_at=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
        )

    @staticmethod
    def extract_bearer(header_value: Optional[str]) -> Optional[str]:
        """Return the token of a ``Bearer <token>`` header, ``None`` for anything else."""
        if not header_value or not header_value.startswith(_BEARER_PREFIX):
            return None
        token = header_value[len(_BEARER_PREFIX):].strip()
        return token or None
