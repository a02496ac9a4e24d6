from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Optional

from ...domain.errors import AuthenticationRequired, DomainError, TokenInvalid
from ...domain.models import User
from ...domain.ports.persistence import UserRepository
from ...infrastructure.security.tokens import JwtTokenService

logger = logging.getLogger(__name__)


class AccessStatus(str, enum.Enum):
    AUTHENTICATED = "authenticated"
    ANONYMOUS = "anonymous"
    REJECTED = "rejected"


@dataclass(frozen=True, slots=True)
class AccessDecision:
    status: AccessStatus
    user: Optional[User] = None
    reason: Optional[DomainError] = None


class AccessGuard:
    """Resolves an ``Authorization`` header to a live user account."""

    def __init__(self, tokens: JwtTokenService, users: UserRepository) -> None:
        self._tokens = tokens
        self._users = users

    def evaluate(self, authorization: Optional[str]) -> AccessDecision:
        token = self._tokens.extract_bearer(authorization)
        if token is None:
            return AccessDecision(AccessStatus.ANONYMOUS)
        try:
            claims = self._tokens.verify(token)
        except TokenInvalid as exc:
            return AccessDecision(AccessStatus.REJECTED, reason=exc)
        # the token may outlive the account
        user = self._users.find_by_id(claims.user_id)
        if user is None:
            return AccessDecision(
                AccessStatus.REJECTED,
                reason=TokenInvalid("User not found. Token is invalid."),
            )
        return AccessDecision(AccessStatus.AUTHENTICATED, user=user)

    # ------------------------------------------------------------------
    def require(self, authorization: Optional[str]) -> User:
        decision = self.evaluate(authorization)
        if decision.status is AccessStatus.AUTHENTICATED and decision.user is not None:
            return decision.user
        if decision.status is AccessStatus.ANONYMOUS:
            raise AuthenticationRequired()
        raise decision.reason or TokenInvalid()

    def resolve_optional(self, authorization: Optional[str]) -> Optional[User]:
        decision = self.evaluate(authorization)
        if decision.status is AccessStatus.REJECTED:
            logger.warning(
                "access_guard.optional_rejected reason=%s detail=%r",
                type(decision.reason).__name__,
                str(decision.reason),
            )
        return decision.user
