from typing import Optional

from fastapi import Depends, Header

from ...application.services.access_guard import AccessGuard
from ...core.dependencies import get_access_guard
from ...domain.models import User


def get_authorization_header(
    authorization: Optional[str] = Header(default=None, alias="Authorization"),
) -> Optional[str]:
    return authorization


def require_user(
    authorization: Optional[str] = Depends(get_authorization_header),
    guard: AccessGuard = Depends(get_access_guard),
) -> User:
    return guard.require(authorization)


def optional_user(
    authorization: Optional[str] = Depends(get_authorization_header),
    guard: AccessGuard = Depends(get_access_guard),
) -> Optional[User]:
    return guard.resolve_optional(authorization)
