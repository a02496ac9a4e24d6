"""Response envelope shared by every endpoint: ``{success, message?, data?, errors?}``."""

from typing import Any, Dict, List, Optional

from ...domain.models import User


def envelope(
    success: bool = True,
    *,
    message: Optional[str] = None,
    data: Optional[Dict[str, Any]] = None,
    errors: Optional[List[Dict[str, str]]] = None,
    **extra: Any,
) -> Dict[str, Any]:
    payload: Dict[str, Any] = {"success": success}
    if message is not None:
        payload["message"] = message
    if data is not None:
        payload["data"] = data
    if errors is not None:
        payload["errors"] = errors
    payload.update(extra)
    return payload


def serialize_user(user: User) -> Dict[str, Any]:
    return user.to_public_dict()
