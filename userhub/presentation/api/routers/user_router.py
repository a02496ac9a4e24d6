"""API router for user management."""

import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, status

from ....application.services.user_service import UserService
from ....core.dependencies import get_user_service
from ....domain.models import User
from ...api.dependencies import optional_user, require_user
from ...api.responses import envelope, serialize_user
from ...api.schemas.user_schemas import UserCreateRequest, UserUpdateRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/users", tags=["Users"])


@router.get("")
def list_users(
    viewer: Optional[User] = Depends(optional_user),
    service: UserService = Depends(get_user_service),
) -> Dict[str, Any]:
    users = service.list_users()
    logger.debug("Listing %s users for %s", len(users), viewer.email if viewer else "anonymous")
    return envelope(data={"users": [serialize_user(user) for user in users], "count": len(users)})


@router.get("/{user_id}")
def get_user(
    user_id: int,
    service: UserService = Depends(get_user_service),
) -> Dict[str, Any]:
    return envelope(data={"user": serialize_user(service.get_user(user_id))})


@router.post("", status_code=status.HTTP_201_CREATED)
def create_user(
    payload: UserCreateRequest,
    service: UserService = Depends(get_user_service),
) -> Dict[str, Any]:
    user = service.create_user(payload.name, payload.email, payload.password)
    return envelope(message="User created successfully", data={"user": serialize_user(user)})


@router.put("/{user_id}")
def update_user(
    user_id: int,
    payload: UserUpdateRequest,
    _: User = Depends(require_user),
    service: UserService = Depends(get_user_service),
) -> Dict[str, Any]:
    user = service.update_user(
        user_id,
        name=payload.name,
        email=payload.email,
        password=payload.password,
    )
    return envelope(message="User updated successfully", data={"user": serialize_user(user)})


@router.delete("/{user_id}")
def delete_user(
    user_id: int,
    _: User = Depends(require_user),
    service: UserService = Depends(get_user_service),
) -> Dict[str, Any]:
    service.delete_user(user_id)
    return envelope(message="User deleted successfully")
