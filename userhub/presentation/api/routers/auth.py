from typing import Any, Dict

from fastapi import APIRouter, Depends, status

from ....application.services.auth_service import AuthResult, AuthService
from ....core.dependencies import get_auth_service
from ....domain.models import User
from ...api.dependencies import require_user
from ...api.responses import envelope, serialize_user
from ...api.schemas.auth import LoginPayload, RegisterPayload

router = APIRouter(prefix="/api/auth", tags=["Authentication"])


@router.post("/register", status_code=status.HTTP_201_CREATED)
def register(
    payload: RegisterPayload,
    auth_service: AuthService = Depends(get_auth_service),
) -> Dict[str, Any]:
    result = auth_service.register(payload.name, payload.email, payload.password)
    return envelope(message="User registered successfully", data=_serialize_result(result))


@router.post("/login")
def login(
    payload: LoginPayload,
    auth_service: AuthService = Depends(get_auth_service),
) -> Dict[str, Any]:
    result = auth_service.login(payload.email, payload.password)
    return envelope(message="Login successful", data=_serialize_result(result))


@router.get("/me")
def me(
    current_user: User = Depends(require_user),
    auth_service: AuthService = Depends(get_auth_service),
) -> Dict[str, Any]:
    return envelope(data={"user": serialize_user(auth_service.me(current_user))})


@router.post("/logout")
def logout(
    current_user: User = Depends(require_user),
    auth_service: AuthService = Depends(get_auth_service),
) -> Dict[str, Any]:
    auth_service.logout(current_user)
    return envelope(message="Logout successful. Please remove the token from client storage.")


def _serialize_result(result: AuthResult) -> Dict[str, Any]:
    return {"user": serialize_user(result.user), "token": result.token}
