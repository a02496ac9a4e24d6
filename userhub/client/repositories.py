"""Repository implementations translating API responses into client entities."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional

import httpx

from .datasource import ApiDataSource
from .entities import AuthUser, User
from .errors import ApiRequestError, AuthError, UserApiError
from .ports import AuthRepository, UserRepository
from .storage import TokenStorage

logger = logging.getLogger(__name__)

TOKEN_KEY = "auth_token"


def _failure_message(exc: Exception, fallback: str) -> str:
    if isinstance(exc, ApiRequestError):
        return exc.server_message or fallback
    if isinstance(exc, AuthError):
        return exc.message
    return str(exc) or fallback


def _data(response: Any) -> Dict[str, Any]:
    if isinstance(response, dict) and isinstance(response.get("data"), dict):
        return response["data"]
    return {}


class HttpAuthRepository(AuthRepository):
    """Authentication against the API with the token kept in durable storage.

    Every change to the stored token is mirrored on the data source in the
    same call, so requests always carry the persisted credential.
    """

    def __init__(
        self,
        data_source: ApiDataSource,
        storage: TokenStorage,
        token_key: str = TOKEN_KEY,
    ) -> None:
        self._data_source = data_source
        self._storage = storage
        self._token_key = token_key

    async def register(self, name: str, email: str, password: str) -> AuthUser:
        payload = {"name": name, "email": email, "password": password}
        return await self._authenticate("/auth/register", payload, "Registration failed")

    async def login(self, email: str, password: str) -> AuthUser:
        payload = {"email": email, "password": password}
        return await self._authenticate("/auth/login", payload, "Login failed")

    async def get_current_user(self) -> AuthUser:
        try:
            token = self.get_token()
            if not token:
                raise AuthError("No authentication token found")
            self._data_source.set_auth_token(token)
            response = await self._data_source.get("/auth/me")
            if not isinstance(response, dict) or not response.get("success"):
                message = response.get("message") if isinstance(response, dict) else None
                raise AuthError(message or "Failed to get current user")
            user = _data(response).get("user")
            if not user:
                raise AuthError("Failed to get current user")
            return AuthUser.from_json(user, token)
        except (AuthError, ApiRequestError, httpx.HTTPError) as exc:
            self._forget_token()
            raise AuthError(_failure_message(exc, "Authentication failed")) from exc

    async def logout(self) -> None:
        try:
            await self._data_source.post("/auth/logout", {})
        except (ApiRequestError, httpx.HTTPError) as exc:
            logger.warning("Logout API call failed: %s", _failure_message(exc, "Logout failed"))
        finally:
            self._forget_token()

    def is_authenticated(self) -> bool:
        return bool(self.get_token())

    def get_token(self) -> Optional[str]:
        return self._storage.get(self._token_key)

    # ------------------------------------------------------------------
    async def _authenticate(self, endpoint: str, payload: Dict[str, Any], fallback: str) -> AuthUser:
        try:
            response = await self._data_source.post(endpoint, payload)
        except (ApiRequestError, httpx.HTTPError) as exc:
            raise AuthError(_failure_message(exc, fallback)) from exc

        if not isinstance(response, dict) or not response.get("success"):
            message = response.get("message") if isinstance(response, dict) else None
            raise AuthError(message or fallback)

        data = _data(response)
        user, token = data.get("user"), data.get("token")
        if not user or not token:
            raise AuthError(fallback)
        self._remember_token(token)
        return AuthUser.from_json(user, token)

    def _remember_token(self, token: str) -> None:
        self._storage.set(self._token_key, token)
        self._data_source.set_auth_token(token)

    def _forget_token(self) -> None:
        self._storage.remove(self._token_key)
        self._data_source.clear_auth_token()


class HttpUserRepository(UserRepository):
    """CRUD on the user list; protected calls reuse the data source credential."""

    def __init__(self, data_source: ApiDataSource) -> None:
        self._data_source = data_source

    async def get_users(self) -> List[User]:
        response = await self._call("GET", "/users", fallback="Failed to load users")
        return [User.from_json(item) for item in _data(response).get("users", [])]

    async def get_user(self, user_id: int) -> User:
        response = await self._call("GET", f"/users/{user_id}", fallback="Failed to load user")
        return self._single(response, "Failed to load user")

    async def create_user(self, name: str, email: str, password: Optional[str] = None) -> User:
        payload: Dict[str, Any] = {"name": name, "email": email}
        if password:
            payload["password"] = password
        response = await self._call("POST", "/users", payload, fallback="Failed to create user")
        return self._single(response, "Failed to create user")

    async def update_user(self, user_id: int, changes: Mapping[str, Any]) -> User:
        payload = {key: value for key, value in changes.items() if value is not None}
        response = await self._call("PUT", f"/users/{user_id}", payload, fallback="Failed to update user")
        return self._single(response, "Failed to update user")

    async def delete_user(self, user_id: int) -> bool:
        await self._call("DELETE", f"/users/{user_id}", fallback="Failed to delete user")
        return True

    async def _call(
        self,
        method: str,
        endpoint: str,
        payload: Optional[Mapping[str, Any]] = None,
        *,
        fallback: str,
    ) -> Any:
        try:
            if method == "GET":
                return await self._data_source.get(endpoint)
            if method == "POST":
                return await self._data_source.post(endpoint, payload)
            if method == "PUT":
                return await self._data_source.put(endpoint, payload)
            return await self._data_source.delete(endpoint)
        except ApiRequestError as exc:
            raise UserApiError(exc.server_message or fallback, exc.status_code) from exc
        except httpx.HTTPError as exc:
            raise UserApiError(str(exc) or fallback) from exc

    @staticmethod
    def _single(response: Any, fallback: str) -> User:
        user = _data(response).get("user")
        if not user:
            raise UserApiError(fallback)
        return User.from_json(user)
