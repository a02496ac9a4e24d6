from __future__ import annotations

import asyncio
import logging
from dataclasses import replace
from typing import Callable, List, Optional

from .entities import AuthUser, SessionState
from .errors import AuthError
from .usecases import (
    GetCurrentUserUseCase,
    LoginUserUseCase,
    LogoutUserUseCase,
    RegisterUserUseCase,
)

logger = logging.getLogger(__name__)

SessionListener = Callable[[SessionState], None]


class AuthStore:
    """Observable session state driven by the auth use cases.

    Actions are serialized: a second action waits until the one in flight has
    settled, so the resulting state always reflects the last action issued.
    """

    def __init__(
        self,
        register_use_case: RegisterUserUseCase,
        login_use_case: LoginUserUseCase,
        get_current_user_use_case: GetCurrentUserUseCase,
        logout_use_case: LogoutUserUseCase,
    ) -> None:
        self._register = register_use_case
        self._login = login_use_case
        self._get_current_user = get_current_user_use_case
        self._logout = logout_use_case
        self._state = SessionState()
        self._listeners: List[SessionListener] = []
        self._lock = asyncio.Lock()

    # State ------------------------------------------------------------------
    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def user(self) -> Optional[AuthUser]:
        return self._state.user

    @property
    def loading(self) -> bool:
        return self._state.loading

    @property
    def error(self) -> Optional[str]:
        return self._state.error

    @property
    def is_authenticated(self) -> bool:
        return self._state.user is not None

    @property
    def user_name(self) -> str:
        return self._state.user.name if self._state.user and self._state.user.name else "Guest"

    @property
    def user_email(self) -> str:
        return self._state.user.email if self._state.user else ""

    # Listeners --------------------------------------------------------------
    def subscribe(self, listener: SessionListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # Actions ----------------------------------------------------------------
    async def register(self, name: str, email: str, password: str) -> AuthUser:
        async with self._lock:
            self._begin()
            try:
                auth_user = await self._register.execute(name, email, password)
            except Exception as exc:
                logger.error("Registration error: %s", exc)
                self._update(error=str(exc), loading=False)
                raise
            self._update(user=auth_user, loading=False)
            return auth_user

    async def login(self, email: str, password: str) -> AuthUser:
        async with self._lock:
            self._begin()
            try:
                auth_user = await self._login.execute(email, password)
            except Exception as exc:
                logger.error("Login error: %s", exc)
                self._update(error=str(exc), loading=False)
                raise
            self._update(user=auth_user, loading=False)
            return auth_user

    async def logout(self) -> None:
        async with self._lock:
            self._begin()
            error: Optional[str] = None
            try:
                await self._logout.execute()
            except Exception as exc:
                logger.error("Logout error: %s", exc)
                error = _message(exc)
            finally:
                self._update(user=None, error=error, loading=False)

    async def check_auth(self) -> bool:
        """Restore the session from the stored token; ``False`` when it is missing or rejected."""
        async with self._lock:
            self._begin()
            auth_user: Optional[AuthUser] = None
            error: Optional[str] = None
            try:
                auth_user = await self._get_current_user.execute()
            except Exception as exc:
                logger.info("Stored session rejected: %s", exc)
                error = _message(exc)
            finally:
                self._update(user=auth_user, error=error, loading=False)
            return auth_user is not None

    def clear_error(self) -> None:
        self._update(error=None)

    # ------------------------------------------------------------------
    def _begin(self) -> None:
        self._update(loading=True, error=None)

    def _update(self, **changes) -> None:
        self._state = replace(self._state, **changes)
        for listener in list(self._listeners):
            try:
                listener(self._state)
            except Exception:
                logger.exception("Error notifying session listener")


def _message(exc: Exception) -> str:
    if isinstance(exc, AuthError):
        return exc.message
    return str(exc) or type(exc).__name__
