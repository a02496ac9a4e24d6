from typing import Any, Optional


class ApiRequestError(Exception):
    """Raised by the data source for non-2xx responses."""

    def __init__(self, status_code: int, payload: Any = None) -> None:
        self.status_code = status_code
        self.payload = payload
        super().__init__(self.server_message or f"Request failed with status {status_code}")

    @property
    def server_message(self) -> Optional[str]:
        if isinstance(self.payload, dict):
            message = self.payload.get("message")
            if isinstance(message, str) and message:
                return message
        return None


class AuthError(Exception):
    """Authentication failure carrying a user-facing message."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ClientValidationError(AuthError):
    """Input rejected by a use case before any network call."""


class UserApiError(Exception):
    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)
