import os
import re
from typing import Optional

from dotenv import load_dotenv

_DURATION_PATTERN = re.compile(r"^\s*(\d+)\s*([smhd]?)\s*$")
_DURATION_UNITS = {"": 1, "s": 1, "m": 60, "h": 60 * 60, "d": 60 * 60 * 24}


class Settings:
    """Centralised application configuration sourced from environment variables."""

    def __init__(self) -> None:
        load_dotenv()
        self.environment = os.getenv("APP_ENV", "development").strip().lower()
        self.port = self._get_int("PORT", default=3000)
        self.jwt_secret = os.getenv("JWT_SECRET", "change-me")
        self.jwt_expires_in_seconds = self._get_duration("JWT_EXPIRES_IN", default="24h")
        self.bcrypt_rounds = self._get_int("BCRYPT_ROUNDS", default=10)
        self.default_user_password = os.getenv("DEFAULT_USER_PASSWORD", "defaultPassword123")
        origins = os.getenv("CORS_ALLOW_ORIGINS")
        if origins:
            self.cors_allow_origins = [item.strip() for item in origins.split(",") if item.strip()]
        else:
            self.cors_allow_origins = ["http://localhost:5173"]

    @property
    def is_development(self) -> bool:
        return self.environment == "development"

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @staticmethod
    def _get_int(key: str, default: Optional[int] = None) -> int:
        value = os.getenv(key)
        if value is None:
            if default is None:
                raise RuntimeError(f"Missing required environment variable: {key}")
            return default
        try:
            return int(value)
        except ValueError as exc:
            raise RuntimeError(f"Environment variable {key} must be an integer") from exc

    @staticmethod
    def _get_duration(key: str, default: str) -> int:
        """Parse ``<n>`` seconds or ``<n>s|m|h|d`` into seconds."""
        raw = os.getenv(key, default)
        match = _DURATION_PATTERN.match(raw)
        if not match:
            raise RuntimeError(f"Environment variable {key} must be a duration such as 3600, 15m or 24h")
        amount, unit = match.groups()
        seconds = int(amount) * _DURATION_UNITS[unit]
        if seconds <= 0:
            raise RuntimeError(f"Environment variable {key} must be a positive duration")
        return seconds
