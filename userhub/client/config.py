import os
from pathlib import Path

from dotenv import load_dotenv


class ClientSettings:
    """Client-side configuration sourced from environment variables."""

    def __init__(self) -> None:
        load_dotenv()
        self.api_base_url = os.getenv("API_BASE_URL", "http://localhost:3000/api").rstrip("/")
        self.timeout_seconds = self._get_float("API_TIMEOUT_SECONDS", default=10.0)
        self.token_storage_path = Path(
            os.getenv("TOKEN_STORAGE_PATH", str(Path.home() / ".userhub" / "session.json"))
        ).expanduser()

    @staticmethod
    def _get_float(key: str, default: float) -> float:
        value = os.getenv(key)
        if value is None:
            return default
        try:
            return float(value)
        except ValueError as exc:
            raise RuntimeError(f"Environment variable {key} must be a number") from exc
