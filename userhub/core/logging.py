import logging
import os
from typing import Optional


def configure_logging(level: Optional[str] = None) -> None:
    """Configure structured logging defaults for the server and the client."""
    resolved = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    logging.basicConfig(
        level=resolved,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(max(logging.getLevelName(resolved), logging.WARNING))
