"""Run the API with uvicorn: ``python -m userhub``."""

import uvicorn

from .core.config import Settings


def main() -> None:
    settings = Settings()
    uvicorn.run(
        "userhub.main:app",
        host="0.0.0.0",
        port=settings.port,
        reload=settings.is_development,
    )


if __name__ == "__main__":
    main()
