"""ASGI entrypoint serving the userhub API (`uvicorn userhub.main:app`)."""

from .core.app_factory import create_application

app = create_application()

__all__ = ("app",)
