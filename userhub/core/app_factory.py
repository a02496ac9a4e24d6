from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Any, AsyncIterator, Awaitable, Callable, Dict, Optional

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from .config import Settings
from .container import ApplicationContainer, build_container
from .logging import configure_logging
from ..presentation.api.errors import register_exception_handlers
from ..presentation.api.responses import envelope
from ..presentation.api.routers import auth as auth_router
from ..presentation.api.routers import user_router

logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"


def create_application(
    settings: Optional[Settings] = None,
    container: Optional[ApplicationContainer] = None,
) -> FastAPI:
    settings = settings or Settings()
    configure_logging()

    app = FastAPI(title="Userhub API", version=API_VERSION, lifespan=_create_lifespan(settings))
    app.state.container = container or build_container(settings)  # type: ignore[attr-defined]

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    if settings.is_development:
        app.middleware("http")(_log_requests)

    register_exception_handlers(app, settings)

    app.include_router(auth_router.router)
    app.include_router(user_router.router)

    @app.get("/health")
    async def health() -> Dict[str, Any]:
        return envelope(
            message="Server is running",
            timestamp=datetime.now(tz=timezone.utc).isoformat(),
        )

    @app.get("/")
    async def welcome() -> Dict[str, Any]:
        return envelope(
            message="Welcome to the Userhub API",
            version=API_VERSION,
            endpoints={"health": "/health", "auth": "/api/auth", "users": "/api/users"},
        )

    return app


async def _log_requests(request: Request, call_next: Callable[[Request], Awaitable[Response]]) -> Response:
    logger.debug("%s %s params=%s", request.method, request.url.path, dict(request.query_params))
    return await call_next(request)


def _create_lifespan(settings: Settings):
    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info(
            "Userhub API started (environment=%s, port=%s, cors=%s)",
            settings.environment,
            settings.port,
            ",".join(settings.cors_allow_origins),
        )
        try:
            yield
        finally:
            container: ApplicationContainer = app.state.container  # type: ignore[attr-defined]
            logger.info("Userhub API stopped with %s registered users", len(container.user_store.list_all()))

    return lifespan
