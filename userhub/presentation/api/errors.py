"""Exception handlers that render every failure in the response envelope."""

from __future__ import annotations

import logging
import traceback
from typing import Any, Dict, List

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ...core.config import Settings
from ...domain.errors import DomainError
from .responses import envelope

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI, settings: Settings) -> None:
    @app.exception_handler(DomainError)
    async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
        if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
            logger.error("%s on %s %s", type(exc).__name__, request.method, request.url.path, exc_info=exc)
        return JSONResponse(
            status_code=int(exc.status_code),
            content=envelope(False, message=exc.message),
        )

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=envelope(False, message="Validation failed", errors=_field_errors(exc.errors())),
        )

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        if exc.status_code == status.HTTP_404_NOT_FOUND and exc.detail == "Not Found":
            message = f"Route not found - {request.url.path}"
        else:
            message = str(exc.detail)
        return JSONResponse(
            status_code=exc.status_code,
            content=envelope(False, message=message),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        extra: Dict[str, Any] = {}
        if not settings.is_production:
            extra["stack"] = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=envelope(False, message="Internal server error", **extra),
        )


def _field_errors(errors: List[Dict[str, Any]]) -> List[Dict[str, str]]:
    items: List[Dict[str, str]] = []
    for error in errors:
        loc = [str(part) for part in error.get("loc", ())]
        if loc and loc[0] in ("body", "path", "query", "header"):
            loc = loc[1:]
        field = ".".join(loc) or "body"
        if error.get("type") == "missing":
            message = f"{field.rsplit('.', 1)[-1].capitalize()} is required"
        else:
            message = str(error.get("msg", "Invalid value"))
        items.append({"field": field, "message": message})
    return items
