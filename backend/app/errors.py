"""JSON error payloads, the 404 handler and the unhandled-error middleware."""

from __future__ import annotations

import logging
import traceback

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from utils import iso_now

logger = logging.getLogger(__name__)


def error_response(request: Request, exc: Exception, status_code: int | None = None,
                   production: bool = False) -> JSONResponse:
    """Render exc the same way everywhere: error, timestamp, path, method."""
    status = status_code or getattr(exc, "status_code", None) or 500
    payload = {
        "error": "Internal server error" if production and status >= 500 else str(exc),
        "timestamp": iso_now(),
        "path": request.url.path,
        "method": request.method,
    }
    if not production:
        payload["stack"] = "".join(
            traceback.format_exception(type(exc), exc, exc.__traceback__)
        )
        details = getattr(exc, "details", None)
        if details is not None:
            payload["details"] = details
    return JSONResponse(status_code=status, content=payload)


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 404 and exc.detail == "Not Found":
            logger.info("404 - Route not found: %s %s (origin=%s)",
                        request.method, request.url.path, request.headers.get("origin"))
            return JSONResponse(
                status_code=404,
                content={
                    "error": "Route not found",
                    "path": request.url.path,
                    "method": request.method,
                    "timestamp": iso_now(),
                },
            )
        if isinstance(exc.detail, dict):
            content = {**exc.detail, "timestamp": iso_now()}
        else:
            content = {"error": exc.detail, "timestamp": iso_now()}
        return JSONResponse(status_code=exc.status_code, content=content,
                            headers=getattr(exc, "headers", None))


class UnhandledErrorMiddleware(BaseHTTPMiddleware):
    """Turns any uncaught exception into the shared error payload.

    Added before CORSMiddleware, so it runs inside it and the 500 still
    carries CORS headers.
    """

    def __init__(self, app, production: bool = False):
        super().__init__(app)
        self.production = production

    async def dispatch(self, request: Request, call_next):
        try:
            return await call_next(request)
        except Exception as exc:
            logger.error("Unhandled error on %s %s: %s", request.method, request.url.path,
                         exc, exc_info=exc)
            return error_response(request, exc, production=self.production)
