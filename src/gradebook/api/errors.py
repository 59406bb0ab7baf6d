"""Exception handlers shaping every failure as ``{"error": ...}``."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..services.errors import StoreError

logger = logging.getLogger(__name__)

AVAILABLE_ROUTES = ["/", "/api/health", "/api/students", "/api/courses", "/api/marks"]


async def _store_error_handler(request: Request, exc: StoreError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})


async def _validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Rejected writes share the store-failure status; there is no 4xx for bad payloads
    messages = "; ".join(
        f"{'.'.join(str(part) for part in err.get('loc', ()))}: {err.get('msg')}" for err in exc.errors()
    )
    logger.warning("request rejected %s %s: %s", request.method, request.url.path, messages)
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": messages})


async def _http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"error": "Route not found", "availableRoutes": AVAILABLE_ROUTES},
        )
    return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)})


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the JSON error handlers to ``app``."""

    app.add_exception_handler(StoreError, _store_error_handler)
    app.add_exception_handler(RequestValidationError, _validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, _http_error_handler)
