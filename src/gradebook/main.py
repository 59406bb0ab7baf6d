"""FastAPI application entrypoint for Gradebook."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.errors import register_exception_handlers
from .api.router import api_router
from .core.config import Settings, get_settings
from .core.database import Database
from .core.logging import configure_logging
from .schemas import ServiceBanner

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Open the connection pool on startup and drain it on shutdown."""

    settings: Settings = app.state.settings
    database = Database(settings)
    if settings.create_tables_on_startup:
        database.create_all()
    app.state.database = database
    logger.info("database pool ready")
    try:
        yield
    finally:
        database.dispose()


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Instantiate and configure the FastAPI application."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(title="Gradebook API", version="0.1.0", lifespan=lifespan)
    app.state.settings = settings
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(api_router, prefix="/api")
    register_exception_handlers(app)

    @app.get("/", response_model=ServiceBanner, tags=["health"])
    async def root() -> ServiceBanner:
        return ServiceBanner(
            message="Student Management API is running!",
            endpoints={
                "students": "/api/students",
                "courses": "/api/courses",
                "marks": "/api/marks",
            },
        )

    return app


app = create_app()
