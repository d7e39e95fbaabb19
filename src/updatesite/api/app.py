# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""FastAPI application factory."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from updatesite import __version__
from updatesite.api.middleware import RequestMiddleware
from updatesite.api.routes import health, updates
from updatesite.core.exceptions import StorageError, VersionParseError

logger = logging.getLogger("updatesite.api.app")


async def _version_parse_error(request: Request, exc: Exception) -> JSONResponse:
    return JSONResponse(status_code=422, content={"detail": str(exc)})


async def _storage_error(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Storage failure on %s: %s", request.url.path, exc)
    return JSONResponse(status_code=500, content={"detail": "Catalog storage failure"})


def create_app() -> FastAPI:
    app = FastAPI(
        title="updatesite",
        description="Plugin update site: catalog storage and update detection",
        version=__version__,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        openapi_url="/api/openapi.json",
    )

    app.include_router(health.router, prefix="/api/v1", tags=["health"])
    app.include_router(updates.router, prefix="/api/v1", tags=["updates"])
    app.add_exception_handler(VersionParseError, _version_parse_error)
    app.add_exception_handler(StorageError, _storage_error)
    app.add_middleware(RequestMiddleware)

    return app


def _create_app_from_env() -> FastAPI:
    """Factory wrapper for uvicorn that configures logging from settings."""
    from updatesite.core.config import get_settings
    from updatesite.core.logging import setup_logging

    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    return create_app()
