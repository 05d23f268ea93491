"""
FastAPI application factory + lifespan.

This is the **analytics engine** behind the operations dashboard:
- REST API for downtime transition analysis.
- Structured error bodies for domain errors.
- CORS configured for the dashboard frontend.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from millops import __version__
from millops.api.v1 import api_router
from millops.core.config import settings
from millops.core.database import db_manager
from millops.core.errors import InvalidParameter, UpstreamFetchFailure
from millops.core.logging_config import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Startup: nothing to warm up (engine is lazy).
    Shutdown: close DB connections.
    """
    logger.info(f"[Main] Starting {settings.APP_NAME} API (demo_mode={settings.DEMO_MODE})")

    yield

    logger.info("[Main] Shutting down API …")
    await db_manager.close()
    logger.info("[Main] DB connections closed")


async def invalid_parameter_handler(request: Request, exc: InvalidParameter):
    logger.info(f"[Main] Rejected {request.url.path}: {exc.message}")
    return JSONResponse(status_code=400, content={"error": exc.to_dict()})


async def upstream_failure_handler(request: Request, exc: UpstreamFetchFailure):
    logger.error(f"[Main] Upstream failure on {request.url.path}: {exc.message}")
    return JSONResponse(status_code=502, content={"error": exc.to_dict()})


def create_fastapi_app() -> FastAPI:
    """Application factory for FastAPI."""
    setup_logging()

    app = FastAPI(
        title="MillOps Analytics API",
        description="Downtime transition analysis for the operations dashboard",
        version=__version__,
        lifespan=lifespan,
        docs_url="/api/docs" if settings.DEBUG else None,
        redoc_url="/api/redoc" if settings.DEBUG else None,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[
            "http://localhost:3000",
            "http://127.0.0.1:3000",
        ],
        allow_credentials=True,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    app.add_exception_handler(InvalidParameter, invalid_parameter_handler)
    app.add_exception_handler(UpstreamFetchFailure, upstream_failure_handler)

    app.include_router(api_router)

    @app.get("/")
    async def root():
        return {
            "app": settings.APP_NAME,
            "version": __version__,
            "status": "running",
            "docs": "/api/docs" if settings.DEBUG else "disabled",
        }

    return app


# Module-level instance for ``uvicorn millops.main:app``
app = create_fastapi_app()
