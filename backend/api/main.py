"""
FastAPI application with assembled routers.

Initializes FastAPI app with all API routers and configures uvicorn server.

Dependencies: fastapi, backend.api.routers, backend.observability, uvicorn
System role: API entry point with router assembly and server launch
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from backend.boundary.client_cache import get_client_cache
from backend.configs import get_settings
from backend.observability import (
    CorrelationMiddleware,
    RequestLoggingMiddleware,
    configure_logging,
)

from .routers import chunks_router, health_router, query_router, stats_router
from .routers.router_utils import http_exception_handler, validation_exception_handler


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Configures logging on startup. Provider clients are built lazily on
    first use, so nothing is pre-warmed here.
    """
    settings = get_settings()
    configure_logging(settings.log_level)
    logger = logging.getLogger(__name__)
    logger.info(
        "Chunk Admin API starting",
        extra={"environment": settings.environment, "store_type": settings.vector_store.store_type},
    )

    yield

    # Shutdown
    get_client_cache().clear()
    logger.info("Client cache cleared")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application with routers.

    Returns:
        FastAPI: Configured application instance with all routers registered
    """
    app = FastAPI(
        title="Chunk Admin API",
        description="Browse, search, edit and delete vector index chunks",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Last added runs first: correlation id is set before the request is logged
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    app.include_router(health_router, prefix="/api")
    app.include_router(chunks_router, prefix="/api")
    app.include_router(stats_router, prefix="/api")
    app.include_router(query_router, prefix="/api")

    return app


app = create_app()


if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run(
        "backend.api.main:app",
        host=settings.host,
        port=settings.port,
    )
