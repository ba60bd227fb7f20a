"""API routers."""

from .chunks import router as chunks_router
from .health import router as health_router
from .query import router as query_router
from .stats import router as stats_router

__all__ = [
    "chunks_router",
    "health_router",
    "query_router",
    "stats_router",
]
