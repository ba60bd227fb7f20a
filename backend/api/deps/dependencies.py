"""
Dependency injection container.

Factory functions for FastAPI dependencies. Services receive no clients
here; they pull them lazily from the process-wide ClientCache on first use,
so missing provider configuration only fails the endpoint that needs it.

Dependencies: backend.configs, backend.application, backend.boundary
System role: DI container for service injection
"""

from functools import lru_cache

from backend.application.services import ChunkQueryService, ChunkService, QueryProcessor
from backend.configs import Settings, get_settings


@lru_cache
def get_settings_dependency() -> Settings:
    """Get settings singleton."""
    return get_settings()


def get_chunk_service() -> ChunkService:
    """
    Get chunk service instance.

    Returns:
        ChunkService: Service for fetch/update/delete/stats
    """
    return ChunkService()


def get_chunk_query_service() -> ChunkQueryService:
    """
    Get chunk query service instance.

    Returns:
        ChunkQueryService: Service for chunk search, configured with the
            vector store query defaults
    """
    return ChunkQueryService(settings=get_settings().vector_store)


def get_query_processor() -> QueryProcessor:
    """
    Get query processor instance.

    Returns:
        QueryProcessor: Batch query rewriter over the configured chat model
    """
    return QueryProcessor()
