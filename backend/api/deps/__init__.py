"""API-specific dependencies."""

# Re-export common dependencies
from .dependencies import (
    get_chunk_query_service,
    get_chunk_service,
    get_query_processor,
    get_settings_dependency,
)

__all__ = [
    "get_chunk_query_service",
    "get_chunk_service",
    "get_query_processor",
    "get_settings_dependency",
]
