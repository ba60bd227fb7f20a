"""Service orchestrators."""

from .chunk_query_service import ChunkQueryService
from .chunk_service import ChunkService
from .query_processor import QueryProcessor

__all__ = [
    "ChunkQueryService",
    "ChunkService",
    "QueryProcessor",
]
