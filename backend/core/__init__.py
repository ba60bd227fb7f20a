"""
Core business logic module.

Contains the exception hierarchy and the chunk query/filter primitives:
name and path normalization, fuzzy matching and remote filter building.
"""

from backend.core.exceptions import (
    ChunkAdminException,
    InvalidArgumentError,
    ChunkNotFoundError,
    UpstreamError,
    EmbeddingError,
    VectorStoreError,
    LanguageModelError,
    ConfigurationError,
)
from backend.core.filter_builder import build_metadata_filter
from backend.core.fuzzy_matcher import matches
from backend.core.normalizer import normalize_name, normalize_path

__all__ = [
    # Exceptions
    "ChunkAdminException",
    "InvalidArgumentError",
    "ChunkNotFoundError",
    "UpstreamError",
    "EmbeddingError",
    "VectorStoreError",
    "LanguageModelError",
    "ConfigurationError",
    # Query/filter logic
    "build_metadata_filter",
    "matches",
    "normalize_name",
    "normalize_path",
]
