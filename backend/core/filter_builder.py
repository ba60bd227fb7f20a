"""
Remote metadata filter construction.

Builds the exact-match filter the vector index understands natively. The
index has no substring operator, so this filter under-matches compared to
the fuzzy client-side filtering applied afterwards.

Dependencies: backend.models.chunk
System role: Index filter expression builder
"""

from typing import Any

from backend.models.chunk import QueryChunksRequest

FILTERABLE_FIELDS: tuple[str, ...] = ("module", "name", "path")


def build_metadata_filter(request: QueryChunksRequest) -> dict[str, Any] | None:
    """
    Build an equality filter from the request's module, name and path.

    Top-level clauses are ANDed by the index.

    Args:
        request: Chunk query request

    Returns:
        dict | None: e.g. {"module": {"$eq": "Core"}}, or None when
        metadata filtering is off or no filterable field is set
    """
    if not request.metadata_filter:
        return None

    metadata_filter: dict[str, Any] = {}
    for field in FILTERABLE_FIELDS:
        value = getattr(request, field)
        if value:
            metadata_filter[field] = {"$eq": value}

    return metadata_filter or None
