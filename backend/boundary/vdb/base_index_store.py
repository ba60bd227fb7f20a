"""
Abstract index store interface.

Every vector index backend exposes the same five operations so the chunk
services stay backend-agnostic.

Dependencies: abc, backend.boundary.vdb.vector_schemas
System role: Vector store port
"""

from abc import ABC, abstractmethod
from typing import Any

from backend.boundary.vdb.vector_schemas import IndexMatch, IndexRecord


class BaseIndexStore(ABC):
    """Vector index operations used by the chunk services."""

    @abstractmethod
    def query(
        self,
        vector: list[float],
        top_k: int,
        metadata_filter: dict[str, Any] | None = None,
    ) -> list[IndexMatch]:
        """
        Similarity query.

        Args:
            vector: Query embedding
            top_k: Maximum number of matches
            metadata_filter: Exact-match filter ({"field": {"$eq": value}}), or None

        Returns:
            list[IndexMatch]: Matches ordered by descending similarity

        Raises:
            VectorStoreError: If the index call fails
        """

    @abstractmethod
    def fetch(self, ids: list[str]) -> dict[str, IndexRecord]:
        """
        Fetch records by id, including their vectors.

        Returns:
            dict[str, IndexRecord]: Found records keyed by id; missing ids are absent

        Raises:
            VectorStoreError: If the index call fails
        """

    @abstractmethod
    def upsert(self, records: list[IndexRecord]) -> None:
        """Write records in a single call. Raises VectorStoreError on failure."""

    @abstractmethod
    def delete(self, ids: list[str]) -> None:
        """Delete records by id. Unknown ids are ignored."""

    @abstractmethod
    def describe_index_stats(self) -> dict[str, Any]:
        """Return the backend's index statistics as a plain dict."""
