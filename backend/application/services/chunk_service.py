"""
Chunk service orchestrator.

Coordinates single-chunk operations against the vector index: fetch by id,
merge-and-upsert updates, deletion and index statistics.

Dependencies: backend.boundary, backend.core, backend.models
System role: Chunk mutation orchestration
"""

import logging
from datetime import datetime, timezone
from typing import Any

from fastapi.concurrency import run_in_threadpool

from backend.boundary.client_cache import get_client_cache
from backend.boundary.embeddings import EmbeddingClient
from backend.boundary.vdb import BaseIndexStore, IndexMatch, IndexRecord
from backend.core.exceptions import ChunkNotFoundError
from backend.models.chunk import Chunk

logger = logging.getLogger(__name__)


def page_content_from_metadata(metadata: dict[str, Any]) -> str:
    """Chunk text as stored by ingestion: "pageContent", else "text", else empty."""
    return metadata.get("pageContent") or metadata.get("text") or ""


def record_to_chunk(record: IndexRecord) -> Chunk:
    """Map a fetched record to a Chunk (no score)."""
    return Chunk(
        id=record.id,
        page_content=page_content_from_metadata(record.metadata),
        metadata=record.metadata,
    )


def match_to_chunk(match: IndexMatch) -> Chunk:
    """Map a query match to a scored Chunk."""
    return Chunk(
        id=match.id,
        page_content=page_content_from_metadata(match.metadata),
        metadata=match.metadata,
        score=match.score,
    )


class ChunkService:
    """
    Chunk service orchestrator.

    Updates keep the stored vector unless the text content changes, so a
    metadata-only edit never alters search behaviour.
    """

    def __init__(
        self,
        index_store: BaseIndexStore | None = None,
        embedding_client: EmbeddingClient | None = None,
    ) -> None:
        """
        Initialize chunk service.

        Args:
            index_store: Optional index store (process-wide store if None)
            embedding_client: Optional embedding client (process-wide client if None)
        """
        self._index_store = index_store
        self._embedding_client = embedding_client

    @property
    def index_store(self) -> BaseIndexStore:
        """Lazy-load index store so configuration is only checked on use."""
        if self._index_store is None:
            self._index_store = get_client_cache().index_store
        return self._index_store

    @property
    def embedding_client(self) -> EmbeddingClient:
        """Lazy-load embedding client so configuration is only checked on use."""
        if self._embedding_client is None:
            self._embedding_client = get_client_cache().embedding_client
        return self._embedding_client

    async def _fetch_record(self, chunk_id: str) -> IndexRecord | None:
        records = await run_in_threadpool(self.index_store.fetch, [chunk_id])
        return records.get(chunk_id)

    async def fetch_by_id(self, chunk_id: str) -> Chunk | None:
        """
        Get chunk by ID.

        Args:
            chunk_id: Chunk identifier

        Returns:
            Chunk | None: The chunk, or None when the index has no such record

        Raises:
            VectorStoreError: If the index call fails
        """
        record = await self._fetch_record(chunk_id)
        if record is None:
            logger.info("Chunk not found", extra={"chunk_id": chunk_id})
            return None
        return record_to_chunk(record)

    async def update_chunk(
        self,
        chunk_id: str,
        page_content: str | None = None,
        metadata: dict[str, Any] | None = None,
    ) -> Chunk:
        """
        Update chunk content and/or metadata.

        Metadata is shallow-merged (patch wins per key) and lastModified is
        always refreshed. The content is written to both "pageContent" and
        "text" so either ingestion convention reads it back. The write is a
        single upsert; if embedding succeeds but the upsert fails the index
        is left unchanged.

        Args:
            chunk_id: Chunk identifier
            page_content: Replacement content, or None to keep the current one
            metadata: Metadata patch, or None

        Returns:
            Chunk: The chunk as written

        Raises:
            ChunkNotFoundError: If the chunk does not exist
            EmbeddingError: If re-embedding fails
            VectorStoreError: If the index call fails
        """
        record = await self._fetch_record(chunk_id)
        if record is None:
            raise ChunkNotFoundError(chunk_id)

        current_content = page_content_from_metadata(record.metadata)
        final_content = page_content if page_content is not None else current_content

        updated_metadata = {
            **record.metadata,
            **(metadata or {}),
            "lastModified": datetime.now(timezone.utc).isoformat(),
        }

        if page_content is not None and page_content != current_content:
            vector = await run_in_threadpool(self.embedding_client.embed, final_content)
            vector_source = "re-embedded"
        elif record.values:
            vector = record.values
            vector_source = "preserved"
        else:
            vector = await run_in_threadpool(self.embedding_client.embed, final_content)
            vector_source = "re-embedded (store returned no vector)"

        updated_metadata["pageContent"] = final_content
        updated_metadata["text"] = final_content

        await run_in_threadpool(
            self.index_store.upsert,
            [IndexRecord(id=chunk_id, values=vector, metadata=updated_metadata)],
        )

        logger.info(
            "Chunk updated",
            extra={
                "chunk_id": chunk_id,
                "vector": vector_source,
                "metadata_keys": sorted((metadata or {}).keys()),
            },
        )
        return Chunk(id=chunk_id, page_content=final_content, metadata=updated_metadata)

    async def delete_chunk(self, chunk_id: str) -> None:
        """
        Delete chunk by ID. Deleting an unknown id is not an error.

        Raises:
            VectorStoreError: If the index call fails
        """
        await run_in_threadpool(self.index_store.delete, [chunk_id])
        logger.info("Chunk deleted", extra={"chunk_id": chunk_id})

    async def get_index_stats(self) -> dict[str, Any]:
        """Return the index statistics as reported by the vector store."""
        return await run_in_threadpool(self.index_store.describe_index_stats)
