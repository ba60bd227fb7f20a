"""
Chunk query orchestrator.

Turns a loose set of optional criteria (exact id, free-text query,
module/name/path filters) into one best-effort, paginated result set.

The index only filters by exact equality, so module, name and path are
re-checked client-side with fuzzy matching. A request carrying only
metadata criteria still needs a query vector; it is obtained by embedding a
fixed placeholder text and widening top_k.

Dependencies: backend.core, backend.boundary, backend.application.services.chunk_service
System role: Chunk search orchestration
"""

import logging
from typing import Any

from fastapi.concurrency import run_in_threadpool

from backend.application.services.chunk_service import ChunkService, match_to_chunk
from backend.boundary.client_cache import get_client_cache
from backend.boundary.embeddings import EmbeddingClient
from backend.boundary.vdb import BaseIndexStore
from backend.configs import VectorStoreSettings
from backend.core.filter_builder import build_metadata_filter
from backend.core.fuzzy_matcher import matches
from backend.core.normalizer import normalize_name, normalize_path
from backend.models.chunk import Chunk, QueryChunksRequest

logger = logging.getLogger(__name__)

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 20


def paginate(chunks: list[Chunk], page: int, page_size: int) -> list[Chunk]:
    """Slice one 1-based page; out-of-range pages are empty."""
    start = (page - 1) * page_size
    return chunks[start : start + page_size]


def _metadata_text(chunk: Chunk, key: str) -> str:
    value = chunk.metadata.get(key)
    return "" if value is None else str(value)


def apply_fuzzy_filters(chunks: list[Chunk], request: QueryChunksRequest) -> list[Chunk]:
    """
    Keep chunks whose module, name and path fuzzily match the request.

    Each field present on the request is an additional AND condition.
    Names and paths are normalized on both sides first; modules are compared
    as-is (case-insensitive).
    """
    if request.module:
        chunks = [c for c in chunks if matches(_metadata_text(c, "module"), request.module)]

    if request.name:
        wanted_name = normalize_name(request.name)
        chunks = [
            c for c in chunks if matches(normalize_name(_metadata_text(c, "name")), wanted_name)
        ]

    if request.path:
        wanted_path = normalize_path(request.path)
        chunks = [
            c for c in chunks if matches(normalize_path(_metadata_text(c, "path")), wanted_path)
        ]

    return chunks


class ChunkQueryService:
    """Chunk query orchestrator."""

    def __init__(
        self,
        chunk_service: ChunkService | None = None,
        index_store: BaseIndexStore | None = None,
        embedding_client: EmbeddingClient | None = None,
        settings: VectorStoreSettings | None = None,
    ) -> None:
        """
        Initialize chunk query service.

        Args:
            chunk_service: Service used for id lookups (built from the same clients if None)
            index_store: Optional index store (process-wide store if None)
            embedding_client: Optional embedding client (process-wide client if None)
            settings: Query defaults (top_k, placeholder text); library defaults if None
        """
        self._index_store = index_store
        self._embedding_client = embedding_client
        self._chunk_service = chunk_service or ChunkService(
            index_store=index_store,
            embedding_client=embedding_client,
        )
        self._settings = settings or VectorStoreSettings()

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

    async def _similarity_search(
        self,
        text: str,
        top_k: int,
        metadata_filter: dict[str, Any] | None,
    ) -> list[Chunk]:
        vector = await run_in_threadpool(self.embedding_client.embed, text)
        index_matches = await run_in_threadpool(
            self.index_store.query,
            vector,
            top_k,
            metadata_filter,
        )
        return [match_to_chunk(match) for match in index_matches]

    async def query_chunks(self, request: QueryChunksRequest) -> list[Chunk]:
        """
        Query chunks.

        Decision order, first applicable wins:
        1. id: direct fetch, every other field ignored
        2. query_text: semantic query with the optional exact filter
        3. exact filter only: placeholder-vector query with a widened top_k
        4. nothing usable: empty result

        Branches 2 and 3 are fuzzy re-filtered client-side, then paginated.

        Args:
            request: Chunk query criteria

        Returns:
            list[Chunk]: One page of matching chunks, in similarity order

        Raises:
            EmbeddingError: If the embedding call fails
            VectorStoreError: If the index call fails
        """
        if request.id:
            chunk = await self._chunk_service.fetch_by_id(request.id)
            return [chunk] if chunk is not None else []

        top_k = request.top_k or self._settings.default_top_k
        metadata_filter = build_metadata_filter(request)

        if request.query_text:
            mode = "semantic"
            chunks = await self._similarity_search(request.query_text, top_k, metadata_filter)
        elif metadata_filter:
            mode = "filter"
            chunks = await self._similarity_search(
                self._settings.placeholder_query,
                min(top_k * 2, self._settings.max_top_k),
                metadata_filter,
            )
        else:
            logger.info("No usable query criteria, returning no chunks")
            return []

        fetched = len(chunks)
        chunks = apply_fuzzy_filters(chunks, request)
        page_chunks = paginate(
            chunks,
            request.page or DEFAULT_PAGE,
            request.page_size or DEFAULT_PAGE_SIZE,
        )

        logger.info(
            "Chunk query complete",
            extra={
                "mode": mode,
                "top_k": top_k,
                "fetched": fetched,
                "matched": len(chunks),
                "returned": len(page_chunks),
            },
        )
        return page_chunks
