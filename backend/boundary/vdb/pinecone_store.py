"""
Pinecone index store.

Wraps a Pinecone serverless index behind BaseIndexStore. Pinecone filters
only support exact operators ($eq, $in, ...), never substring matches.

Dependencies: pinecone, backend.boundary.vdb
System role: Default vector index backend
"""

import logging
from typing import Any

from pinecone import Pinecone

from backend.boundary.vdb.base_index_store import BaseIndexStore
from backend.boundary.vdb.vector_schemas import IndexMatch, IndexRecord
from backend.core.exceptions import VectorStoreError

logger = logging.getLogger(__name__)


class PineconeIndexStore(BaseIndexStore):
    """
    Pinecone-backed index store.

    One client and one index handle per instance; the SDK calls are
    synchronous and are issued one at a time.
    """

    def __init__(
        self,
        api_key: str,
        index_name: str,
        proxy_url: str | None = None,
    ) -> None:
        """
        Connect to a Pinecone index.

        Args:
            api_key: Pinecone API key
            index_name: Name of the index holding the chunks
            proxy_url: Optional outbound HTTP proxy

        Raises:
            VectorStoreError: If the index handle cannot be created
        """
        self._index_name = index_name

        client_kwargs: dict[str, Any] = {"api_key": api_key}
        if proxy_url:
            client_kwargs["proxy_url"] = proxy_url

        try:
            self._client = Pinecone(**client_kwargs)
            self._index = self._client.Index(index_name)
        except Exception as e:
            logger.error(f"{__name__}:__init__ - {type(e).__name__}: {e}")
            raise VectorStoreError(
                f"Failed to connect to Pinecone index '{index_name}': {e}",
                operation="connect",
            ) from e

        logger.info(
            f"{__name__}:__init__ - Connected to Pinecone index",
            extra={"index_name": index_name, "proxy": bool(proxy_url)},
        )

    def query(
        self,
        vector: list[float],
        top_k: int,
        metadata_filter: dict[str, Any] | None = None,
    ) -> list[IndexMatch]:
        try:
            response = self._index.query(
                vector=vector,
                top_k=top_k,
                include_metadata=True,
                filter=metadata_filter,
            )
        except Exception as e:
            logger.error(f"{__name__}:query - {type(e).__name__}: {e}")
            raise VectorStoreError(f"Failed to query index: {e}", operation="query") from e

        matches = [
            IndexMatch(
                id=match.id,
                score=match.score,
                metadata=dict(match.metadata or {}),
            )
            for match in response.matches
        ]
        logger.info(
            f"{__name__}:query - Found {len(matches)} matches",
            extra={"top_k": top_k, "filtered": metadata_filter is not None},
        )
        return matches

    def fetch(self, ids: list[str]) -> dict[str, IndexRecord]:
        try:
            response = self._index.fetch(ids=ids)
        except Exception as e:
            logger.error(f"{__name__}:fetch - {type(e).__name__}: {e}")
            raise VectorStoreError(f"Failed to fetch chunk: {e}", operation="fetch") from e

        records = {}
        for record_id, vector in (response.vectors or {}).items():
            records[record_id] = IndexRecord(
                id=vector.id,
                values=list(vector.values) if vector.values else None,
                metadata=dict(vector.metadata or {}),
            )
        return records

    def upsert(self, records: list[IndexRecord]) -> None:
        payload = [
            {"id": record.id, "values": record.values, "metadata": record.metadata}
            for record in records
        ]
        try:
            self._index.upsert(vectors=payload)
        except Exception as e:
            logger.error(f"{__name__}:upsert - {type(e).__name__}: {e}")
            raise VectorStoreError(f"Failed to upsert chunk: {e}", operation="upsert") from e

        logger.info(f"{__name__}:upsert - Upserted {len(payload)} records")

    def delete(self, ids: list[str]) -> None:
        try:
            self._index.delete(ids=ids)
        except Exception as e:
            logger.error(f"{__name__}:delete - {type(e).__name__}: {e}")
            raise VectorStoreError(f"Failed to delete chunk: {e}", operation="delete") from e

        logger.info(f"{__name__}:delete - Deleted records", extra={"ids": ids})

    def describe_index_stats(self) -> dict[str, Any]:
        try:
            stats = self._index.describe_index_stats()
        except Exception as e:
            logger.error(f"{__name__}:describe_index_stats - {type(e).__name__}: {e}")
            raise VectorStoreError(f"Failed to fetch stats: {e}", operation="stats") from e

        return stats.to_dict()
