"""
S3 Vectors index store.

Alternative backend for chunks stored in an Amazon S3 Vectors index. Uses
the boto3 "s3vectors" client directly so stored vectors can be read back
for metadata-only updates.

Metadata filters use the same exact-match operators as Pinecone
({"module": {"$eq": "Core"}}).

Dependencies: boto3, botocore, backend.boundary.vdb
System role: Vector index backend (S3 Vectors)
"""

import logging
from typing import Any

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from backend.boundary.vdb.base_index_store import BaseIndexStore
from backend.boundary.vdb.vector_schemas import IndexMatch, IndexRecord
from backend.core.exceptions import VectorStoreError

logger = logging.getLogger(__name__)


class S3VectorsIndexStore(BaseIndexStore):
    """
    S3 Vectors-backed index store.

    Query results carry a cosine distance, reported here as a similarity
    score of 1 - distance.
    """

    def __init__(
        self,
        vectors_bucket: str,
        index_name: str,
        region: str = "ap-southeast-2",
    ) -> None:
        """
        Initialize S3 Vectors client.

        Args:
            vectors_bucket: S3 Vectors bucket name
            index_name: Index name within the bucket
            region: AWS region for S3 Vectors
        """
        self._vectors_bucket = vectors_bucket
        self._index_name = index_name
        self._region = region
        self._client = boto3.client("s3vectors", region_name=region)

        logger.info(
            f"{__name__}:__init__ - S3 Vectors client created",
            extra={"bucket": vectors_bucket, "index_name": index_name, "region": region},
        )

    @property
    def _index_ref(self) -> dict[str, str]:
        return {"vectorBucketName": self._vectors_bucket, "indexName": self._index_name}

    def query(
        self,
        vector: list[float],
        top_k: int,
        metadata_filter: dict[str, Any] | None = None,
    ) -> list[IndexMatch]:
        request: dict[str, Any] = {
            **self._index_ref,
            "topK": top_k,
            "queryVector": {"float32": vector},
            "returnMetadata": True,
            "returnDistance": True,
        }
        if metadata_filter:
            request["filter"] = metadata_filter

        try:
            response = self._client.query_vectors(**request)
        except (ClientError, BotoCoreError) as e:
            logger.error(f"{__name__}:query - {type(e).__name__}: {e}")
            raise VectorStoreError(f"Failed to query index: {e}", operation="query") from e

        matches = []
        for item in response.get("vectors", []):
            distance = item.get("distance")
            matches.append(
                IndexMatch(
                    id=item["key"],
                    score=None if distance is None else 1.0 - float(distance),
                    metadata=item.get("metadata") or {},
                )
            )

        logger.info(
            f"{__name__}:query - Found {len(matches)} matches",
            extra={"top_k": top_k, "filtered": metadata_filter is not None},
        )
        return matches

    def fetch(self, ids: list[str]) -> dict[str, IndexRecord]:
        try:
            response = self._client.get_vectors(
                **self._index_ref,
                keys=ids,
                returnData=True,
                returnMetadata=True,
            )
        except (ClientError, BotoCoreError) as e:
            logger.error(f"{__name__}:fetch - {type(e).__name__}: {e}")
            raise VectorStoreError(f"Failed to fetch chunk: {e}", operation="fetch") from e

        records = {}
        for item in response.get("vectors", []):
            data = (item.get("data") or {}).get("float32")
            records[item["key"]] = IndexRecord(
                id=item["key"],
                values=list(data) if data else None,
                metadata=item.get("metadata") or {},
            )
        return records

    def upsert(self, records: list[IndexRecord]) -> None:
        vectors = [
            {
                "key": record.id,
                "data": {"float32": record.values},
                "metadata": record.metadata,
            }
            for record in records
        ]
        try:
            self._client.put_vectors(**self._index_ref, vectors=vectors)
        except (ClientError, BotoCoreError) as e:
            logger.error(f"{__name__}:upsert - {type(e).__name__}: {e}")
            raise VectorStoreError(f"Failed to upsert chunk: {e}", operation="upsert") from e

        logger.info(f"{__name__}:upsert - Put {len(vectors)} vectors")

    def delete(self, ids: list[str]) -> None:
        try:
            self._client.delete_vectors(**self._index_ref, keys=ids)
        except (ClientError, BotoCoreError) as e:
            logger.error(f"{__name__}:delete - {type(e).__name__}: {e}")
            raise VectorStoreError(f"Failed to delete chunk: {e}", operation="delete") from e

        logger.info(f"{__name__}:delete - Deleted vectors", extra={"ids": ids})

    def describe_index_stats(self) -> dict[str, Any]:
        try:
            response = self._client.get_index(**self._index_ref)
        except (ClientError, BotoCoreError) as e:
            logger.error(f"{__name__}:describe_index_stats - {type(e).__name__}: {e}")
            raise VectorStoreError(f"Failed to fetch stats: {e}", operation="stats") from e

        return response.get("index", {})
