"""
Tests for S3VectorsIndexStore.

boto3.client is patched; tests verify the S3 Vectors request shapes and
the distance-to-score mapping.
"""

from unittest.mock import MagicMock, patch

import pytest
from botocore.exceptions import ClientError

from backend.boundary.vdb import IndexRecord
from backend.boundary.vdb.s3_vectors_store import S3VectorsIndexStore
from backend.core.exceptions import VectorStoreError

INDEX_REF = {"vectorBucketName": "chunks-bucket", "indexName": "docs-index"}


@pytest.fixture
def mock_client():
    return MagicMock()


@pytest.fixture
def store(mock_client):
    with patch("backend.boundary.vdb.s3_vectors_store.boto3.client", return_value=mock_client):
        yield S3VectorsIndexStore(
            vectors_bucket="chunks-bucket",
            index_name="docs-index",
            region="us-east-1",
        )


def test_query_converts_distance_to_score(store, mock_client):
    mock_client.query_vectors.return_value = {
        "vectors": [{"key": "a", "distance": 0.25, "metadata": {"module": "Core"}}]
    }

    matches = store.query([0.1, 0.2], 3, {"module": {"$eq": "Core"}})

    mock_client.query_vectors.assert_called_once_with(
        **INDEX_REF,
        topK=3,
        queryVector={"float32": [0.1, 0.2]},
        returnMetadata=True,
        returnDistance=True,
        filter={"module": {"$eq": "Core"}},
    )
    assert matches[0].id == "a"
    assert matches[0].score == pytest.approx(0.75)


def test_query_without_filter_omits_it(store, mock_client):
    mock_client.query_vectors.return_value = {"vectors": []}

    store.query([0.1], 1)

    assert "filter" not in mock_client.query_vectors.call_args.kwargs


def test_fetch_reads_vector_data(store, mock_client):
    mock_client.get_vectors.return_value = {
        "vectors": [{"key": "chunk-1", "data": {"float32": [0.3]}, "metadata": {"text": "x"}}]
    }

    records = store.fetch(["chunk-1"])

    assert records["chunk-1"].values == [0.3]
    assert records["chunk-1"].metadata == {"text": "x"}


def test_upsert_puts_vectors(store, mock_client):
    store.upsert([IndexRecord(id="chunk-1", values=[0.5], metadata={"text": "x"})])

    mock_client.put_vectors.assert_called_once_with(
        **INDEX_REF,
        vectors=[{"key": "chunk-1", "data": {"float32": [0.5]}, "metadata": {"text": "x"}}],
    )


def test_client_error_is_wrapped(store, mock_client):
    mock_client.delete_vectors.side_effect = ClientError(
        {"Error": {"Code": "AccessDenied", "Message": "denied"}},
        "DeleteVectors",
    )

    with pytest.raises(VectorStoreError) as exc_info:
        store.delete(["chunk-1"])

    assert exc_info.value.details["operation"] == "delete"


def test_describe_index_stats(store, mock_client):
    mock_client.get_index.return_value = {"index": {"indexName": "docs-index", "dimension": 1024}}

    assert store.describe_index_stats() == {"indexName": "docs-index", "dimension": 1024}
