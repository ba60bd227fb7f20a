"""
Tests for PineconeIndexStore.

The Pinecone SDK is patched; tests verify request shapes, response mapping
and error wrapping.
"""

from types import SimpleNamespace
from unittest.mock import MagicMock, patch

import pytest

from backend.boundary.vdb import IndexRecord
from backend.boundary.vdb.pinecone_store import PineconeIndexStore
from backend.core.exceptions import VectorStoreError


@pytest.fixture
def mock_index():
    return MagicMock()


@pytest.fixture
def store(mock_index):
    with patch("backend.boundary.vdb.pinecone_store.Pinecone") as mock_pinecone:
        mock_pinecone.return_value.Index.return_value = mock_index
        yield PineconeIndexStore(api_key="pc-key", index_name="docs-index")


def test_connects_with_proxy():
    with patch("backend.boundary.vdb.pinecone_store.Pinecone") as mock_pinecone:
        PineconeIndexStore(api_key="pc-key", index_name="docs-index", proxy_url="http://proxy:8080")

    mock_pinecone.assert_called_once_with(api_key="pc-key", proxy_url="http://proxy:8080")
    mock_pinecone.return_value.Index.assert_called_once_with("docs-index")


def test_connection_failure_is_wrapped():
    with patch("backend.boundary.vdb.pinecone_store.Pinecone") as mock_pinecone:
        mock_pinecone.side_effect = RuntimeError("bad key")

        with pytest.raises(VectorStoreError) as exc_info:
            PineconeIndexStore(api_key="pc-key", index_name="docs-index")

    assert exc_info.value.details["operation"] == "connect"


def test_query_maps_matches(store, mock_index):
    mock_index.query.return_value = SimpleNamespace(
        matches=[
            SimpleNamespace(id="a", score=0.91, metadata={"module": "Core"}),
            SimpleNamespace(id="b", score=0.42, metadata=None),
        ]
    )

    matches = store.query([0.1, 0.2], 5, {"module": {"$eq": "Core"}})

    mock_index.query.assert_called_once_with(
        vector=[0.1, 0.2],
        top_k=5,
        include_metadata=True,
        filter={"module": {"$eq": "Core"}},
    )
    assert [m.id for m in matches] == ["a", "b"]
    assert matches[0].score == 0.91
    assert matches[1].metadata == {}


def test_query_failure_is_wrapped(store, mock_index):
    mock_index.query.side_effect = RuntimeError("timeout")

    with pytest.raises(VectorStoreError) as exc_info:
        store.query([0.1], 1)

    assert exc_info.value.details["operation"] == "query"
    assert "timeout" in exc_info.value.message


def test_fetch_maps_vectors(store, mock_index):
    mock_index.fetch.return_value = SimpleNamespace(
        vectors={
            "chunk-1": SimpleNamespace(id="chunk-1", values=[0.1, 0.2], metadata={"text": "body"}),
        }
    )

    records = store.fetch(["chunk-1", "missing"])

    mock_index.fetch.assert_called_once_with(ids=["chunk-1", "missing"])
    assert list(records) == ["chunk-1"]
    assert records["chunk-1"].values == [0.1, 0.2]
    assert records["chunk-1"].metadata == {"text": "body"}


def test_upsert_sends_single_batch(store, mock_index):
    store.upsert([IndexRecord(id="chunk-1", values=[0.5], metadata={"text": "body"})])

    mock_index.upsert.assert_called_once_with(
        vectors=[{"id": "chunk-1", "values": [0.5], "metadata": {"text": "body"}}]
    )


def test_delete(store, mock_index):
    store.delete(["chunk-1"])

    mock_index.delete.assert_called_once_with(ids=["chunk-1"])


def test_describe_index_stats_returns_dict(store, mock_index):
    mock_index.describe_index_stats.return_value.to_dict.return_value = {"dimension": 1024}

    assert store.describe_index_stats() == {"dimension": 1024}
