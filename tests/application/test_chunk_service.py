"""
Tests for ChunkService.

Verifies fetch, merge-and-upsert updates (vector preserved unless content
changes), deletion and stats pass-through.
"""

from datetime import datetime

import pytest

from backend.application.services.chunk_service import ChunkService
from backend.boundary.vdb import IndexRecord
from backend.core.exceptions import ChunkNotFoundError, EmbeddingError, VectorStoreError


@pytest.fixture
def chunk_service(mock_index_store, mock_embedding_client):
    return ChunkService(index_store=mock_index_store, embedding_client=mock_embedding_client)


def upserted_record(mock_index_store) -> IndexRecord:
    records = mock_index_store.upsert.call_args.args[0]
    assert len(records) == 1
    return records[0]


@pytest.mark.asyncio
async def test_fetch_by_id_returns_chunk(chunk_service):
    chunk = await chunk_service.fetch_by_id("chunk-1")

    assert chunk is not None
    assert chunk.id == "chunk-1"
    assert chunk.metadata["module"] == "Core"
    assert chunk.score is None


@pytest.mark.asyncio
async def test_fetch_by_id_falls_back_to_text_key(chunk_service, mock_index_store):
    mock_index_store.fetch.side_effect = None
    mock_index_store.fetch.return_value = {
        "chunk-2": IndexRecord(id="chunk-2", values=[0.1], metadata={"text": "legacy body"}),
    }

    chunk = await chunk_service.fetch_by_id("chunk-2")

    assert chunk.page_content == "legacy body"


@pytest.mark.asyncio
async def test_fetch_by_id_missing_returns_none(chunk_service):
    assert await chunk_service.fetch_by_id("missing") is None


@pytest.mark.asyncio
async def test_metadata_only_update_keeps_vector(
    chunk_service, mock_index_store, mock_embedding_client, sample_record
):
    chunk = await chunk_service.update_chunk("chunk-1", metadata={"summary": "Ingestion setup"})

    mock_embedding_client.embed.assert_not_called()
    record = upserted_record(mock_index_store)
    assert record.values == sample_record.values
    assert record.metadata["summary"] == "Ingestion setup"
    assert record.metadata["module"] == "Core"
    assert record.metadata["pageContent"] == sample_record.metadata["pageContent"]
    assert record.metadata["text"] == sample_record.metadata["pageContent"]
    assert chunk.page_content == sample_record.metadata["pageContent"]
    datetime.fromisoformat(record.metadata["lastModified"])


@pytest.mark.asyncio
async def test_patch_overrides_existing_keys(chunk_service, mock_index_store):
    await chunk_service.update_chunk("chunk-1", metadata={"module": "Billing", "tags": []})

    record = upserted_record(mock_index_store)
    assert record.metadata["module"] == "Billing"
    assert record.metadata["tags"] == []


@pytest.mark.asyncio
async def test_content_update_re_embeds(
    chunk_service, mock_index_store, mock_embedding_client
):
    chunk = await chunk_service.update_chunk("chunk-1", page_content="New body")

    mock_embedding_client.embed.assert_called_once_with("New body")
    record = upserted_record(mock_index_store)
    assert record.values == [0.9, 0.8, 0.7]
    assert record.metadata["pageContent"] == "New body"
    assert record.metadata["text"] == "New body"
    assert "lastModified" in record.metadata
    assert chunk.page_content == "New body"


@pytest.mark.asyncio
async def test_unchanged_content_keeps_vector(
    chunk_service, mock_index_store, mock_embedding_client, sample_record
):
    await chunk_service.update_chunk(
        "chunk-1", page_content=sample_record.metadata["pageContent"]
    )

    mock_embedding_client.embed.assert_not_called()
    assert upserted_record(mock_index_store).values == sample_record.values


@pytest.mark.asyncio
async def test_missing_vector_is_recomputed(
    chunk_service, mock_index_store, mock_embedding_client
):
    mock_index_store.fetch.side_effect = None
    mock_index_store.fetch.return_value = {
        "chunk-3": IndexRecord(id="chunk-3", values=None, metadata={"pageContent": "body"}),
    }

    await chunk_service.update_chunk("chunk-3", metadata={"summary": "s"})

    mock_embedding_client.embed.assert_called_once_with("body")
    assert upserted_record(mock_index_store).values == [0.9, 0.8, 0.7]


@pytest.mark.asyncio
async def test_update_missing_chunk_raises(chunk_service, mock_index_store):
    with pytest.raises(ChunkNotFoundError) as exc_info:
        await chunk_service.update_chunk("missing", page_content="x")

    assert exc_info.value.chunk_id == "missing"
    mock_index_store.upsert.assert_not_called()


@pytest.mark.asyncio
async def test_embedding_failure_leaves_index_untouched(
    chunk_service, mock_index_store, mock_embedding_client
):
    mock_embedding_client.embed.side_effect = EmbeddingError("quota exceeded")

    with pytest.raises(EmbeddingError):
        await chunk_service.update_chunk("chunk-1", page_content="New body")

    mock_index_store.upsert.assert_not_called()


@pytest.mark.asyncio
async def test_upsert_failure_propagates(chunk_service, mock_index_store):
    mock_index_store.upsert.side_effect = VectorStoreError("write failed", operation="upsert")

    with pytest.raises(VectorStoreError):
        await chunk_service.update_chunk("chunk-1", metadata={"summary": "s"})


@pytest.mark.asyncio
async def test_delete_chunk(chunk_service, mock_index_store):
    await chunk_service.delete_chunk("chunk-1")

    mock_index_store.delete.assert_called_once_with(["chunk-1"])


@pytest.mark.asyncio
async def test_get_index_stats_passes_through(chunk_service):
    stats = await chunk_service.get_index_stats()

    assert stats["total_vector_count"] == 1
