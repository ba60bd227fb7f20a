"""
Shared test fixtures and configuration for entire test suite.

Provides: Index store, embedding and chat client mocks, sample records
Dependencies: pytest, unittest.mock
System role: Test infrastructure and fixture management
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from backend.boundary.vdb import IndexRecord


@pytest.fixture
def sample_record():
    """Stored chunk with a vector and pageContent metadata."""
    return IndexRecord(
        id="chunk-1",
        values=[0.1, 0.2, 0.3],
        metadata={
            "pageContent": "How to configure the ingestion job",
            "module": "Core",
            "name": "Ingestion.md",
            "path": "docs\\core\\Ingestion.md",
            "tags": ["ingestion"],
        },
    )


@pytest.fixture
def mock_index_store(sample_record):
    """
    Create mock BaseIndexStore for testing.

    Returns:
        MagicMock: Synchronous store mock; fetch knows only sample_record
    """
    store = MagicMock()
    store.fetch.side_effect = lambda ids: {
        chunk_id: sample_record for chunk_id in ids if chunk_id == sample_record.id
    }
    store.query.return_value = []
    store.upsert.return_value = None
    store.delete.return_value = None
    store.describe_index_stats.return_value = {
        "dimension": 3,
        "total_vector_count": 1,
        "namespaces": {"": {"vector_count": 1}},
    }
    return store


@pytest.fixture
def mock_embedding_client():
    """
    Create mock EmbeddingClient for testing.

    Returns:
        MagicMock: embed() returns a fixed 3-dimensional vector
    """
    client = MagicMock()
    client.embed.return_value = [0.9, 0.8, 0.7]
    return client


@pytest.fixture
def mock_chat_client():
    """
    Create mock ChatClient for testing.

    Returns:
        MagicMock: acomplete() is an AsyncMock echoing a canned answer
    """
    client = MagicMock()
    client.acomplete = AsyncMock(return_value="rewritten")
    return client
