"""
Tests for get_index_store.

Verifies store selection and the ConfigurationError raised for missing
credentials or unknown store types.
"""

from unittest.mock import patch

import pytest

from backend.boundary.vdb import get_index_store
from backend.configs import Settings, VectorStoreSettings
from backend.core.exceptions import ConfigurationError


def make_settings(**vector_store) -> Settings:
    return Settings(vector_store=VectorStoreSettings(**vector_store), proxy_url=None)


def test_missing_index_name_raises():
    settings = make_settings(store_type="pinecone", pinecone_api_key="pc-key", index_name=None)

    with pytest.raises(ConfigurationError, match="PINECONE_INDEX"):
        get_index_store(settings)


def test_missing_pinecone_key_raises():
    settings = make_settings(store_type="pinecone", pinecone_api_key=None, index_name="docs-index")

    with pytest.raises(ConfigurationError, match="PINECONE_API_KEY"):
        get_index_store(settings)


def test_missing_bucket_raises_for_s3():
    settings = make_settings(store_type="s3", vectors_bucket=None, index_name="docs-index")

    with pytest.raises(ConfigurationError, match="VECTOR_STORE_VECTORS_BUCKET"):
        get_index_store(settings)


def test_unknown_store_type_raises():
    settings = make_settings(store_type="faiss", index_name="docs-index")

    with pytest.raises(ConfigurationError, match="Invalid VECTOR_STORE_STORE_TYPE"):
        get_index_store(settings)


def test_builds_pinecone_store():
    settings = make_settings(store_type="pinecone", pinecone_api_key="pc-key", index_name="docs-index")

    with patch("backend.boundary.vdb.pinecone_store.PineconeIndexStore") as mock_store:
        store = get_index_store(settings)

    mock_store.assert_called_once_with(api_key="pc-key", index_name="docs-index", proxy_url=None)
    assert store is mock_store.return_value


def test_builds_s3_store():
    settings = make_settings(
        store_type="S3",
        vectors_bucket="chunks-bucket",
        index_name="docs-index",
        aws_region="us-east-1",
    )

    with patch("backend.boundary.vdb.s3_vectors_store.S3VectorsIndexStore") as mock_store:
        get_index_store(settings)

    mock_store.assert_called_once_with(
        vectors_bucket="chunks-bucket",
        index_name="docs-index",
        region="us-east-1",
    )
