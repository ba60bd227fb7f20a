"""
Index store factory for selecting between Pinecone and S3 Vectors.

Depends on VECTOR_STORE_STORE_TYPE (default "pinecone").
Provides consistent interface regardless of underlying implementation.

Dependencies: backend.boundary.vdb, backend.configs
System role: Vector store instantiation and selection
"""

import logging

from backend.boundary.vdb.base_index_store import BaseIndexStore
from backend.configs import Settings
from backend.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


def get_index_store(settings: Settings) -> BaseIndexStore:
    """
    Factory function to get the index store configured for this process.

    Args:
        settings: Application settings

    Returns:
        BaseIndexStore: PineconeIndexStore or S3VectorsIndexStore

    Raises:
        ConfigurationError: If the store type is unknown or a required
            credential/index name is missing
    """
    vector_settings = settings.vector_store
    store_type = vector_settings.store_type.lower()

    if not vector_settings.index_name:
        raise ConfigurationError("PINECONE_INDEX is not configured", setting="PINECONE_INDEX")

    if store_type == "pinecone":
        if vector_settings.pinecone_api_key is None:
            raise ConfigurationError(
                "PINECONE_API_KEY is not configured",
                setting="PINECONE_API_KEY",
            )

        from backend.boundary.vdb.pinecone_store import PineconeIndexStore

        logger.info(f"{__name__}:get_index_store - Creating Pinecone index store")
        return PineconeIndexStore(
            api_key=vector_settings.pinecone_api_key.get_secret_value(),
            index_name=vector_settings.index_name,
            proxy_url=settings.proxy_url,
        )

    elif store_type == "s3":
        if not vector_settings.vectors_bucket:
            raise ConfigurationError(
                "VECTOR_STORE_VECTORS_BUCKET is not configured",
                setting="VECTOR_STORE_VECTORS_BUCKET",
            )

        from backend.boundary.vdb.s3_vectors_store import S3VectorsIndexStore

        logger.info(f"{__name__}:get_index_store - Creating S3 Vectors index store")
        return S3VectorsIndexStore(
            vectors_bucket=vector_settings.vectors_bucket,
            index_name=vector_settings.index_name,
            region=vector_settings.aws_region,
        )

    else:
        raise ConfigurationError(
            f"Invalid VECTOR_STORE_STORE_TYPE: {store_type}. Must be 'pinecone' or 's3'.",
            setting="VECTOR_STORE_STORE_TYPE",
        )
