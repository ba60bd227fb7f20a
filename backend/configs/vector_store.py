"""
Vector store configuration settings.

Manages the vector index connection (Pinecone by default, S3 Vectors as an
alternative) and the chunk query defaults.

Dependencies: pydantic, pydantic_settings
System role: Vector database configuration for chunk administration
"""

from pydantic import AliasChoices, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class VectorStoreSettings(BaseSettings):
    """Vector store configuration (Pinecone or S3 Vectors)."""

    model_config = SettingsConfigDict(
        env_prefix="VECTOR_STORE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    store_type: str = Field(
        default="pinecone",
        description="Vector store type: 'pinecone' or 's3'",
    )
    pinecone_api_key: SecretStr | None = Field(
        default=None,
        validation_alias=AliasChoices("PINECONE_API_KEY", "VECTOR_STORE_PINECONE_API_KEY"),
        description="Pinecone API key",
    )
    index_name: str | None = Field(
        default=None,
        validation_alias=AliasChoices("PINECONE_INDEX", "VECTOR_STORE_INDEX_NAME"),
        description="Index holding the chunks",
    )
    vectors_bucket: str | None = Field(
        default=None,
        description="S3 Vectors bucket name (store_type='s3' only)",
    )
    aws_region: str = Field(default="ap-southeast-2", description="AWS region for S3 Vectors")

    default_top_k: int = Field(default=100, description="Nearest matches fetched per query")
    max_top_k: int = Field(
        default=1000,
        description="Upper bound for the widened filter-only query",
    )
    placeholder_query: str = Field(
        default="document",
        description="Text embedded when a filter-only query still needs a vector",
    )
