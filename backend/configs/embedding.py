"""
Embedding provider configuration settings.

Voyage AI is the only provider: the index is populated with voyage-3
vectors, and query vectors must come from the same model.

Dependencies: pydantic, pydantic_settings
System role: Embedding configuration for query and re-embed calls
"""

from pydantic import AliasChoices, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class EmbeddingSettings(BaseSettings):
    """Embedding provider configuration."""

    model_config = SettingsConfigDict(
        env_prefix="EMBEDDING_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    provider: str = Field(default="voyage", description="Embedding provider (only 'voyage')")
    model: str = Field(
        default="voyage-3",
        validation_alias=AliasChoices("EMBEDDING_MODEL", "VOYAGE_EMBEDDING_MODEL"),
        description="Embedding model name",
    )
    voyage_api_key: SecretStr | None = Field(
        default=None,
        validation_alias=AliasChoices("VOYAGE_API_KEY", "EMBEDDING_VOYAGE_API_KEY"),
        description="Voyage AI API key",
    )
