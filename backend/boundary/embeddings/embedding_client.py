"""
Embedding client.

Turns text into a vector through a LangChain Embeddings implementation
(Voyage AI, the provider the index was built with) and reports provider
failures as EmbeddingError.

Dependencies: langchain_core, langchain_voyageai
System role: Embedding provider adapter
"""

import logging

from langchain_core.embeddings import Embeddings

from backend.configs import EmbeddingSettings
from backend.core.exceptions import ConfigurationError, EmbeddingError

logger = logging.getLogger(__name__)


class EmbeddingClient:
    """Single-text embedding over a LangChain Embeddings model."""

    def __init__(self, embeddings: Embeddings, model_name: str = "") -> None:
        self._embeddings = embeddings
        self._model_name = model_name

    def embed(self, text: str) -> list[float]:
        """
        Embed one text.

        Args:
            text: Text to embed

        Returns:
            list[float]: Embedding vector

        Raises:
            EmbeddingError: If the provider call fails or returns no vector
        """
        try:
            vector = self._embeddings.embed_query(text)
        except Exception as e:
            logger.error(f"{__name__}:embed - {type(e).__name__}: {e}")
            raise EmbeddingError(
                f"Failed to generate embedding: {e}",
                details={"model": self._model_name},
            ) from e

        if not vector:
            raise EmbeddingError(
                "Embedding provider returned an empty vector",
                details={"model": self._model_name},
            )
        return list(vector)


def get_embedding_client(settings: EmbeddingSettings) -> EmbeddingClient:
    """
    Build the embedding client for the configured provider.

    Args:
        settings: Embedding settings

    Returns:
        EmbeddingClient: Ready-to-use client

    Raises:
        ConfigurationError: If the provider is unknown or its API key is missing
    """
    provider = settings.provider.lower()

    if provider != "voyage":
        raise ConfigurationError(
            f"Invalid EMBEDDING_PROVIDER: {provider}. Must be 'voyage'.",
            setting="EMBEDDING_PROVIDER",
        )

    if settings.voyage_api_key is None:
        raise ConfigurationError("VOYAGE_API_KEY is not configured", setting="VOYAGE_API_KEY")

    from langchain_voyageai import VoyageAIEmbeddings

    embeddings = VoyageAIEmbeddings(
        model=settings.model,
        api_key=settings.voyage_api_key.get_secret_value(),
        truncation=True,
    )

    logger.info(
        f"{__name__}:get_embedding_client - Created {provider} embeddings",
        extra={"model": settings.model},
    )
    return EmbeddingClient(embeddings, model_name=settings.model)
