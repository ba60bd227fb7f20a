"""Embedding provider boundary."""

from backend.boundary.embeddings.embedding_client import EmbeddingClient, get_embedding_client

__all__ = ["EmbeddingClient", "get_embedding_client"]
