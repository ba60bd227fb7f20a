"""
Process-wide client cache.

Builds the index store, embedding client and chat client on first use and
reuses them afterwards. Missing configuration therefore only fails the
operation that needs the client, never process start.

Dependencies: backend.configs, backend.boundary
System role: Lazy singleton container for external provider clients
"""

from backend.boundary.embeddings import EmbeddingClient, get_embedding_client
from backend.boundary.llm import ChatClient, get_chat_client
from backend.boundary.vdb import BaseIndexStore, get_index_store
from backend.configs import get_settings


class ClientCache:
    """Container for cached provider clients."""

    def __init__(self) -> None:
        self._index_store: BaseIndexStore | None = None
        self._embedding_client: EmbeddingClient | None = None
        self._chat_client: ChatClient | None = None

    @property
    def index_store(self) -> BaseIndexStore:
        """Get cached vector index store."""
        if self._index_store is None:
            self._index_store = get_index_store(get_settings())
        return self._index_store

    @property
    def embedding_client(self) -> EmbeddingClient:
        """Get cached embedding client."""
        if self._embedding_client is None:
            self._embedding_client = get_embedding_client(get_settings().embedding)
        return self._embedding_client

    @property
    def chat_client(self) -> ChatClient:
        """Get cached chat client."""
        if self._chat_client is None:
            settings = get_settings()
            self._chat_client = get_chat_client(settings.llm, proxy_url=settings.proxy_url)
        return self._chat_client

    def clear(self) -> None:
        """Clear all cached instances."""
        self._index_store = None
        self._embedding_client = None
        self._chat_client = None


# Global client cache
_client_cache = ClientCache()


def get_client_cache() -> ClientCache:
    """Get client cache singleton."""
    return _client_cache
