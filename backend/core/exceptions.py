"""
Exception hierarchy for the Chunk Admin application.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class ChunkAdminException(Exception):
    """Base exception for all Chunk Admin application errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class InvalidArgumentError(ChunkAdminException):
    """Raised when a request is missing required fields or is malformed."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize invalid argument error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class ChunkNotFoundError(ChunkAdminException):
    """Raised when a chunk id is absent from the index."""

    def __init__(self, chunk_id: str, details: dict[str, Any] | None = None) -> None:
        details = details or {}
        details["chunk_id"] = chunk_id
        self.chunk_id = chunk_id
        super().__init__(f"Chunk with id {chunk_id} not found", details)


class UpstreamError(ChunkAdminException):
    """Raised when an external provider call fails or returns nothing usable."""

    pass


class EmbeddingError(UpstreamError):
    """Raised when embedding generation fails."""

    pass


class VectorStoreError(UpstreamError):
    """Raised when vector store operations fail."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize vector store error.

        Args:
            message: Error message
            operation: Operation that failed (query, fetch, upsert, delete, stats)
            details: Additional context
        """
        details = details or {}
        if operation:
            details["operation"] = operation
        super().__init__(message, details)


class LanguageModelError(UpstreamError):
    """Raised when the language model call fails or returns an empty answer."""

    pass


class ConfigurationError(UpstreamError):
    """Raised on first use of a provider whose credentials or index name are missing."""

    def __init__(
        self,
        message: str,
        setting: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if setting:
            details["setting"] = setting
        super().__init__(message, details)
