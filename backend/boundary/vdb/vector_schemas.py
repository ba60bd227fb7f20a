"""
Vector database schemas.

Pydantic models exchanged with the index stores (query matches and stored
records). Store-neutral so the services never see SDK response types.

Dependencies: pydantic
System role: Type definitions for vector operations
"""

from typing import Any

from pydantic import BaseModel, Field


class IndexMatch(BaseModel):
    """Single result from a similarity query."""

    id: str = Field(description="Record identifier")
    score: float | None = Field(default=None, description="Similarity score")
    metadata: dict[str, Any] = Field(default_factory=dict, description="Record metadata")


class IndexRecord(BaseModel):
    """Stored record: id, vector and metadata."""

    id: str = Field(description="Record identifier")
    values: list[float] | None = Field(
        default=None,
        description="Stored embedding vector (None when the store omits it)",
    )
    metadata: dict[str, Any] = Field(default_factory=dict, description="Record metadata")
