"""
Chunk domain models and schemas.

Represents an indexed text chunk plus the request/response schemas of the
chunk endpoints. Attributes are snake_case in Python and camelCase on the
wire to match the admin frontend.

Dependencies: pydantic
System role: Chunk data structures and API contracts
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model serializing to camelCase while accepting either spelling."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ChunkMetadata(CamelModel):
    """
    Recognized chunk metadata keys.

    Any additional key is kept verbatim. Used to validate update patches;
    stored metadata travels as a plain dict.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )

    path: str | None = Field(default=None, description="Source file path")
    module: str | None = Field(default=None, description="Owning module")
    name: str | None = Field(default=None, description="Document name")
    type: str | None = Field(default=None, description="Chunk type")
    chunk_index: int | None = Field(default=None, description="Position within the document")
    summary: str | None = Field(default=None, description="Short summary")
    tags: list[str] | None = Field(default=None, description="Ordered tags")
    keywords: list[str] | None = Field(default=None, description="Ordered keywords")
    extra: dict[str, str] | None = Field(default=None, description="Free-form string map")
    last_modified: str | None = Field(default=None, description="ISO-8601 time of last update")

    def to_patch(self) -> dict[str, Any]:
        """Return only the keys the caller set, under their stored (camelCase) names."""
        return self.model_dump(by_alias=True, exclude_unset=True)


class Chunk(CamelModel):
    """Indexed text chunk."""

    id: str = Field(description="Opaque chunk identifier assigned at ingestion")
    page_content: str = Field(default="", description="Chunk text content")
    metadata: dict[str, Any] = Field(default_factory=dict, description="Chunk metadata")
    score: float | None = Field(default=None, description="Similarity score (query results only)")


class QueryChunksRequest(CamelModel):
    """Loose set of optional chunk search criteria."""

    id: str | None = Field(default=None, description="Exact chunk id")
    module: str | None = Field(default=None, description="Module filter (fuzzy)")
    name: str | None = Field(default=None, description="Name filter (fuzzy, suffix-insensitive)")
    path: str | None = Field(default=None, description="Path filter (fuzzy, separator-insensitive)")
    query_text: str | None = Field(default=None, description="Free-text semantic query")
    prompt: str | None = Field(default=None, description="Operator prompt")
    metadata_filter: bool = Field(
        default=False,
        description="Send module/name/path as an exact-match filter to the index",
    )
    top_k: int | None = Field(default=None, ge=1, description="Number of nearest matches")
    page: int | None = Field(default=None, ge=1, description="1-based page number")
    page_size: int | None = Field(default=None, ge=1, description="Chunks per page")

    @field_validator("id", "module", "name", "path", "query_text", "prompt")
    @classmethod
    def blank_as_absent(cls, value: str | None) -> str | None:
        """Treat empty or whitespace-only criteria as not given."""
        if value is None or not value.strip():
            return None
        return value


class QueryChunksResponse(CamelModel):
    """Response schema for chunk queries."""

    success: bool = True
    chunks: list[Chunk]
    total: int
    page: int
    page_size: int


class UpdateChunkRequest(CamelModel):
    """Partial chunk update."""

    page_content: str | None = Field(default=None, description="Replacement text content")
    metadata: ChunkMetadata | None = Field(default=None, description="Metadata patch")


class ChunkDetailResponse(CamelModel):
    """Response schema wrapping a single chunk."""

    success: bool = True
    chunk: Chunk


class DeleteChunkResponse(CamelModel):
    """Response schema for chunk deletion."""

    success: bool = True
    message: str


class IndexStatsResponse(CamelModel):
    """Index statistics as reported by the vector store."""

    success: bool = True
    stats: dict[str, Any]
