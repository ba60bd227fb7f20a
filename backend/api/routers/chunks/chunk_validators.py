"""
Chunk request validation utilities.

Business rules not covered by the Pydantic models. Validation runs before
any service call, so rejected requests never reach a provider.

Dependencies: backend.models.chunk, backend.core.exceptions
System role: Chunk request validation
"""

from backend.core.exceptions import InvalidArgumentError
from backend.models.chunk import QueryChunksRequest, UpdateChunkRequest

QUERY_CRITERIA = ("id", "module", "name", "path", "query_text", "prompt")


def validate_query_request(request: QueryChunksRequest) -> None:
    """
    Require at least one query criterion.

    Raises:
        InvalidArgumentError: If every criterion is missing or blank
    """
    if not any(getattr(request, field) for field in QUERY_CRITERIA):
        raise InvalidArgumentError(
            "At least one query parameter (id, module, name, path, queryText, or prompt) "
            "is required"
        )


def validate_update_request(request: UpdateChunkRequest) -> None:
    """
    Require at least one updatable field.

    An empty string content or an empty metadata object still counts as provided.

    Raises:
        InvalidArgumentError: If both pageContent and metadata are absent
    """
    if request.page_content is None and request.metadata is None:
        raise InvalidArgumentError(
            "At least one field (pageContent or metadata) must be provided for update"
        )
