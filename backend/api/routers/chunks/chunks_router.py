"""
Chunk API endpoints.

Routes:
- POST /chunks/query - Search chunks by id, semantic text and metadata
- GET /chunks/{chunk_id} - Get single chunk
- PUT /chunks/{chunk_id} - Update chunk content and/or metadata
- DELETE /chunks/{chunk_id} - Delete chunk

Dependencies: backend.application.services, backend.models
System role: Chunk administration HTTP API
"""

import logging

from fastapi import APIRouter, Depends

from backend.api.deps.dependencies import get_chunk_query_service, get_chunk_service
from backend.api.routers.router_utils import handle_api_errors
from backend.application.services.chunk_query_service import (
    DEFAULT_PAGE,
    DEFAULT_PAGE_SIZE,
    ChunkQueryService,
)
from backend.application.services.chunk_service import ChunkService
from backend.core.exceptions import ChunkNotFoundError
from backend.models.chunk import (
    ChunkDetailResponse,
    DeleteChunkResponse,
    QueryChunksRequest,
    QueryChunksResponse,
    UpdateChunkRequest,
)

from .chunk_validators import validate_query_request, validate_update_request

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/chunks", tags=["chunks"])


@router.post("/query", response_model=QueryChunksResponse)
@handle_api_errors
async def query_chunks(
    request: QueryChunksRequest,
    query_service: ChunkQueryService = Depends(get_chunk_query_service),
) -> QueryChunksResponse:
    """
    Query chunks.

    Args:
        request: QueryChunksRequest with optional id, queryText and metadata filters
        query_service: Injected ChunkQueryService

    Returns:
        QueryChunksResponse: One page of chunks plus the echoed page/pageSize

    Raises:
        HTTPException(400): No query criterion given
        HTTPException(500): Embedding or index failure
    """
    validate_query_request(request)

    chunks = await query_service.query_chunks(request)

    return QueryChunksResponse(
        chunks=chunks,
        total=len(chunks),
        page=request.page or DEFAULT_PAGE,
        page_size=request.page_size or DEFAULT_PAGE_SIZE,
    )


@router.get("/{chunk_id}", response_model=ChunkDetailResponse)
@handle_api_errors
async def get_chunk(
    chunk_id: str,
    chunk_service: ChunkService = Depends(get_chunk_service),
) -> ChunkDetailResponse:
    """
    Get single chunk by ID.

    Raises:
        HTTPException(404): Chunk not found
        HTTPException(500): Index failure
    """
    chunk = await chunk_service.fetch_by_id(chunk_id)
    if chunk is None:
        raise ChunkNotFoundError(chunk_id)
    return ChunkDetailResponse(chunk=chunk)


@router.put("/{chunk_id}", response_model=ChunkDetailResponse)
@handle_api_errors
async def update_chunk(
    chunk_id: str,
    request: UpdateChunkRequest,
    chunk_service: ChunkService = Depends(get_chunk_service),
) -> ChunkDetailResponse:
    """
    Update chunk content and/or metadata.

    Args:
        chunk_id: Chunk identifier
        request: UpdateChunkRequest with pageContent and/or metadata patch
        chunk_service: Injected ChunkService

    Returns:
        ChunkDetailResponse: The updated chunk

    Raises:
        HTTPException(400): Neither pageContent nor metadata given
        HTTPException(404): Chunk not found
        HTTPException(500): Embedding or index failure
    """
    validate_update_request(request)

    logger.info(
        "Updating chunk",
        extra={
            "chunk_id": chunk_id,
            "has_content": request.page_content is not None,
            "has_metadata": request.metadata is not None,
        },
    )

    chunk = await chunk_service.update_chunk(
        chunk_id,
        page_content=request.page_content,
        metadata=request.metadata.to_patch() if request.metadata is not None else None,
    )
    return ChunkDetailResponse(chunk=chunk)


@router.delete("/{chunk_id}", response_model=DeleteChunkResponse)
@handle_api_errors
async def delete_chunk(
    chunk_id: str,
    chunk_service: ChunkService = Depends(get_chunk_service),
) -> DeleteChunkResponse:
    """
    Delete chunk by ID. Succeeds whether or not the chunk existed.

    Raises:
        HTTPException(500): Index failure
    """
    await chunk_service.delete_chunk(chunk_id)
    return DeleteChunkResponse(message=f"Chunk with id {chunk_id} deleted successfully")
