"""
Index statistics API endpoint.

Routes: GET /stats

Dependencies: backend.application.services.chunk_service
System role: Vector index statistics HTTP API
"""

from fastapi import APIRouter, Depends

from backend.api.deps.dependencies import get_chunk_service
from backend.api.routers.router_utils import handle_api_errors
from backend.application.services.chunk_service import ChunkService
from backend.models.chunk import IndexStatsResponse

router = APIRouter(prefix="/stats", tags=["stats"])


@router.get("", response_model=IndexStatsResponse)
@handle_api_errors
async def get_index_stats(
    chunk_service: ChunkService = Depends(get_chunk_service),
) -> IndexStatsResponse:
    """Return the vector index statistics verbatim."""
    stats = await chunk_service.get_index_stats()
    return IndexStatsResponse(stats=stats)
