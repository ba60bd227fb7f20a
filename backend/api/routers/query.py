"""
Query processing API endpoint.

Routes: POST /query/process - Rewrite each line of a query with an instruction

Dependencies: backend.application.services.query_processor, backend.models.query
System role: Query rewriting HTTP API
"""

import logging

from fastapi import APIRouter, Depends

from backend.api.deps.dependencies import get_query_processor
from backend.api.routers.router_utils import handle_api_errors
from backend.application.services.query_processor import QueryProcessor
from backend.core.exceptions import InvalidArgumentError
from backend.models.query import ProcessQueryRequest, ProcessQueryResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/query", tags=["query"])


@router.post("/process", response_model=ProcessQueryResponse)
@handle_api_errors
async def process_query(
    request: ProcessQueryRequest,
    query_processor: QueryProcessor = Depends(get_query_processor),
) -> ProcessQueryResponse:
    """
    Process a multi-line query line by line.

    Args:
        request: ProcessQueryRequest with query (one per line) and prompt
        query_processor: Injected QueryProcessor

    Returns:
        ProcessQueryResponse: One result per non-empty line, in order

    Raises:
        HTTPException(400): Missing query or prompt, or only blank lines
        HTTPException(500): Language model failure or empty answer
    """
    if not request.query or not request.prompt:
        raise InvalidArgumentError("Query and prompt are required")

    results = await query_processor.process(request.query, request.prompt)
    return ProcessQueryResponse(results=results)
