"""
Health check API endpoint.

Routes: GET /health

Reports liveness and whether each provider is configured, without
contacting any provider.

Dependencies: backend.configs, backend.models.common
System role: Health check HTTP API
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from backend.api.deps.dependencies import get_settings_dependency
from backend.configs import Settings
from backend.models.common import HealthResponse

router = APIRouter(prefix="/health", tags=["health"])


def _status(value: object) -> str:
    return "Configured" if value else "Not configured"


@router.get("", response_model=HealthResponse)
async def health_check(settings: Settings = Depends(get_settings_dependency)) -> HealthResponse:
    """Basic health check with provider configuration status."""
    llm = settings.llm
    llm_key = llm.openai_api_key if llm.provider.lower() == "openai" else llm.google_api_key

    return HealthResponse(
        status="OK",
        service="Chunk Admin API",
        timestamp=datetime.now(timezone.utc).isoformat(),
        config={
            "vectorStore": _status(
                settings.vector_store.pinecone_api_key
                if settings.vector_store.store_type.lower() == "pinecone"
                else settings.vector_store.vectors_bucket
            ),
            "index": _status(settings.vector_store.index_name),
            "embedding": _status(settings.embedding.voyage_api_key),
            "llm": _status(llm_key),
        },
    )
