"""
Common response models.

Error envelope shared by all endpoints.

Dependencies: pydantic
System role: Common API response structures
"""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Error response schema."""

    success: bool = False
    error: str = Field(description="Error message")
    details: dict | None = Field(default=None, description="Additional error context")


class HealthResponse(BaseModel):
    """Health check response with provider configuration status."""

    status: str
    service: str
    timestamp: str
    config: dict[str, str]
