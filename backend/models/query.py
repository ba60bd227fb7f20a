"""
Query processing schemas.

Request/response schemas for batch rewriting of free-text queries.

Dependencies: pydantic
System role: Query processing API contracts
"""

from pydantic import BaseModel, Field


class ProcessQueryRequest(BaseModel):
    """Multi-line query plus the instruction applied to each line."""

    query: str = Field(default="", description="One query per line")
    prompt: str = Field(default="", description="Instruction applied to every line")


class ProcessQueryResponse(BaseModel):
    """Transformed queries in input line order."""

    success: bool = True
    results: list[str]
