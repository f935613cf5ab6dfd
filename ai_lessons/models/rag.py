"""
RAG API schemas.

Response schemas for the semantic search endpoint.

Dependencies: pydantic
System role: RAG HTTP API contracts
"""

from typing import Any

from pydantic import BaseModel, Field


class SearchHit(BaseModel):
    """Single retrieved chunk."""

    chunk_id: str
    content: str
    filename: str = Field(description="Source document filename")
    score: float = Field(description="Cosine similarity to the query")
    metadata: dict[str, Any] = Field(default_factory=dict)


class SearchResponse(BaseModel):
    """Response schema for semantic search."""

    query: str
    results: list[SearchHit]
