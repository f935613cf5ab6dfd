"""
Chunk and vector index models.

Represents document chunks, their embeddings as held by the vector index
and scored search hits.

Dependencies: pydantic
System role: Data structures for chunking, indexing and retrieval
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Chunk(BaseModel):
    """Bounded span of a document's text."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(description="Deterministic chunk identifier (content hash)")
    content: str = Field(description="Chunk text content")
    index: int = Field(ge=0, description="Ordinal position within the source document")
    document_id: str = Field(description="Filename of the owning document")
    metadata: dict[str, Any] = Field(default_factory=dict, description="Metadata inherited from the document")


class VectorIndexEntry(BaseModel):
    """Chunk paired with its embedding vector."""

    model_config = ConfigDict(frozen=True)

    chunk: Chunk
    embedding: list[float] = Field(description="Embedding vector")
    metadata: dict[str, Any] = Field(default_factory=dict, description="Entry metadata")


class ScoredChunk(BaseModel):
    """Search hit with its cosine similarity to the query."""

    chunk: Chunk
    score: float = Field(description="Cosine similarity (higher is closer)")
