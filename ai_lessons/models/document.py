"""
Document domain model.

A plain-text source loaded from the data directory. Identity is the filename.

Dependencies: pydantic
System role: Input unit of the ingestion pipeline
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Document(BaseModel):
    """Loaded text resource, immutable once created."""

    model_config = ConfigDict(frozen=True)

    filename: str = Field(description="Source filename (document identity)")
    content: str = Field(description="Raw document text")
    metadata: dict[str, Any] = Field(default_factory=dict, description="Document metadata (filename, source)")
