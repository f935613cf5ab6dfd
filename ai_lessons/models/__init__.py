"""Domain models and API schemas."""

from ai_lessons.models.chunk import (
    Chunk,
    ScoredChunk,
    VectorIndexEntry,
)
from ai_lessons.models.document import Document
from ai_lessons.models.songs import ArtistSongs

__all__ = [
    "ArtistSongs",
    "Chunk",
    "Document",
    "ScoredChunk",
    "VectorIndexEntry",
]
