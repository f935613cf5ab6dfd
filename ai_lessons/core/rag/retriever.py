"""
Similarity retrieval over the vector index.

Dependencies: ai_lessons.core.rag.vector_index, ai_lessons.boundary.llm
System role: Query-time retrieval for the RAG lesson
"""

import logging

from ai_lessons.boundary.llm.embedder import Embedder
from ai_lessons.core.exceptions import InvalidArgumentError
from ai_lessons.core.rag.vector_index import VectorIndex
from ai_lessons.models.chunk import Chunk, ScoredChunk

logger = logging.getLogger(__name__)


class Retriever:
    """Embed a query and return its nearest chunks."""

    def __init__(self, index: VectorIndex, embedder: Embedder) -> None:
        self._index = index
        self._embedder = embedder

    def search(self, query: str, top_k: int) -> list[Chunk]:
        """
        Retrieve the top_k chunks closest to the query.

        Args:
            query: Query text
            top_k: Maximum number of chunks

        Returns:
            list[Chunk]: Chunks ordered by descending cosine similarity
        """
        return [hit.chunk for hit in self.search_with_scores(query, top_k)]

    def search_with_scores(self, query: str, top_k: int) -> list[ScoredChunk]:
        """
        Retrieve chunks together with their similarity scores.

        Raises:
            InvalidArgumentError: When the query is blank or top_k <= 0
            UpstreamServiceError: When embedding the query fails
        """
        if not query or not query.strip():
            raise InvalidArgumentError("query must not be empty", field="query")
        if top_k <= 0:
            raise InvalidArgumentError("top_k must be a positive integer", field="top_k")

        hits = self._index.search(self._embedder.embed(query), top_k)
        logger.debug(
            "Retrieved %d chunks for query_len=%d top_k=%d",
            len(hits), len(query), top_k,
        )
        return hits
