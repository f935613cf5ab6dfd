"""
Embedding generation adapter.

Wraps any LangChain Embeddings model so every embedding call runs under the
configured timeout and surfaces failures as UpstreamServiceError. The adapter
is itself an Embeddings, so the vector store drives it directly when indexing.

Dependencies: langchain_core, ai_lessons.boundary.llm.upstream
System role: Embedder for index construction and query time
"""

import logging

from langchain_core.embeddings import Embeddings

from ai_lessons.boundary.llm.upstream import call_with_timeout
from ai_lessons.core.exceptions import UpstreamServiceError

logger = logging.getLogger(__name__)


class Embedder(Embeddings):
    """Embeddings wrapper with timeout and error mapping."""

    def __init__(self, embeddings: Embeddings, timeout_seconds: float = 60.0) -> None:
        """
        Initialize embedder.

        Args:
            embeddings: Any LangChain embeddings model
            timeout_seconds: Maximum wait for one embedding call
        """
        self._embeddings = embeddings
        self._timeout = timeout_seconds

    def embed(self, text: str) -> list[float]:
        """Generate embedding for a query."""
        return self.embed_query(text)

    def embed_query(self, text: str) -> list[float]:
        """
        Generate embedding for a query.

        Args:
            text: Query text

        Returns:
            list[float]: Query embedding vector
        """
        vector = call_with_timeout(
            self._embeddings.embed_query,
            text,
            timeout=self._timeout,
            operation="embed_query",
        )
        return [float(x) for x in vector]

    def embed_documents(self, texts: list[str]) -> list[list[float]]:
        """
        Generate embeddings for chunk texts in one batch.

        Args:
            texts: Chunk texts

        Returns:
            list[list[float]]: One vector per text, same order

        Raises:
            UpstreamServiceError: When embedding fails or returns the wrong count
        """
        if not texts:
            return []

        vectors = call_with_timeout(
            self._embeddings.embed_documents,
            texts,
            timeout=self._timeout,
            operation="embed_documents",
        )
        if len(vectors) != len(texts):
            raise UpstreamServiceError(
                f"Embedding model returned {len(vectors)} vectors for {len(texts)} texts",
                operation="embed_documents",
            )
        logger.info(f"{__name__}:embed_documents - Embedded {len(texts)} texts")
        return [[float(x) for x in vector] for vector in vectors]
