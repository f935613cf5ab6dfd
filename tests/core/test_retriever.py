"""
Test suite for query-time retrieval.

System role: Verification of similarity retrieval over the vector index
"""

import pytest

from ai_lessons.boundary.llm.embedder import Embedder
from ai_lessons.core.exceptions import InvalidArgumentError
from ai_lessons.core.rag.retriever import Retriever
from ai_lessons.core.rag.vector_index import VectorIndex


@pytest.fixture
def keyword_embedder(keyword_embeddings) -> Embedder:
    """Embedder whose vectors count vocabulary words."""
    return Embedder(keyword_embeddings, timeout_seconds=5.0)


@pytest.fixture
def retriever(keyword_embedder: Embedder, chunk_factory) -> Retriever:
    """Retriever over four chunks embedded by keyword counts."""
    chunks = [
        chunk_factory("the light shineth in darkness", index=0),
        chunk_factory("the word was god", index=1),
        chunk_factory("john bare witness of the light", index=2),
        chunk_factory("the word word word", index=3),
    ]
    return Retriever(VectorIndex.from_chunks(chunks, keyword_embedder), keyword_embedder)


class TestRetrieverSearch:
    """Test suite for Retriever.search."""

    def test_search_should_rank_closest_chunk_first(self, retriever: Retriever) -> None:
        """The chunk sharing the most direction with the query wins."""
        # Act
        chunks = retriever.search("word", top_k=2)

        # Assert
        assert [chunk.content for chunk in chunks] == ["the word word word", "the word was god"]

    def test_search_should_return_at_most_top_k(self, retriever: Retriever) -> None:
        # Act & Assert
        assert len(retriever.search("light", top_k=1)) == 1
        assert len(retriever.search("light", top_k=50)) == 4

    def test_search_with_scores_should_be_descending(self, retriever: Retriever) -> None:
        # Act
        hits = retriever.search_with_scores("word god light", top_k=4)

        # Assert
        scores = [hit.score for hit in hits]
        assert scores == sorted(scores, reverse=True)

    @pytest.mark.parametrize("query", ["", "   "])
    def test_search_should_reject_blank_query(self, retriever: Retriever, query: str) -> None:
        """Blank queries are rejected before embedding."""
        # Act & Assert
        with pytest.raises(InvalidArgumentError):
            retriever.search(query, top_k=2)

    def test_search_should_reject_zero_top_k(self, retriever: Retriever, keyword_embeddings) -> None:
        """top_k = 0 is rejected without an embedding call."""
        # Arrange
        keyword_embeddings.query_calls.clear()

        # Act & Assert
        with pytest.raises(InvalidArgumentError):
            retriever.search("word", top_k=0)
        assert keyword_embeddings.query_calls == []
