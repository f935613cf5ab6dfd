"""
Test suite for RAG endpoints.

System role: Verification of semantic search and answer HTTP API endpoints
"""

from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from ai_lessons.core.rag.pipeline import RagPipeline


class TestSearchEndpoint:
    """Test suite for GET /rag/search."""

    def test_search_should_default_to_two_results(self, client: TestClient) -> None:
        # Act
        response = client.get("/api/v1/rag/search")

        # Assert
        assert response.status_code == 200
        body = response.json()
        assert body["query"] == "Who is The Word?"
        assert len(body["results"]) == 2

    def test_search_should_rank_exact_text_first(self, client: TestClient, rag_pipeline: RagPipeline) -> None:
        # Arrange
        target = list(rag_pipeline.build_index())[0].chunk

        # Act
        response = client.get("/api/v1/rag/search", params={"message": target.content, "top_k": 1})

        # Assert
        hit = response.json()["results"][0]
        assert hit["chunk_id"] == target.id
        assert hit["filename"] == target.document_id
        assert hit["score"] == pytest.approx(1.0)

    def test_search_should_reject_zero_top_k(self, client: TestClient) -> None:
        # Act
        response = client.get("/api/v1/rag/search", params={"top_k": 0})

        # Assert
        assert response.status_code == 400
        assert response.json()["detail"]["kind"] == "InvalidArgument"


class TestAskEndpoint:
    """Test suite for GET /rag/ask."""

    def test_ask_should_return_answer_text(self, client: TestClient, mock_completion: MagicMock) -> None:
        # Act
        response = client.get("/api/v1/rag/ask", params={"message": "Who is The Word?"})

        # Assert
        assert response.status_code == 200
        assert response.text == "canned reply"
        assert "Who is The Word?" in mock_completion.complete.call_args.args[0]

    def test_ask_with_empty_data_should_return_404(self, client: TestClient, data_dir) -> None:
        # Arrange
        for path in data_dir.iterdir():
            path.unlink()

        # Act
        response = client.get("/api/v1/rag/ask")

        # Assert
        assert response.status_code == 404
        assert response.json()["detail"]["kind"] == "ResourceNotFound"
