"""
Test suite for the application lifespan.

Entering the TestClient context runs startup, which prepares the vector index
through the overridable pipeline provider.

System role: Verification of startup index preparation
"""

from unittest.mock import MagicMock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from ai_lessons.api.deps import get_rag_pipeline
from ai_lessons.configs.rag import RAGSettings
from ai_lessons.core.exceptions import IndexLoadError
from ai_lessons.core.rag.pipeline import RagPipeline


def test_startup_should_prepare_index(app: FastAPI, rag_settings: RAGSettings) -> None:
    """The lifespan builds the index before the first request."""
    # Act
    with TestClient(app) as client:
        response = client.get("/api/v1/health/vector-store")

    # Assert
    assert response.json()["status"] == "healthy"
    assert rag_settings.vectorstore.exists()


def test_startup_should_fail_when_index_cannot_be_prepared(app: FastAPI) -> None:
    """A failing index build stops the server from starting."""
    # Arrange
    broken = MagicMock(spec=RagPipeline)
    broken.build_index.side_effect = IndexLoadError("Vector index file is corrupt")
    app.dependency_overrides[get_rag_pipeline] = lambda: broken

    # Act & Assert
    with pytest.raises(IndexLoadError):
        with TestClient(app):
            pass
    broken.build_index.assert_called_once()
