"""
API test fixtures.

Provides the assembled app with dependency overrides. The plain client does
not enter the lifespan, so no index is built and no model client is created.
"""

from unittest.mock import MagicMock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from ai_lessons.api.deps import (
    get_chat_service,
    get_rag_pipeline,
    get_songs_service,
    get_stuffing_service,
)
from ai_lessons.api.main import create_app
from ai_lessons.application.services import ChatService, SongsService, StuffingService
from ai_lessons.boundary.llm.completion_client import CompletionClient
from ai_lessons.core.rag.pipeline import RagPipeline


@pytest.fixture
def mock_completion() -> MagicMock:
    """Provide a completion client mock with a canned reply."""
    client = MagicMock(spec=CompletionClient)
    client.complete.return_value = "canned reply"
    return client


@pytest.fixture
def rag_pipeline(rag_settings, embedder, mock_completion, char_encoding) -> RagPipeline:
    """Provide an offline RAG pipeline."""
    return RagPipeline(
        settings=rag_settings,
        embedder=embedder,
        completion_client=mock_completion,
        encoding=char_encoding,
    )


@pytest.fixture
def app(mock_completion: MagicMock, rag_pipeline: RagPipeline, tmp_path) -> FastAPI:
    """Create the application with every service backed by fakes."""
    context = tmp_path / "john1.txt"
    context.write_text("In the beginning was the Word.", encoding="utf-8")

    app = create_app()
    app.dependency_overrides[get_chat_service] = lambda: ChatService(mock_completion)
    app.dependency_overrides[get_songs_service] = lambda: SongsService(mock_completion)
    app.dependency_overrides[get_stuffing_service] = lambda: StuffingService(mock_completion, context)
    app.dependency_overrides[get_rag_pipeline] = lambda: rag_pipeline
    return app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Provide TestClient for the FastAPI app."""
    return TestClient(app)
