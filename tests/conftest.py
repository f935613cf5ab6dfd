"""
Shared test fixtures and configuration for entire test suite.

Provides: Offline encoding and embedding fakes, chat model fakes, temporary
data directories and RAG settings pointing at them.
Dependencies: pytest, langchain_core
System role: Test infrastructure and fixture management
"""

from pathlib import Path

import pytest
from langchain_core.embeddings import DeterministicFakeEmbedding, Embeddings
from langchain_core.language_models import FakeListChatModel

from ai_lessons.boundary.llm.completion_client import CompletionClient
from ai_lessons.boundary.llm.embedder import Embedder
from ai_lessons.configs.rag import RAGSettings
from ai_lessons.models.chunk import Chunk


class CharEncoding:
    """One token per character; keeps chunking tests offline and predictable."""

    def encode(self, text: str) -> list[int]:
        return [ord(c) for c in text]

    def decode(self, tokens: list[int]) -> str:
        return "".join(chr(t) for t in tokens)


class KeywordEmbeddings(Embeddings):
    """Bag-of-words embeddings over a fixed vocabulary."""

    def __init__(self, vocabulary: list[str]) -> None:
        self.vocabulary = vocabulary
        self.document_calls: list[list[str]] = []
        self.query_calls: list[str] = []

    def _vector(self, text: str) -> list[float]:
        words = text.lower().split()
        return [float(words.count(term)) for term in self.vocabulary]

    def embed_documents(self, texts: list[str]) -> list[list[float]]:
        self.document_calls.append(list(texts))
        return [self._vector(text) for text in texts]

    def embed_query(self, text: str) -> list[float]:
        self.query_calls.append(text)
        return self._vector(text)


def make_chunk(content: str, index: int = 0, document_id: str = "doc.txt") -> Chunk:
    """Build a chunk with a readable id."""
    return Chunk(
        id=f"{document_id}-{index}",
        content=content,
        index=index,
        document_id=document_id,
        metadata={"filename": document_id},
    )


@pytest.fixture
def char_encoding() -> CharEncoding:
    """Provide a character-level encoding."""
    return CharEncoding()


@pytest.fixture
def fake_embeddings() -> DeterministicFakeEmbedding:
    """Provide deterministic hash-seeded embeddings."""
    return DeterministicFakeEmbedding(size=32)


@pytest.fixture
def embedder(fake_embeddings: DeterministicFakeEmbedding) -> Embedder:
    """Provide an embedder over deterministic fake embeddings."""
    return Embedder(fake_embeddings, timeout_seconds=5.0)


@pytest.fixture
def completion_client() -> CompletionClient:
    """Provide a completion client that always answers the same text."""
    return CompletionClient(FakeListChatModel(responses=["The Word is Jesus."]), timeout_seconds=5.0)


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    """
    Create a data directory with two small text documents.

    Returns:
        Path: Directory path
    """
    directory = tmp_path / "data"
    directory.mkdir()
    (directory / "b_john.txt").write_text(
        "In the beginning was the Word. The Word was with God.", encoding="utf-8"
    )
    (directory / "a_genesis.txt").write_text(
        "In the beginning God created the heaven and the earth.", encoding="utf-8"
    )
    return directory


@pytest.fixture
def rag_settings(tmp_path: Path, data_dir: Path) -> RAGSettings:
    """Provide RAG settings pointing at the temporary data directory."""
    return RAGSettings(
        vectorstore=tmp_path / "index" / "vectorstore.json",
        data_dir=data_dir,
        chunk_size=20,
        top_k=2,
    )


@pytest.fixture
def chunk_factory():
    """Provide the make_chunk builder."""
    return make_chunk


@pytest.fixture
def keyword_embeddings() -> KeywordEmbeddings:
    """Provide bag-of-words embeddings over a small vocabulary."""
    return KeywordEmbeddings(["word", "god", "light", "john"])
