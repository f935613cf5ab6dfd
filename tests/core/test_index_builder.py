"""
Test suite for the build-or-load vector index bootstrap.

The existence check is injected so both startup paths are exercised without
relying on the real filesystem state.

System role: Verification of the vector index lifecycle
"""

from pathlib import Path
import pytest

from ai_lessons.boundary.llm.embedder import Embedder
from ai_lessons.core.exceptions import IndexLoadError, ResourceNotFoundError
from ai_lessons.core.rag.chunker import TokenChunker
from ai_lessons.core.rag.document_loader import DocumentLoader
from ai_lessons.core.rag.index_builder import IndexState, VectorIndexBootstrap
from ai_lessons.core.rag.vector_index import VectorIndex, compute_fingerprint


@pytest.fixture
def chunker(char_encoding) -> TokenChunker:
    """Provide a character-level chunker."""
    return TokenChunker(chunk_size=20, encoding=char_encoding)


@pytest.fixture
def counted_embedder(keyword_embeddings) -> Embedder:
    """Embedder whose embed_documents batches are recorded."""
    return Embedder(keyword_embeddings, timeout_seconds=5.0)


@pytest.fixture
def index_path(tmp_path: Path) -> Path:
    return tmp_path / "store" / "vectorstore.json"


def _bootstrap(index_path, data_dir, chunker, embedder, exists, **kwargs) -> VectorIndexBootstrap:
    return VectorIndexBootstrap(
        index_path=index_path,
        loader=DocumentLoader(data_dir),
        chunker=chunker,
        embedder=embedder,
        path_exists=lambda path: exists,
        **kwargs,
    )


class TestBuildPath:
    """Test suite for the build path (no persisted file)."""

    def test_build_should_embed_and_persist(
        self, index_path: Path, data_dir: Path, chunker: TokenChunker,
        counted_embedder: Embedder, keyword_embeddings,
    ) -> None:
        """Absent file: load, chunk, embed, save, READY."""
        # Arrange
        bootstrap = _bootstrap(index_path, data_dir, chunker, counted_embedder, exists=False)

        # Act
        index = bootstrap.build_or_load()

        # Assert
        assert bootstrap.state is IndexState.READY
        assert index_path.exists()
        assert len(index) > 0
        assert len(keyword_embeddings.document_calls) == 1

    def test_build_should_record_fingerprint(
        self, index_path: Path, data_dir: Path, chunker: TokenChunker, embedder: Embedder
    ) -> None:
        """Persisted snapshot carries the source fingerprint."""
        # Arrange
        bootstrap = _bootstrap(index_path, data_dir, chunker, embedder, exists=False)
        expected = compute_fingerprint(DocumentLoader(data_dir).load(), 20)

        # Act
        bootstrap.build_or_load()

        # Assert
        assert VectorIndex.load(index_path, embedder).fingerprint == expected

    def test_build_should_fail_without_documents(
        self, index_path: Path, tmp_path: Path, chunker: TokenChunker, embedder: Embedder
    ) -> None:
        """No source documents: FAILED and ResourceNotFoundError."""
        # Arrange
        empty = tmp_path / "empty"
        empty.mkdir()
        bootstrap = _bootstrap(index_path, empty, chunker, embedder, exists=False)

        # Act & Assert
        with pytest.raises(ResourceNotFoundError):
            bootstrap.build_or_load()
        assert bootstrap.state is IndexState.FAILED
        assert not index_path.exists()


class TestLoadPath:
    """Test suite for the load path (persisted file present)."""

    def test_load_should_not_embed(
        self, index_path: Path, data_dir: Path, chunker: TokenChunker, embedder: Embedder,
        counted_embedder: Embedder, keyword_embeddings,
    ) -> None:
        """Present file: read back without calling the embedding model."""
        # Arrange
        _bootstrap(index_path, data_dir, chunker, embedder, exists=False).build_or_load()
        bootstrap = _bootstrap(index_path, data_dir, chunker, counted_embedder, exists=True)

        # Act
        index = bootstrap.build_or_load()

        # Assert
        assert bootstrap.state is IndexState.READY
        assert len(index) > 0
        assert keyword_embeddings.document_calls == []

    def test_load_should_trust_file_without_reading_sources(
        self, index_path: Path, data_dir: Path, tmp_path: Path, chunker: TokenChunker, embedder: Embedder
    ) -> None:
        """Without fingerprint validation the data directory is never touched."""
        # Arrange
        _bootstrap(index_path, data_dir, chunker, embedder, exists=False).build_or_load()
        bootstrap = _bootstrap(index_path, tmp_path / "missing", chunker, embedder, exists=True)

        # Act
        bootstrap.build_or_load()

        # Assert
        assert bootstrap.state is IndexState.READY

    def test_corrupt_file_should_be_fatal(
        self, index_path: Path, data_dir: Path, chunker: TokenChunker, embedder: Embedder
    ) -> None:
        """Unreadable file: FAILED and IndexLoadError, no fallback rebuild."""
        # Arrange
        index_path.parent.mkdir(parents=True)
        index_path.write_text("{broken", encoding="utf-8")
        bootstrap = _bootstrap(index_path, data_dir, chunker, embedder, exists=True)

        # Act & Assert
        with pytest.raises(IndexLoadError):
            bootstrap.build_or_load()
        assert bootstrap.state is IndexState.FAILED
        assert index_path.read_text(encoding="utf-8") == "{broken"

    def test_stale_file_should_rebuild_when_validation_enabled(
        self, index_path: Path, data_dir: Path, chunker: TokenChunker, embedder: Embedder, chunk_factory
    ) -> None:
        """Fingerprint mismatch with validation on: rebuild and overwrite."""
        # Arrange
        VectorIndex.from_chunks([chunk_factory("stale")], embedder, fingerprint="outdated").save(index_path)
        bootstrap = _bootstrap(
            index_path, data_dir, chunker, embedder, exists=True, validate_fingerprint=True
        )

        # Act
        index = bootstrap.build_or_load()

        # Assert
        assert bootstrap.state is IndexState.READY
        assert len(index) > 0
        assert VectorIndex.load(index_path, embedder).fingerprint != "outdated"

    def test_stale_file_should_be_kept_when_validation_disabled(
        self, index_path: Path, data_dir: Path, chunker: TokenChunker, embedder: Embedder, chunk_factory
    ) -> None:
        """Fingerprint mismatch with validation off: file used as-is."""
        # Arrange
        VectorIndex.from_chunks([chunk_factory("stale")], embedder, fingerprint="outdated").save(index_path)
        bootstrap = _bootstrap(index_path, data_dir, chunker, embedder, exists=True)

        # Act
        index = bootstrap.build_or_load()

        # Assert
        assert [entry.chunk.content for entry in index] == ["stale"]
        assert index.fingerprint == "outdated"


class TestLifecycle:
    """Test suite for state machine rules."""

    def test_initial_state_should_be_uninitialized(
        self, index_path: Path, data_dir: Path, chunker: TokenChunker, embedder: Embedder
    ) -> None:
        bootstrap = _bootstrap(index_path, data_dir, chunker, embedder, exists=False)
        assert bootstrap.state is IndexState.UNINITIALIZED

    def test_ready_should_return_same_index(
        self, index_path: Path, data_dir: Path, chunker: TokenChunker,
        counted_embedder: Embedder, keyword_embeddings,
    ) -> None:
        """Repeated calls reuse the ready index."""
        # Arrange
        bootstrap = _bootstrap(index_path, data_dir, chunker, counted_embedder, exists=False)

        # Act
        first = bootstrap.build_or_load()
        second = bootstrap.build_or_load()

        # Assert
        assert first is second
        assert len(keyword_embeddings.document_calls) == 1

    def test_failed_bootstrap_should_not_restart(
        self, index_path: Path, data_dir: Path, chunker: TokenChunker, embedder: Embedder
    ) -> None:
        """A failed bootstrap refuses another attempt."""
        # Arrange
        index_path.parent.mkdir(parents=True)
        index_path.write_text("nope", encoding="utf-8")
        bootstrap = _bootstrap(index_path, data_dir, chunker, embedder, exists=True)
        with pytest.raises(IndexLoadError):
            bootstrap.build_or_load()

        # Act & Assert
        with pytest.raises(RuntimeError):
            bootstrap.build_or_load()
