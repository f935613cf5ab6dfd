"""
Build-or-load bootstrap for the vector index.

Startup follows one of two paths:

    UNINITIALIZED -> LOADING_FROM_DISK -> READY
    UNINITIALIZED -> BUILDING -> PERSISTING -> READY

A persisted file is trusted as-is unless fingerprint validation is enabled,
in which case a mismatch moves LOADING_FROM_DISK -> BUILDING. Any failure
moves to FAILED and the error is re-raised; a failed bootstrap is not retried.

Dependencies: ai_lessons.core.rag, ai_lessons.boundary.llm
System role: Vector index lifecycle at application startup
"""

import enum
import logging
from collections.abc import Callable
from pathlib import Path

from ai_lessons.boundary.llm.embedder import Embedder
from ai_lessons.core.rag.chunker import TokenChunker
from ai_lessons.core.rag.document_loader import DocumentLoader
from ai_lessons.core.rag.vector_index import VectorIndex, compute_fingerprint
from ai_lessons.models.document import Document

logger = logging.getLogger(__name__)


class IndexState(str, enum.Enum):
    """Lifecycle states of the vector index bootstrap."""

    UNINITIALIZED = "uninitialized"
    LOADING_FROM_DISK = "loading_from_disk"
    BUILDING = "building"
    PERSISTING = "persisting"
    READY = "ready"
    FAILED = "failed"


_TRANSITIONS: dict[IndexState, frozenset[IndexState]] = {
    IndexState.UNINITIALIZED: frozenset({IndexState.LOADING_FROM_DISK, IndexState.BUILDING}),
    IndexState.LOADING_FROM_DISK: frozenset({IndexState.READY, IndexState.BUILDING, IndexState.FAILED}),
    IndexState.BUILDING: frozenset({IndexState.PERSISTING, IndexState.FAILED}),
    IndexState.PERSISTING: frozenset({IndexState.READY, IndexState.FAILED}),
    IndexState.READY: frozenset(),
    IndexState.FAILED: frozenset(),
}


class VectorIndexBootstrap:
    """Load the persisted vector index or build and persist a new one."""

    def __init__(
        self,
        index_path: Path | str,
        loader: DocumentLoader,
        chunker: TokenChunker,
        embedder: Embedder,
        validate_fingerprint: bool = False,
        path_exists: Callable[[Path], bool] | None = None,
    ) -> None:
        """
        Initialize bootstrap.

        Args:
            index_path: Persisted index file
            loader: Source document loader
            chunker: Token chunker
            embedder: Chunk embedder
            validate_fingerprint: Rebuild when source documents changed
            path_exists: Existence check for index_path (defaults to Path.exists)
        """
        self._index_path = Path(index_path)
        self._loader = loader
        self._chunker = chunker
        self._embedder = embedder
        self._validate_fingerprint = validate_fingerprint
        self._path_exists = path_exists or Path.exists
        self._state = IndexState.UNINITIALIZED
        self._index: VectorIndex | None = None

    @property
    def state(self) -> IndexState:
        return self._state

    @property
    def index_path(self) -> Path:
        return self._index_path

    def _transition(self, new_state: IndexState) -> None:
        if new_state not in _TRANSITIONS[self._state]:
            raise RuntimeError(f"Illegal index transition {self._state.value} -> {new_state.value}")
        logger.info("Vector index state: %s -> %s", self._state.value, new_state.value)
        self._state = new_state

    def build_or_load(self) -> VectorIndex:
        """
        Bring the index to READY.

        Returns:
            VectorIndex: The ready index (same instance on repeated calls)

        Raises:
            IndexLoadError: Persisted file is unreadable
            ResourceNotFoundError: No source documents to build from
            UpstreamServiceError: Embedding failed
            RuntimeError: Called again after a failure
        """
        if self._state is IndexState.READY and self._index is not None:
            return self._index
        if self._state is not IndexState.UNINITIALIZED:
            raise RuntimeError(f"Vector index bootstrap cannot restart from state {self._state.value}")

        try:
            if self._path_exists(self._index_path):
                logger.info("Vector store file exists: %s", self._index_path)
                index = self._load()
            else:
                logger.info("Vector store file does not exist, embedding documents")
                index = self._build()
        except Exception:
            self._state = IndexState.FAILED
            logger.exception("Vector index bootstrap failed")
            raise

        self._transition(IndexState.READY)
        self._index = index
        return index

    def _load(self) -> VectorIndex:
        self._transition(IndexState.LOADING_FROM_DISK)
        index = VectorIndex.load(self._index_path, self._embedder)
        if not self._validate_fingerprint:
            return index

        documents = self._loader.load()
        fingerprint = compute_fingerprint(documents, self._chunker.chunk_size)
        if fingerprint == index.fingerprint:
            return index

        logger.warning(
            "Persisted vector index is stale (fingerprint %s != %s), rebuilding",
            index.fingerprint[:12] or "<none>",
            fingerprint[:12],
        )
        return self._build(documents)

    def _build(self, documents: list[Document] | None = None) -> VectorIndex:
        self._transition(IndexState.BUILDING)
        if documents is None:
            documents = self._loader.load()
        chunks = self._chunker.chunk(documents)
        index = VectorIndex.from_chunks(
            chunks,
            self._embedder,
            fingerprint=compute_fingerprint(documents, self._chunker.chunk_size),
            chunk_size=self._chunker.chunk_size,
        )

        self._transition(IndexState.PERSISTING)
        index.save(self._index_path)
        return index
