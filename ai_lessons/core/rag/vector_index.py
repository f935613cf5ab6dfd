"""
Vector index backed by LangChain's in-memory vector store.

Holds one store record per chunk, ranks records by cosine similarity against
a query vector, and persists through the store's own JSON dump/load. Build
information (source fingerprint, chunk size) travels in each record's
metadata so the dump file is self-describing.

Dependencies: langchain_core.vectorstores, ai_lessons.models.chunk
System role: Vector store for the RAG lesson
"""

import hashlib
import logging
import os
import tempfile
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import Any

from langchain_core.documents import Document as LCDocument
from langchain_core.embeddings import Embeddings
from langchain_core.vectorstores import InMemoryVectorStore

from ai_lessons.core.exceptions import IndexLoadError, InvalidArgumentError, UpstreamServiceError
from ai_lessons.models.chunk import Chunk, ScoredChunk, VectorIndexEntry
from ai_lessons.models.document import Document

logger = logging.getLogger(__name__)


def compute_fingerprint(documents: Iterable[Document], chunk_size: int) -> str:
    """
    Hash source documents and chunk size.

    Args:
        documents: Source documents
        chunk_size: Chunk size used for splitting

    Returns:
        str: SHA-256 hex digest
    """
    hasher = hashlib.sha256(f"chunk_size={chunk_size}".encode())
    for document in sorted(documents, key=lambda doc: doc.filename):
        hasher.update(b"\0")
        hasher.update(document.filename.encode())
        hasher.update(b"\0")
        hasher.update(document.content.encode())
    return hasher.hexdigest()


def _to_store_document(chunk: Chunk, fingerprint: str, chunk_size: int | None) -> LCDocument:
    return LCDocument(
        id=chunk.id,
        page_content=chunk.content,
        metadata={
            "document_id": chunk.document_id,
            "chunk_index": chunk.index,
            "document_metadata": dict(chunk.metadata),
            "index_fingerprint": fingerprint,
            "chunk_size": chunk_size,
        },
    )


def _to_chunk(record: dict[str, Any]) -> Chunk:
    metadata = record["metadata"]
    return Chunk(
        id=record["id"],
        content=record["text"],
        index=metadata["chunk_index"],
        document_id=metadata["document_id"],
        metadata=metadata.get("document_metadata", {}),
    )


class VectorIndex:
    """Read-only cosine index over embedded chunks."""

    def __init__(self, store: InMemoryVectorStore) -> None:
        """
        Wrap a populated store.

        Args:
            store: In-memory vector store holding one record per chunk

        Raises:
            InvalidArgumentError: When records are malformed or differ in dimension
        """
        self._store = store
        records = list(store.store.values())
        try:
            self._chunks = [_to_chunk(record) for record in records]
            dimensions = {len(record["vector"]) for record in records}
        except (KeyError, TypeError, ValueError) as e:
            raise InvalidArgumentError(f"Malformed vector store record: {e}", field="store") from e

        if len(dimensions) > 1:
            raise InvalidArgumentError(
                "Index entries have inconsistent embedding dimensions",
                field="store",
                details={"dimensions": sorted(dimensions)},
            )
        self._dimension = dimensions.pop() if dimensions else None
        self._positions = {chunk_id: position for position, chunk_id in enumerate(store.store)}

        build_info = records[0]["metadata"] if records else {}
        self._fingerprint = build_info.get("index_fingerprint", "")
        self._chunk_size = build_info.get("chunk_size")

    @classmethod
    def from_chunks(
        cls,
        chunks: list[Chunk],
        embeddings: Embeddings,
        fingerprint: str = "",
        chunk_size: int | None = None,
    ) -> "VectorIndex":
        """
        Embed chunks and index them in order.

        Args:
            chunks: Chunks in insertion order
            embeddings: Embedding model used by the store
            fingerprint: Hash of the documents the chunks came from
            chunk_size: Chunk size used when building

        Returns:
            VectorIndex: Populated index

        Raises:
            UpstreamServiceError: When embedding fails or yields mixed dimensions
        """
        store = InMemoryVectorStore(embedding=embeddings)
        if chunks:
            store.add_documents(
                [_to_store_document(chunk, fingerprint, chunk_size) for chunk in chunks],
                ids=[chunk.id for chunk in chunks],
            )
        try:
            return cls(store)
        except InvalidArgumentError as e:
            raise UpstreamServiceError(e.message, operation="embed_documents", details=e.details) from e

    def __len__(self) -> int:
        return len(self._chunks)

    def __iter__(self) -> Iterator[VectorIndexEntry]:
        return iter(self.entries)

    @property
    def entries(self) -> list[VectorIndexEntry]:
        return [
            VectorIndexEntry(chunk=chunk, embedding=record["vector"], metadata=dict(chunk.metadata))
            for chunk, record in zip(self._chunks, self._store.store.values())
        ]

    @property
    def dimension(self) -> int | None:
        return self._dimension

    @property
    def fingerprint(self) -> str:
        return self._fingerprint

    @property
    def chunk_size(self) -> int | None:
        return self._chunk_size

    def search(self, query_vector: list[float], top_k: int) -> list[ScoredChunk]:
        """
        Rank entries by cosine similarity to the query vector.

        The store scores every record; ties are then ordered by insertion
        position with a stable sort.

        Args:
            query_vector: Embedded query
            top_k: Maximum number of results

        Returns:
            list[ScoredChunk]: At most top_k hits, best first

        Raises:
            InvalidArgumentError: When top_k <= 0
            IndexLoadError: When the index was built with a different embedding dimension
        """
        if top_k <= 0:
            raise InvalidArgumentError("top_k must be a positive integer", field="top_k")
        if not self._chunks:
            return []
        if len(query_vector) != self._dimension:
            raise IndexLoadError(
                f"Vector index has dimension {self._dimension} but the embedding model "
                f"returned {len(query_vector)}; rebuild the index",
                details={"index_dimension": self._dimension, "query_dimension": len(query_vector)},
            )

        scored = self._store.similarity_search_with_score_by_vector(query_vector, k=len(self._chunks))
        ranked = sorted(scored, key=lambda pair: self._positions[pair[0].id])
        # sorted() is stable, so equal scores stay in insertion order
        ranked.sort(key=lambda pair: pair[1], reverse=True)

        chunks_by_id = {chunk.id: chunk for chunk in self._chunks}
        return [
            ScoredChunk(chunk=chunks_by_id[doc.id], score=float(score))
            for doc, score in ranked[:top_k]
        ]

    def save(self, path: Path | str) -> Path:
        """
        Persist the store dump, replacing the target atomically.

        Args:
            path: Destination file

        Returns:
            Path: Written file path
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
        os.close(fd)
        try:
            self._store.dump(tmp_name)
            os.replace(tmp_name, path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

        logger.info("Saved vector index with %d entries to %s", len(self), path)
        return path

    @classmethod
    def load(cls, path: Path | str, embeddings: Embeddings) -> "VectorIndex":
        """
        Load a persisted store dump.

        Args:
            path: Dump file
            embeddings: Embedding model attached to the loaded store

        Returns:
            VectorIndex: Loaded index

        Raises:
            IndexLoadError: When the file cannot be read or does not hold valid records
        """
        path = Path(path)
        try:
            store = InMemoryVectorStore.load(str(path), embeddings)
        except OSError as e:
            raise IndexLoadError(f"Cannot read vector index: {e}", path=str(path)) from e
        except (ValueError, TypeError, KeyError) as e:
            raise IndexLoadError(f"Vector index file is corrupt: {e}", path=str(path)) from e

        if not isinstance(store.store, dict):
            raise IndexLoadError("Vector index file is corrupt: expected a record mapping", path=str(path))
        try:
            index = cls(store)
        except InvalidArgumentError as e:
            raise IndexLoadError(e.message, path=str(path), details=e.details) from e

        logger.info("Loaded vector index with %d entries from %s", len(index), path)
        return index
