"""
RAG pipeline entry points.

Wires loader, chunker, embedder, vector index bootstrap, retriever, prompt
assembler and completion client together behind three library-level calls:
``build_index()``, ``search(query, top_k)`` and ``ask(query)``.

Dependencies: ai_lessons.core.rag, ai_lessons.boundary.llm, ai_lessons.configs
System role: RAG orchestration used by the API and the build script
"""

import logging
from collections.abc import Callable
from pathlib import Path

from ai_lessons.boundary.llm.completion_client import CompletionClient
from ai_lessons.boundary.llm.embedder import Embedder
from ai_lessons.boundary.llm.model_factory import create_chat_model, create_embeddings
from ai_lessons.configs.rag import RAGSettings
from ai_lessons.configs.settings import Settings
from ai_lessons.core.rag.chunker import TextEncoding, TokenChunker
from ai_lessons.core.rag.document_loader import DocumentLoader
from ai_lessons.core.rag.index_builder import IndexState, VectorIndexBootstrap
from ai_lessons.core.rag.prompt_assembler import PromptAssembler
from ai_lessons.core.rag.retriever import Retriever
from ai_lessons.core.rag.vector_index import VectorIndex
from ai_lessons.models.chunk import Chunk, ScoredChunk

logger = logging.getLogger(__name__)


class RagPipeline:
    """
    Retrieval-augmented generation over a directory of text files.

    The index is built or loaded once; search and ask build it on first use
    when build_index() was not called explicitly.
    """

    def __init__(
        self,
        settings: RAGSettings,
        embedder: Embedder,
        completion_client: CompletionClient,
        encoding: TextEncoding | None = None,
        path_exists: Callable[[Path], bool] | None = None,
    ) -> None:
        """
        Initialize pipeline.

        Args:
            settings: RAG settings (paths, chunk size, retrieval bounds)
            embedder: Embedder for chunks and queries
            completion_client: Chat completion client
            encoding: Token encoding override for the chunker
            path_exists: Existence check override for the persisted index
        """
        self._settings = settings
        self._embedder = embedder
        self._completion = completion_client
        self._bootstrap = VectorIndexBootstrap(
            index_path=settings.vectorstore,
            loader=DocumentLoader(settings.data_dir, settings.data_glob),
            chunker=TokenChunker(
                chunk_size=settings.chunk_size,
                encoding_name=settings.encoding_name,
                encoding=encoding,
            ),
            embedder=embedder,
            validate_fingerprint=settings.validate_fingerprint,
            path_exists=path_exists,
        )
        self._assembler = PromptAssembler(max_context_chars=settings.max_context_chars)
        self._retriever: Retriever | None = None

    @property
    def state(self) -> IndexState:
        return self._bootstrap.state

    @property
    def index(self) -> VectorIndex:
        return self.build_index()

    def build_index(self) -> VectorIndex:
        """
        Load the persisted index or build and persist it.

        Returns:
            VectorIndex: Ready index
        """
        index = self._bootstrap.build_or_load()
        if self._retriever is None:
            self._retriever = Retriever(index, self._embedder)
        return index

    def _get_retriever(self) -> Retriever:
        if self._retriever is None:
            self.build_index()
        return self._retriever

    def search(self, query: str, top_k: int | None = None) -> list[Chunk]:
        """
        Return the chunks most similar to the query.

        Args:
            query: Query text
            top_k: Maximum results (defaults to settings.top_k)

        Returns:
            list[Chunk]: At most top_k chunks, best first
        """
        return self._get_retriever().search(query, self._resolve_top_k(top_k))

    def search_with_scores(self, query: str, top_k: int | None = None) -> list[ScoredChunk]:
        """Return the chunks most similar to the query with their scores."""
        return self._get_retriever().search_with_scores(query, self._resolve_top_k(top_k))

    def ask(self, query: str, top_k: int | None = None) -> str:
        """
        Answer a question from retrieved chunks.

        Args:
            query: User question
            top_k: Number of chunks used as context (defaults to settings.top_k)

        Returns:
            str: Model answer
        """
        chunks = self.search(query, top_k)
        prompt = self._assembler.assemble(query, chunks)
        logger.info(f"{__name__}:ask - chunks={len(chunks)}, prompt_len={len(prompt)}")
        return self._completion.complete(prompt)

    def _resolve_top_k(self, top_k: int | None) -> int:
        return self._settings.top_k if top_k is None else top_k


def create_rag_pipeline(settings: Settings) -> RagPipeline:
    """
    Build a pipeline backed by the hosted Google models.

    Args:
        settings: Application settings

    Returns:
        RagPipeline: Pipeline with index not yet built
    """
    timeout = settings.llm.timeout_seconds
    return RagPipeline(
        settings=settings.rag,
        embedder=Embedder(create_embeddings(settings.llm), timeout_seconds=timeout),
        completion_client=CompletionClient(create_chat_model(settings.llm), timeout_seconds=timeout),
    )
