"""
Dependency injection container.

Factory functions for FastAPI dependencies. Services are created lazily and
cached for the process lifetime; the lifespan pre-warms the RAG pipeline.

Dependencies: ai_lessons.configs, ai_lessons.application, ai_lessons.boundary
System role: DI container for service injection
"""

from ai_lessons.application.services import ChatService, SongsService, StuffingService
from ai_lessons.boundary.llm.completion_client import CompletionClient
from ai_lessons.boundary.llm.embedder import Embedder
from ai_lessons.boundary.llm.model_factory import create_chat_model, create_embeddings
from ai_lessons.configs import Settings, get_settings
from ai_lessons.core.rag.pipeline import RagPipeline


class ServiceCache:
    """Container for cached service instances."""

    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings
        self._completion_client = None
        self._embedder = None
        self._rag_pipeline = None
        self._chat_service = None
        self._songs_service = None
        self._stuffing_service = None

    @property
    def settings(self) -> Settings:
        """Get settings (process-wide singleton unless injected)."""
        if self._settings is None:
            self._settings = get_settings()
        return self._settings

    @property
    def completion_client(self) -> CompletionClient:
        """Get cached completion client."""
        if self._completion_client is None:
            llm = self.settings.llm
            self._completion_client = CompletionClient(
                create_chat_model(llm),
                timeout_seconds=llm.timeout_seconds,
            )
        return self._completion_client

    @property
    def embedder(self) -> Embedder:
        """Get cached embedder."""
        if self._embedder is None:
            llm = self.settings.llm
            self._embedder = Embedder(
                create_embeddings(llm),
                timeout_seconds=llm.timeout_seconds,
            )
        return self._embedder

    @property
    def rag_pipeline(self) -> RagPipeline:
        """Get cached RAG pipeline (index not necessarily built)."""
        if self._rag_pipeline is None:
            self._rag_pipeline = RagPipeline(
                settings=self.settings.rag,
                embedder=self.embedder,
                completion_client=self.completion_client,
            )
        return self._rag_pipeline

    @property
    def chat_service(self) -> ChatService:
        """Get cached chat service."""
        if self._chat_service is None:
            self._chat_service = ChatService(self.completion_client)
        return self._chat_service

    @property
    def songs_service(self) -> SongsService:
        """Get cached songs service."""
        if self._songs_service is None:
            self._songs_service = SongsService(self.completion_client)
        return self._songs_service

    @property
    def stuffing_service(self) -> StuffingService:
        """Get cached stuffing service."""
        if self._stuffing_service is None:
            self._stuffing_service = StuffingService(
                self.completion_client,
                context_path=self.settings.stuffing_context,
            )
        return self._stuffing_service

    def clear(self) -> None:
        """Clear all cached instances."""
        self._completion_client = None
        self._embedder = None
        self._rag_pipeline = None
        self._chat_service = None
        self._songs_service = None
        self._stuffing_service = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


def get_chat_service() -> ChatService:
    """Get chat service instance."""
    return get_service_cache().chat_service


def get_songs_service() -> SongsService:
    """Get songs service instance."""
    return get_service_cache().songs_service


def get_stuffing_service() -> StuffingService:
    """Get stuffing service instance."""
    return get_service_cache().stuffing_service


def get_rag_pipeline() -> RagPipeline:
    """Get RAG pipeline instance."""
    return get_service_cache().rag_pipeline
