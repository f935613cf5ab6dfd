"""Language model and embedding model adapters."""

from ai_lessons.boundary.llm.completion_client import CompletionClient
from ai_lessons.boundary.llm.embedder import Embedder
from ai_lessons.boundary.llm.model_factory import create_chat_model, create_embeddings

__all__ = [
    "CompletionClient",
    "Embedder",
    "create_chat_model",
    "create_embeddings",
]
