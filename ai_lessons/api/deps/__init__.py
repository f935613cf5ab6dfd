"""API-specific dependencies."""

# Re-export common dependencies
from .dependencies import (
    ServiceCache,
    get_chat_service,
    get_rag_pipeline,
    get_service_cache,
    get_songs_service,
    get_stuffing_service,
)

__all__ = [
    "ServiceCache",
    "get_chat_service",
    "get_rag_pipeline",
    "get_service_cache",
    "get_songs_service",
    "get_stuffing_service",
]
