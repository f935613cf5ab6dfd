"""API routers."""

from .chat import router as chat_router
from .health import router as health_router
from .prompts import router as prompts_router
from .rag import router as rag_router
from .songs import router as songs_router
from .stuffing import router as stuffing_router

__all__ = [
    "chat_router",
    "health_router",
    "prompts_router",
    "rag_router",
    "songs_router",
    "stuffing_router",
]
