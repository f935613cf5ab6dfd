"""Service orchestrators."""

from .chat_service import ChatService
from .songs_service import SongsService
from .stuffing_service import StuffingService

__all__ = [
    "ChatService",
    "SongsService",
    "StuffingService",
]
