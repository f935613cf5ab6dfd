"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Provides dependency injection factory for FastAPI.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field

from ai_lessons.configs.base import BaseSettings
from ai_lessons.configs.llm import LLMSettings
from ai_lessons.configs.rag import DEFAULT_DATA_DIR, RAGSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    stuffing_context: Path = Field(
        default=DEFAULT_DATA_DIR / "john1.txt",
        description="Text file placed into the prompt by the stuffing lesson",
    )

    # Aggregated settings
    llm: LLMSettings = Field(default_factory=LLMSettings)
    rag: RAGSettings = Field(default_factory=RAGSettings)


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns Settings instance, cached for dependency injection.
    Environment variables loaded once at startup.

    Returns:
        Settings: Application settings instance

    Usage:
        from ai_lessons.configs import get_settings
        settings = get_settings()
    """
    return Settings()
