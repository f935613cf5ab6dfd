"""
Configuration management module.

Provides centralized, type-safe configuration using Pydantic Settings.
All config modules support environment variable mapping with validation.
"""

from ai_lessons.configs.llm import LLMSettings
from ai_lessons.configs.rag import RAGSettings
from ai_lessons.configs.settings import Settings, get_settings

__all__ = ["LLMSettings", "RAGSettings", "Settings", "get_settings"]
