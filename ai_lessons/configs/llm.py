"""
Language model configuration settings.

Chat model and embedding model selection plus the timeout applied to every
call made to the hosted models.

Dependencies: pydantic, pydantic_settings
System role: Model client configuration for all lessons
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LLMSettings(BaseSettings):
    """Hosted chat and embedding model configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="LLM_",
        case_sensitive=False,
        extra="ignore",
    )

    chat_model: str = Field(
        default="gemini-2.5-flash",
        description="Google Generative AI chat model ID",
    )
    temperature: float = Field(default=0.7, ge=0.0, le=2.0, description="Sampling temperature")
    timeout_seconds: float = Field(
        default=60.0,
        gt=0.0,
        description="Timeout applied to each completion or embedding call",
    )
    max_retries: int = Field(
        default=0,
        ge=0,
        description="Client-side retries (0 keeps upstream failures visible)",
    )
    embedding_model: str = Field(
        default="models/gemini-embedding-001",
        description="Google Generative AI embedding model ID",
    )
