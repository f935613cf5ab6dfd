"""
Shared settings base.

The aggregated Settings inherits its `.env` loading rules from here. The
only unprefixed value is the root log level read by the API lifespan.

Dependencies: pydantic_settings
System role: Parent of the aggregated application settings
"""

from pydantic import Field
from pydantic_settings import BaseSettings as PydanticBaseSettings, SettingsConfigDict


class BaseSettings(PydanticBaseSettings):
    """Settings parent reading `.env` and ignoring unknown keys."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = Field(
        default="INFO",
        description="Root log level applied at startup",
    )
