"""
Observability module.

Provides logging configuration and request logging middleware.
"""

from ai_lessons.observability.logger import configure_logging

__all__ = ["configure_logging"]
