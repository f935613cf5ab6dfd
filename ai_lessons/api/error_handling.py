"""
Lesson error handling utilities.

Provides a decorator for consistent error handling across lesson endpoints:
domain exceptions become HTTPExceptions whose detail carries the error kind
and a human-readable message.
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from fastapi import HTTPException, status

from ai_lessons.core.exceptions import (
    AILessonsException,
    IndexLoadError,
    InvalidArgumentError,
    MalformedOutputError,
    ResourceNotFoundError,
    UpstreamServiceError,
)
from ai_lessons.models.common import ErrorDetail

logger = logging.getLogger(__name__)

# Type for the decorated function
F = TypeVar("F", bound=Callable[..., Any])


def status_for(exc: AILessonsException) -> int:
    """Map a domain exception to an HTTP status code."""
    if isinstance(exc, InvalidArgumentError):
        return status.HTTP_400_BAD_REQUEST
    if isinstance(exc, ResourceNotFoundError):
        return status.HTTP_404_NOT_FOUND
    if isinstance(exc, UpstreamServiceError):
        return status.HTTP_504_GATEWAY_TIMEOUT if exc.timed_out else status.HTTP_502_BAD_GATEWAY
    if isinstance(exc, MalformedOutputError):
        return status.HTTP_502_BAD_GATEWAY
    if isinstance(exc, IndexLoadError):
        return status.HTTP_500_INTERNAL_SERVER_ERROR
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def handle_lesson_errors(func: F) -> F:
    """
    Decorator to transform lesson errors into HTTPExceptions.

    This centralizes:
    - Logging of errors with context
    - Mapping specific exceptions to HTTP status codes
    - Uniform {"kind", "message"} error details
    """
    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)

        except HTTPException:
            raise

        except AILessonsException as e:
            status_code = status_for(e)
            log = logger.warning if status_code < 500 else logger.error
            log(
                "Lesson request failed",
                extra={"kind": e.kind, "error": str(e), "endpoint": func.__name__},
            )
            raise HTTPException(
                status_code=status_code,
                detail=ErrorDetail(kind=e.kind, message=e.message).model_dump(),
            ) from e

        except Exception as e:
            logger.exception(
                "Unexpected failure in lesson endpoint",
                extra={"error": str(e), "endpoint": func.__name__},
            )
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=ErrorDetail(
                    kind="InternalError",
                    message=f"An internal error occurred: {e}",
                ).model_dump(),
            ) from e

    return wrapper  # type: ignore
