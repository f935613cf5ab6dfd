"""
Exception hierarchy for the AI lessons application.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class AILessonsException(Exception):
    """Base exception for all AI lessons application errors."""

    kind: str = "InternalError"

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ResourceNotFoundError(AILessonsException):
    """Raised when no input documents match the configured location."""

    kind = "ResourceNotFound"

    def __init__(
        self,
        message: str,
        location: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize resource not found error.

        Args:
            message: Error message
            location: Directory or pattern that matched nothing
            details: Additional context
        """
        details = details or {}
        if location:
            details["location"] = location
        super().__init__(message, details)


class IndexLoadError(AILessonsException):
    """Raised when a persisted vector index cannot be read back."""

    kind = "IndexLoadFailure"

    def __init__(
        self,
        message: str,
        path: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize index load error.

        Args:
            message: Error message
            path: Path of the persisted index file
            details: Additional context
        """
        details = details or {}
        if path:
            details["path"] = path
        super().__init__(message, details)


class InvalidArgumentError(AILessonsException):
    """Raised when a caller violates an input contract (bad top_k, empty query)."""

    kind = "InvalidArgument"

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize invalid argument error.

        Args:
            message: Error message
            field: Argument name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class MalformedOutputError(AILessonsException):
    """Raised when model output does not match the requested structure."""

    kind = "MalformedOutput"

    def __init__(
        self,
        message: str,
        output: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize malformed output error.

        Args:
            message: Error message
            output: Raw model output (truncated for context)
            details: Additional context
        """
        details = details or {}
        if output is not None:
            details["output"] = output[:200]
        super().__init__(message, details)


class UpstreamServiceError(AILessonsException):
    """Raised when an embedding or completion call fails or times out."""

    kind = "UpstreamServiceError"

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        timed_out: bool = False,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize upstream service error.

        Args:
            message: Error message
            operation: Operation that failed (complete, embed_query, embed_documents)
            timed_out: Whether the call exceeded its timeout
            details: Additional context
        """
        details = details or {}
        if operation:
            details["operation"] = operation
        self.timed_out = timed_out
        super().__init__(message, details)
