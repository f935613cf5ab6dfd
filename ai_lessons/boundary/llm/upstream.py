"""
Timeout enforcement for calls to hosted models.

Runs a blocking client call on a daemon worker thread and converts timeouts
and client failures into UpstreamServiceError. The chat client also carries
its own request timeout; this wait is the outer bound that covers every
model, including embedders without one. A worker that outlives the wait is
abandoned and, being a daemon, does not hold up interpreter exit.

Dependencies: threading, ai_lessons.core.exceptions
System role: Guard around every embedding and completion call
"""

import logging
import threading
from collections.abc import Callable
from typing import Any, TypeVar

from ai_lessons.core.exceptions import UpstreamServiceError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def call_with_timeout(
    func: Callable[..., T],
    *args: Any,
    timeout: float,
    operation: str,
    **kwargs: Any,
) -> T:
    """
    Invoke ``func`` and wait at most ``timeout`` seconds for its result.

    Args:
        func: Blocking client call
        *args: Positional arguments for func
        timeout: Seconds to wait before giving up
        operation: Operation name used in logs and error details
        **kwargs: Keyword arguments for func

    Returns:
        Whatever func returns

    Raises:
        UpstreamServiceError: When the call raises or exceeds the timeout
    """
    outcome: dict[str, Any] = {}

    def run() -> None:
        try:
            outcome["result"] = func(*args, **kwargs)
        except Exception as e:
            outcome["error"] = e

    worker = threading.Thread(target=run, name=f"upstream-{operation}", daemon=True)
    worker.start()
    worker.join(timeout)

    if worker.is_alive():
        logger.error(f"{__name__}:call_with_timeout - {operation} timed out after {timeout}s")
        raise UpstreamServiceError(
            f"{operation} timed out after {timeout}s",
            operation=operation,
            timed_out=True,
        )

    if "error" in outcome:
        e = outcome["error"]
        logger.error(f"{__name__}:call_with_timeout - {operation} failed: {type(e).__name__}: {e}")
        raise UpstreamServiceError(
            f"{operation} failed: {e}",
            operation=operation,
            details={"error_type": type(e).__name__},
        ) from e

    return outcome["result"]
