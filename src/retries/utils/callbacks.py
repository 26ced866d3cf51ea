r"""Callback invocation utilities for retry lifecycle events.

This module provides the function invoking the user-defined observer
before each retry.
"""

from __future__ import annotations

__all__ = ["RetryHandler", "invoke_on_retry"]

from collections.abc import Callable
from typing import Any

# Observer signature: (error, attempt number, seconds elapsed since the first attempt)
RetryHandler = Callable[[BaseException, int, float], Any]


def invoke_on_retry(
    on_retry: RetryHandler | None,
    *,
    error: BaseException,
    attempt: int,
    elapsed: float,
) -> None:
    """Invoke on_retry callback if provided.

    Errors raised by the callback are not caught: they propagate to the
    caller of the retry loop like any other error.

    Args:
        on_retry: Optional callback to invoke before each retry.
        error: The exception raised by the failed attempt.
        attempt: The number of the attempt that failed (1-indexed).
        elapsed: Seconds elapsed since the first attempt started.

    Example:
        ```pycon
        >>> from retries.utils.callbacks import invoke_on_retry
        >>> calls = []
        >>> invoke_on_retry(
        ...     lambda error, attempt, elapsed: calls.append((attempt, elapsed)),
        ...     error=KeyError("a"),
        ...     attempt=1,
        ...     elapsed=0.25,
        ... )
        >>> calls
        [(1, 0.25)]

        ```
    """
    if on_retry is not None:
        on_retry(error, attempt, elapsed)
