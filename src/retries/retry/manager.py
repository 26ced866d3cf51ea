r"""Callback manager for retry lifecycle events.

This module provides the CallbackManager class that invokes the
user-defined observer before each retry.
"""

from __future__ import annotations

__all__ = ["CallbackManager"]

from typing import TYPE_CHECKING

from retries.utils.callbacks import invoke_on_retry

if TYPE_CHECKING:
    from retries.utils.callbacks import RetryHandler


class CallbackManager:
    """Manages callback invocations during the retry lifecycle.

    The observer is only notified of failures that are about to be
    retried. Non-retryable failures and the final failure of an exhausted
    sequence are reported to the caller by the exception itself.

    Attributes:
        on_retry_callback: Optional observer called as
            ``on_retry(error, attempt, elapsed)``.
    """

    def __init__(self, on_retry: RetryHandler | None = None) -> None:
        self.on_retry_callback = on_retry

    def on_retry(self, error: BaseException, attempt: int, elapsed: float) -> None:
        """Invoke on_retry callback.

        Args:
            error: The exception raised by the failed attempt.
            attempt: The number of the attempt that failed (1-indexed).
            elapsed: Seconds elapsed since the first attempt started.
        """
        invoke_on_retry(
            self.on_retry_callback,
            error=error,
            attempt=attempt,
            elapsed=elapsed,
        )
