r"""Retry decision logic for classifying operation failures.

This module provides the RetryDecider class that decides whether a
failed attempt should be retried, based on the exception kind and on the
number of attempts already made.
"""

from __future__ import annotations

__all__ = ["RetryDecider"]


class RetryDecider:
    """Decides whether a failed attempt should be retried.

    An exception is retryable when it is an instance of one of the
    configured exception classes, subclasses included.

    Args:
        retry_on: Tuple of retryable exception classes.
        max_attempts: Maximum number of attempts.

    Example:
        ```pycon
        >>> from retries.retry.decider import RetryDecider
        >>> decider = RetryDecider(retry_on=(LookupError,), max_attempts=3)
        >>> decider.should_retry(KeyError("a"), attempt=1)
        (True, 'KeyError')
        >>> decider.should_retry(KeyError("a"), attempt=3)
        (False, 'max attempts exhausted')
        >>> decider.should_retry(ValueError("a"), attempt=1)
        (False, 'ValueError is not retryable')

        ```
    """

    def __init__(self, retry_on: tuple[type[BaseException], ...], max_attempts: int) -> None:
        self.retry_on = retry_on
        self.max_attempts = max_attempts

    def is_retryable(self, error: BaseException) -> bool:
        """Return whether the exception kind is configured as retryable.

        Args:
            error: The exception raised by the operation.

        Returns:
            ``True`` if the exception matches one of ``retry_on``.
        """
        return isinstance(error, self.retry_on)

    def should_retry(self, error: BaseException, attempt: int) -> tuple[bool, str]:
        """Determine if a failed attempt should trigger a retry.

        Args:
            error: The exception raised by the operation.
            attempt: The number of the attempt that failed (1-indexed).

        Returns:
            Tuple of (should_retry, reason).
        """
        if not self.is_retryable(error):
            return (False, f"{type(error).__name__} is not retryable")
        if attempt >= self.max_attempts:
            return (False, "max attempts exhausted")
        return (True, type(error).__name__)
