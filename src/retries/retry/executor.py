r"""Synchronous retry executor.

This module provides the RetryExecutor class that runs an operation
with automatic retry logic, exponential backoff and jitter.
"""

from __future__ import annotations

__all__ = ["RetryExecutor"]

import logging
import time
from typing import TYPE_CHECKING, TypeVar

from retries.core.validation import validate_operation
from retries.retry.decider import RetryDecider
from retries.retry.manager import CallbackManager
from retries.retry.strategy import RetryStrategy
from retries.utils.structured_logging import log_structured

if TYPE_CHECKING:
    from collections.abc import Callable

    from retries.core.config import RetryOptions

T = TypeVar("T")

logger: logging.Logger = logging.getLogger(__name__)


class RetryExecutor:
    """Executes an operation with automatic retry logic.

    This class implements the attempt loop. It uses composition with
    strategy objects for the separate concerns of one retry sequence:
    - RetryDecider: Classifies failures and detects exhaustion
    - RetryStrategy: Calculates backoff delays between attempts
    - CallbackManager: Invokes the user-defined observer

    The executor keeps no state between calls: the attempt counter and the
    start time are local to each ``execute`` call, so one executor can be
    shared by several threads.

    Args:
        options: Validated retry options. They are used as-is for every
            call to ``execute``.
        clock: Optional callable returning the current time in seconds.
            Defaults to ``time.monotonic``.
        sleep: Optional callable waiting for the given number of seconds.
            Defaults to ``time.sleep``.
        random: Optional callable returning a float in [0, 1), used for
            jitter. Defaults to ``random.random``.

    Attributes:
        options: Retry options.
        decider: Logic for deciding whether to retry.
        strategy: Strategy for calculating retry delays.
        callbacks: Manager for invoking callbacks.

    Example:
        ```pycon
        >>> from retries.core.config import RetryOptions
        >>> from retries.retry import RetryExecutor
        >>> options = RetryOptions(max_attempts=4, retry_on=KeyError, sleep_enabled=False)
        >>> executor = RetryExecutor(options)
        >>> def flaky(attempt):
        ...     if attempt < 3:
        ...         raise KeyError(attempt)
        ...     return f"done after {attempt} attempts"
        ...
        >>> executor.execute(flaky)
        'done after 3 attempts'

        ```
    """

    def __init__(
        self,
        options: RetryOptions,
        *,
        clock: Callable[[], float] | None = None,
        sleep: Callable[[float], object] | None = None,
        random: Callable[[], float] | None = None,
    ) -> None:
        self.options = options
        self.decider: RetryDecider = RetryDecider(options.retry_on, options.max_attempts)
        self.strategy: RetryStrategy = RetryStrategy(
            options.base_delay, options.max_delay, random=random
        )
        self.callbacks: CallbackManager = CallbackManager(options.on_retry)
        self.clock = clock
        self.sleep = sleep

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(options={self.options!r})"

    def execute(self, operation: Callable[[int], T]) -> T:
        """Run the operation until it succeeds or retries are exhausted.

        The operation is called with the attempt number (1-indexed). A
        failure that is not retryable is re-raised immediately. A
        retryable failure is re-raised once ``max_attempts`` invocations
        have been made. In both cases the caller receives the original
        exception object, unwrapped.

        Args:
            operation: The callable to run.

        Returns:
            The value returned by the first successful invocation.

        Raises:
            ConfigurationError: If the operation is missing or not
                callable. Raised before any attempt.
        """
        validate_operation(operation)
        clock = self.clock if self.clock is not None else time.monotonic
        sleep = self.sleep if self.sleep is not None else time.sleep
        max_attempts = self.options.max_attempts

        attempt = 0
        start_time = clock()
        while True:
            attempt += 1
            try:
                return operation(attempt)
            except BaseException as error:
                should_retry, reason = self.decider.should_retry(error, attempt)
                if not should_retry:
                    log_structured(
                        logger,
                        logging.DEBUG,
                        f"Giving up after attempt {attempt}/{max_attempts}: {reason}",
                        attempt=attempt,
                        max_attempts=max_attempts,
                        error_type=type(error).__name__,
                    )
                    raise

                elapsed = clock() - start_time
                self.callbacks.on_retry(error, attempt, elapsed)

                if not self.options.sleep_enabled:
                    log_structured(
                        logger,
                        logging.DEBUG,
                        f"Attempt {attempt}/{max_attempts} failed ({reason}), retrying without sleeping",
                        attempt=attempt,
                        max_attempts=max_attempts,
                        delay=0.0,
                        elapsed=elapsed,
                        error_type=type(error).__name__,
                    )
                    continue

                delay = self.strategy.calculate_delay(attempt)
                log_structured(
                    logger,
                    logging.DEBUG,
                    f"Attempt {attempt}/{max_attempts} failed ({reason}), retrying in {delay:.2f}s",
                    attempt=attempt,
                    max_attempts=max_attempts,
                    delay=delay,
                    elapsed=elapsed,
                    error_type=type(error).__name__,
                )
                sleep(delay)
