r"""Contains the functional entry point for running an operation with
automatic retry logic."""

from __future__ import annotations

__all__ = ["resolve_options", "run"]

from typing import TYPE_CHECKING, Any, TypeVar

from retries.core.config import RetryOptions, get_default_options
from retries.retry.executor import RetryExecutor

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from retries.utils.callbacks import RetryHandler

T = TypeVar("T")


def resolve_options(config: RetryOptions | None = None, **overrides: Any) -> RetryOptions:
    """Build the options of one retry sequence.

    The options are layered, later layers winning: the current
    process-wide default options, then the fields set explicitly on
    ``config``, then the non-None ``overrides``. Fields ``config`` leaves
    out keep the default value, so for example ``set_sleep_enabled(False)``
    applies unless ``config`` or ``overrides`` set ``sleep_enabled``.
    The result is an immutable snapshot: later changes to the default
    options do not affect it.

    Args:
        config: Optional options applied on top of the defaults.
        **overrides: Fields to override.

    Returns:
        The validated options.

    Raises:
        ConfigurationError: If an override is unknown or the resulting
            options are invalid.

    Example:
        ```pycon
        >>> from retries.core.config import RetryOptions
        >>> from retries.runner import resolve_options
        >>> resolve_options(max_attempts=7).max_attempts
        7
        >>> options = resolve_options(RetryOptions(max_attempts=2), retry_on=KeyError)
        >>> options.max_attempts, options.base_delay, options.retry_on
        (2, 0.5, (<class 'KeyError'>,))

        ```
    """
    base = get_default_options()
    if config is not None:
        base = base.overlay(config)
    return base.merge(**overrides)


def run(
    operation: Callable[[int], T] | None = None,
    config: RetryOptions | None = None,
    *,
    max_attempts: int | None = None,
    base_delay: float | None = None,
    max_delay: float | None = None,
    retry_on: type[BaseException] | Iterable[type[BaseException]] | None = None,
    on_retry: RetryHandler | None = None,
    sleep_enabled: bool | None = None,
    clock: Callable[[], float] | None = None,
    sleep: Callable[[float], object] | None = None,
    random: Callable[[], float] | None = None,
) -> T:
    """Run an operation, retrying it on transient failures.

    The operation is called with the attempt number (1-indexed). When it
    raises one of the ``retry_on`` exceptions, it is called again after
    a backoff delay, up to ``max_attempts`` invocations in total.

    Backoff Strategy:
    - Delay after failed attempt n: ``base_delay * (2 ** (n - 1))``,
      capped at ``max_delay``
    - Jitter: the delay is scaled by a random factor in [0.5, 1.0)
    - Floor: the delay is never shorter than ``base_delay``

    Options not passed explicitly fall back to the options set on ``config``,
    then to the process-wide default options at the time of the call
    (see ``retries.set_default_options``). The options are resolved once,
    before the first attempt.

    Args:
        operation: The callable to run. Receives the attempt number.
        config: Optional options applied on top of the defaults. Only the
            fields set explicitly on it take effect.
        max_attempts: Maximum number of invocations. Must be > 0.
        base_delay: Delay after the first failure, and minimum delay, in
            seconds. Must be >= 0.
        max_delay: Maximum delay in seconds. Must be >= ``base_delay``.
        retry_on: Exception class, or iterable of exception classes, that
            trigger a retry. Other exceptions propagate immediately.
        on_retry: Optional observer called as
            ``on_retry(error, attempt, elapsed)`` before each retry, where
            ``elapsed`` is the time in seconds since the first attempt.
        sleep_enabled: If ``False``, retry without waiting.
        clock: Optional time source. Defaults to ``time.monotonic``.
        sleep: Optional wait function. Defaults to ``time.sleep``.
        random: Optional jitter source returning a float in [0, 1).

    Returns:
        The value returned by the first successful invocation.

    Raises:
        ConfigurationError: If the options are invalid or the operation
            is missing. Raised before any attempt.
        Exception: The original exception of the operation, when it is not
            retryable or when all attempts failed.

    Example:
        ```pycon
        >>> import retries
        >>> def flaky(attempt):
        ...     if attempt < 3:
        ...         raise ConnectionError("connection reset")
        ...     return "done"
        ...
        >>> retries.run(flaky, retry_on=ConnectionError, sleep_enabled=False)
        'done'

        ```
    """
    options = resolve_options(
        config,
        max_attempts=max_attempts,
        base_delay=base_delay,
        max_delay=max_delay,
        retry_on=retry_on,
        on_retry=on_retry,
        sleep_enabled=sleep_enabled,
    )
    executor = RetryExecutor(options, clock=clock, sleep=sleep, random=random)
    return executor.execute(operation)
