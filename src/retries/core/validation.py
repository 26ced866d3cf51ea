r"""Parameter validation utilities for retry options.

This module provides validation functions for retry parameters to ensure
they meet the required constraints before the first attempt is made.
"""

from __future__ import annotations

__all__ = ["normalize_retry_on", "validate_operation", "validate_retry_options"]

import math
from typing import TYPE_CHECKING, Any

from retries.exceptions import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Callable


def normalize_retry_on(retry_on: Any) -> tuple[type[BaseException], ...]:
    """Normalize the retryable exception selector to a tuple of classes.

    Args:
        retry_on: A single exception class or an iterable of exception
            classes.

    Returns:
        A tuple of exception classes usable in an ``except`` clause.

    Raises:
        ConfigurationError: If the selector is empty or contains anything
            other than exception classes.

    Example:
        ```pycon
        >>> from retries.core.validation import normalize_retry_on
        >>> normalize_retry_on(KeyError)
        (<class 'KeyError'>,)
        >>> normalize_retry_on([KeyError, OSError])
        (<class 'KeyError'>, <class 'OSError'>)

        ```
    """
    if isinstance(retry_on, type):
        retry_on = (retry_on,)
    try:
        classes = tuple(retry_on)
    except TypeError:
        msg = f"retry_on must be an exception class or an iterable of exception classes, got {retry_on!r}"
        raise ConfigurationError(msg, field="retry_on") from None
    if not classes:
        msg = "retry_on must contain at least one exception class"
        raise ConfigurationError(msg, field="retry_on")
    for cls in classes:
        if not (isinstance(cls, type) and issubclass(cls, BaseException)):
            msg = f"retry_on must only contain exception classes, got {cls!r}"
            raise ConfigurationError(msg, field="retry_on")
    return classes


def validate_retry_options(
    max_attempts: int,
    base_delay: float,
    max_delay: float,
    on_retry: Callable[..., Any] | None = None,
) -> None:
    """Validate retry parameters.

    Args:
        max_attempts: Maximum number of times the operation is invoked.
            Must be > 0.
        base_delay: Minimum delay in seconds between two attempts.
            Must be a finite number >= 0.
        max_delay: Maximum delay in seconds between two attempts.
            Must be a finite number >= ``base_delay``.
        on_retry: Optional observer. Must be callable if provided.

    Raises:
        ConfigurationError: If any parameter violates its constraint.

    Example:
        ```pycon
        >>> from retries.core.validation import validate_retry_options
        >>> validate_retry_options(max_attempts=3, base_delay=0.5, max_delay=1.0)
        >>> validate_retry_options(max_attempts=0, base_delay=0.5, max_delay=1.0)
        Traceback (most recent call last):
        ...
        retries.exceptions.ConfigurationError: max_attempts must be > 0, got 0

        ```
    """
    if isinstance(max_attempts, bool) or not isinstance(max_attempts, int):
        msg = f"max_attempts must be an integer, got {max_attempts!r}"
        raise ConfigurationError(msg, field="max_attempts")
    if max_attempts <= 0:
        msg = f"max_attempts must be > 0, got {max_attempts}"
        raise ConfigurationError(msg, field="max_attempts")
    for name, value in (("base_delay", base_delay), ("max_delay", max_delay)):
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            msg = f"{name} must be a number, got {value!r}"
            raise ConfigurationError(msg, field=name)
        if not math.isfinite(value):
            msg = f"{name} must be finite, got {value}"
            raise ConfigurationError(msg, field=name)
        if value < 0:
            msg = f"{name} must be >= 0, got {value}"
            raise ConfigurationError(msg, field=name)
    if base_delay > max_delay:
        msg = f"base_delay ({base_delay}) cannot be greater than max_delay ({max_delay})"
        raise ConfigurationError(msg, field="base_delay")
    if on_retry is not None and not callable(on_retry):
        msg = f"on_retry must be callable, got {on_retry!r}"
        raise ConfigurationError(msg, field="on_retry")


def validate_operation(operation: Any) -> None:
    """Validate the operation to retry.

    Args:
        operation: The callable invoked on each attempt.

    Raises:
        ConfigurationError: If the operation is missing or not callable.
    """
    if operation is None:
        msg = "an operation to retry is required"
        raise ConfigurationError(msg)
    if not callable(operation):
        msg = f"operation must be callable, got {operation!r}"
        raise ConfigurationError(msg)
