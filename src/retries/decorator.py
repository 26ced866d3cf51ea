r"""Decorator for retrying plain function calls."""

from __future__ import annotations

__all__ = ["with_retries"]

import functools
from typing import TYPE_CHECKING, Any, TypeVar

from retries.runner import resolve_options, run

if TYPE_CHECKING:
    from collections.abc import Callable

    from retries.core.config import RetryOptions

F = TypeVar("F", bound="Callable[..., Any]")


def with_retries(config: RetryOptions | None = None, **overrides: Any) -> Callable[[F], F]:
    """Decorate a function so each call is retried on transient failures.

    The decorated function is called with its own arguments on every
    attempt; it does not receive the attempt number. Options are resolved
    on each call, so changes to the default options made after decoration
    are observed. Invalid overrides are reported when decorating.

    Args:
        config: Optional options applied on top of the defaults. Only the
            fields set explicitly on it take effect.
        **overrides: Options accepted by ``retries.run`` (e.g.
            ``max_attempts``, ``retry_on``, ``on_retry``, ``clock``).

    Returns:
        A decorator.

    Raises:
        ConfigurationError: If an override is unknown or invalid.

    Example:
        ```pycon
        >>> from retries import with_retries
        >>> calls = []
        >>> @with_retries(max_attempts=3, retry_on=TimeoutError, sleep_enabled=False)
        ... def fetch(key):
        ...     calls.append(key)
        ...     if len(calls) < 2:
        ...         raise TimeoutError
        ...     return key.upper()
        ...
        >>> fetch("abc")
        'ABC'
        >>> calls
        ['abc', 'abc']

        ```
    """
    option_overrides = {
        key: value for key, value in overrides.items() if key not in {"clock", "sleep", "random"}
    }
    resolve_options(config, **option_overrides)

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            return run(lambda _attempt: func(*args, **kwargs), config, **overrides)

        return wrapper  # type: ignore[return-value]

    return decorator
