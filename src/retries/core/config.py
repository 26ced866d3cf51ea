r"""Configuration dataclass and process-wide defaults for retries.

This module provides the default configuration constants, the
``RetryOptions`` value object and the process-wide default options that
every call to ``retries.run`` merges its overrides onto.

The default options are held as a single immutable ``RetryOptions``
instance. Readers take a reference to the current instance (a snapshot),
writers replace the instance as a whole, so an in-flight retry loop always
sees one consistent configuration.
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_BASE_DELAY",
    "DEFAULT_MAX_ATTEMPTS",
    "DEFAULT_MAX_DELAY",
    "DEFAULT_RETRY_ON",
    "RetryOptions",
    "get_default_options",
    "is_sleep_enabled",
    "reset_default_options",
    "set_default_options",
    "set_sleep_enabled",
]

import threading
from dataclasses import dataclass, fields
from typing import TYPE_CHECKING, Any

from retries.core.validation import normalize_retry_on, validate_retry_options
from retries.exceptions import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable


# Default maximum number of times the operation is invoked
# (initial attempt included)
DEFAULT_MAX_ATTEMPTS = 3

# Default delay bounds in seconds
# Delay before retry n = base_delay * (2 ** (n - 1)), capped at max_delay,
# then jittered to [delay / 2, delay) and floored at base_delay
DEFAULT_BASE_DELAY = 0.5
DEFAULT_MAX_DELAY = 1.0

# Exceptions retried when no selector is given: any standard error.
# KeyboardInterrupt, SystemExit and GeneratorExit are never retried by default.
DEFAULT_RETRY_ON: tuple[type[BaseException], ...] = (Exception,)


class _Unset:
    """Marker for options not passed to ``RetryOptions``."""

    def __repr__(self) -> str:
        return "UNSET"


_UNSET: Any = _Unset()


@dataclass(frozen=True, init=False)
class RetryOptions:
    """Configuration for retry behavior.

    The options are validated on creation, so an existing instance always
    satisfies ``max_attempts > 0`` and ``base_delay <= max_delay``.

    The instance remembers which options were passed explicitly
    (``explicit_fields``). Options left out hold the built-in defaults and
    are filled from the process-wide default options when the instance is
    given to ``retries.run`` as ``config``.

    Args:
        max_attempts: Maximum number of times the operation is invoked.
            Must be > 0.
        base_delay: Minimum delay in seconds between two attempts.
            Must be a finite number >= 0.
        max_delay: Maximum delay in seconds between two attempts.
            Must be a finite number >= ``base_delay``.
        retry_on: Exception class, or iterable of exception classes, that
            trigger a retry. Subclasses match too. Normalized to a tuple.
        on_retry: Optional observer called as
            ``on_retry(error, attempt, elapsed)`` before each retry.
        sleep_enabled: If ``False``, delays are computed but not waited.

    Attributes:
        explicit_fields: Names of the options set explicitly.

    Raises:
        ConfigurationError: If any parameter fails validation.

    Example:
        ```pycon
        >>> from retries.core.config import RetryOptions
        >>> options = RetryOptions()
        >>> options.max_attempts
        3
        >>> options = RetryOptions(max_attempts=5, retry_on=KeyError)
        >>> options.retry_on
        (<class 'KeyError'>,)
        >>> sorted(options.explicit_fields)
        ['max_attempts', 'retry_on']
        >>> merged = options.merge(max_attempts=10)
        >>> merged.max_attempts
        10
        >>> options.max_attempts  # Original unchanged
        5

        ```
    """

    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    base_delay: float = DEFAULT_BASE_DELAY
    max_delay: float = DEFAULT_MAX_DELAY
    retry_on: tuple[type[BaseException], ...] = DEFAULT_RETRY_ON
    on_retry: Callable[[BaseException, int, float], Any] | None = None
    sleep_enabled: bool = True

    def __init__(
        self,
        max_attempts: int = _UNSET,
        base_delay: float = _UNSET,
        max_delay: float = _UNSET,
        retry_on: type[BaseException] | Iterable[type[BaseException]] = _UNSET,
        on_retry: Callable[[BaseException, int, float], Any] | None = _UNSET,
        sleep_enabled: bool = _UNSET,
    ) -> None:
        passed = {
            "max_attempts": max_attempts,
            "base_delay": base_delay,
            "max_delay": max_delay,
            "retry_on": retry_on,
            "on_retry": on_retry,
            "sleep_enabled": sleep_enabled,
        }
        explicit = {name: value for name, value in passed.items() if value is not _UNSET}
        # Frozen dataclass: bypass __setattr__ to store the values
        for option in fields(self):
            object.__setattr__(self, option.name, explicit.get(option.name, option.default))
        object.__setattr__(self, "explicit_fields", frozenset(explicit))
        self.__post_init__()

    def __post_init__(self) -> None:
        """Validate and normalize configuration parameters.

        Raises:
            ConfigurationError: If any parameter fails validation.
        """
        validate_retry_options(
            max_attempts=self.max_attempts,
            base_delay=self.base_delay,
            max_delay=self.max_delay,
            on_retry=self.on_retry,
        )
        object.__setattr__(self, "retry_on", normalize_retry_on(self.retry_on))
        object.__setattr__(self, "sleep_enabled", bool(self.sleep_enabled))

    def explicit_options(self) -> dict[str, Any]:
        """Return the options set explicitly, with their values.

        Example:
            ```pycon
            >>> from retries.core.config import RetryOptions
            >>> RetryOptions(max_attempts=5).explicit_options()
            {'max_attempts': 5}

            ```
        """
        return {name: value for name, value in self.to_dict().items() if name in self.explicit_fields}

    def merge(self, **overrides: Any) -> RetryOptions:
        """Create new options with the specified fields overridden.

        Only non-None override values are applied, so unspecified fields
        keep the values of this instance. Overridden fields become explicit.

        Args:
            **overrides: Keyword arguments for fields to override.

        Returns:
            A new validated ``RetryOptions`` instance.

        Raises:
            ConfigurationError: If an override names an unknown field, or
                if the merged options fail validation.

        Example:
            ```pycon
            >>> from retries.core.config import RetryOptions
            >>> options = RetryOptions(max_attempts=3)
            >>> options.merge(max_attempts=5, base_delay=None).max_attempts
            5
            >>> options.merge(base_delay=None).base_delay
            0.5

            ```
        """
        unknown = set(overrides) - {f.name for f in fields(self)}
        if unknown:
            msg = f"unknown retry option(s): {', '.join(sorted(unknown))}"
            raise ConfigurationError(msg, field=sorted(unknown)[0])
        filtered_overrides = {k: v for k, v in overrides.items() if v is not None}
        if not filtered_overrides:
            return self
        return RetryOptions(**{**self.explicit_options(), **filtered_overrides})

    def overlay(self, other: RetryOptions) -> RetryOptions:
        """Create new options where the explicit fields of ``other`` win.

        Fields ``other`` did not set keep the values of this instance. An
        explicit ``on_retry=None`` in ``other`` removes the observer.

        Args:
            other: Options applied on top of this instance.

        Returns:
            A new validated ``RetryOptions`` instance.

        Raises:
            ConfigurationError: If the combined options fail validation.

        Example:
            ```pycon
            >>> from retries.core.config import RetryOptions
            >>> defaults = RetryOptions(max_attempts=7, sleep_enabled=False)
            >>> combined = defaults.overlay(RetryOptions(retry_on=KeyError))
            >>> combined.max_attempts, combined.sleep_enabled, combined.retry_on
            (7, False, (<class 'KeyError'>,))

            ```
        """
        if not other.explicit_fields:
            return self
        return RetryOptions(**{**self.explicit_options(), **other.explicit_options()})

    def to_dict(self) -> dict[str, Any]:
        """Convert the options to a dictionary.

        Returns:
            Dictionary with one entry per option.

        Example:
            ```pycon
            >>> from retries.core.config import RetryOptions
            >>> RetryOptions(max_attempts=5).to_dict()["max_attempts"]
            5

            ```
        """
        return {
            "max_attempts": self.max_attempts,
            "base_delay": self.base_delay,
            "max_delay": self.max_delay,
            "retry_on": self.retry_on,
            "on_retry": self.on_retry,
            "sleep_enabled": self.sleep_enabled,
        }


_default_options: RetryOptions = RetryOptions()
_default_options_lock = threading.Lock()


def get_default_options() -> RetryOptions:
    """Return the current process-wide default options.

    The returned instance is immutable and can be used as a consistent
    snapshot for a whole retry loop.

    Returns:
        The current default options.
    """
    return _default_options


def set_default_options(**changes: Any) -> RetryOptions:
    """Update fields of the process-wide default options.

    Later calls to ``retries.run`` that do not override a changed field
    observe the new value. Calls already running keep the options they
    started with.

    Args:
        **changes: Fields to change. ``None`` values are ignored.

    Returns:
        The new default options.

    Raises:
        ConfigurationError: If the resulting options are invalid. The
            defaults are left untouched in that case.

    Example:
        ```pycon
        >>> from retries.core.config import (
        ...     get_default_options,
        ...     reset_default_options,
        ...     set_default_options,
        ... )
        >>> set_default_options(max_attempts=5).max_attempts
        5
        >>> get_default_options().max_attempts
        5
        >>> reset_default_options().max_attempts
        3

        ```
    """
    global _default_options  # noqa: PLW0603
    with _default_options_lock:
        _default_options = _default_options.merge(**changes)
        return _default_options


def reset_default_options() -> RetryOptions:
    """Restore the built-in default options.

    Returns:
        The new default options.
    """
    global _default_options  # noqa: PLW0603
    with _default_options_lock:
        _default_options = RetryOptions()
        return _default_options


def set_sleep_enabled(enabled: bool) -> None:
    """Turn sleeping between attempts on or off for all later calls.

    This is a shortcut for ``set_default_options(sleep_enabled=enabled)``,
    mostly useful in test suites that want retries without wall-clock
    delays. A per-call ``sleep_enabled`` override still takes precedence.

    Args:
        enabled: ``True`` to wait between attempts, ``False`` to skip waits.
    """
    set_default_options(sleep_enabled=bool(enabled))


def is_sleep_enabled() -> bool:
    """Return whether the default options wait between attempts."""
    return get_default_options().sleep_enabled
