r"""retries - Run operations with automatic retry logic.

This package runs a unit of work and, when it fails with a recognized
transient error, retries it with exponential backoff and randomized
jitter, up to a bounded number of attempts.

Key Features:
    - Bounded attempts, with the original exception re-raised on exhaustion
    - Retry only selected exception kinds (subclasses included)
    - Exponential backoff capped at a maximum, half-to-full jitter, and a
      floor at the base delay
    - Optional observer called before each retry with the error, the
      attempt number and the elapsed time
    - Process-wide default options and a global switch to disable sleeping
      in tests
    - Injectable clock, sleep and random sources for deterministic tests

Example:
    ```pycon
    >>> import retries
    >>> def fetch(attempt):
    ...     if attempt == 1:
    ...         raise ConnectionError("connection reset")
    ...     return {"status": "ok"}
    ...
    >>> retries.run(fetch, retry_on=ConnectionError, sleep_enabled=False)
    {'status': 'ok'}
    >>> # Turn off sleeping for all later calls (e.g. in a test suite)
    >>> retries.set_sleep_enabled(False)
    >>> retries.is_sleep_enabled()
    False
    >>> retries.set_sleep_enabled(True)

    ```
"""

from __future__ import annotations

__all__ = [
    "ConfigurationError",
    "RetryExecutor",
    "RetryOptions",
    "__version__",
    "calculate_backoff",
    "get_default_options",
    "is_sleep_enabled",
    "reset_default_options",
    "run",
    "set_default_options",
    "set_sleep_enabled",
    "with_retries",
]

from importlib.metadata import PackageNotFoundError, version

from retries.core.config import (
    RetryOptions,
    get_default_options,
    is_sleep_enabled,
    reset_default_options,
    set_default_options,
    set_sleep_enabled,
)
from retries.decorator import with_retries
from retries.exceptions import ConfigurationError
from retries.retry.executor import RetryExecutor
from retries.runner import run
from retries.utils.sleep import calculate_backoff

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
