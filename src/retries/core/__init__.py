r"""Core configuration and validation for retry execution.

This package contains the retry options value object, the process-wide
default options and the validation helpers run before any attempt.
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
    "normalize_retry_on",
    "reset_default_options",
    "set_default_options",
    "set_sleep_enabled",
    "validate_operation",
    "validate_retry_options",
]

from retries.core.config import (
    DEFAULT_BASE_DELAY,
    DEFAULT_MAX_ATTEMPTS,
    DEFAULT_MAX_DELAY,
    DEFAULT_RETRY_ON,
    RetryOptions,
    get_default_options,
    is_sleep_enabled,
    reset_default_options,
    set_default_options,
    set_sleep_enabled,
)
from retries.core.validation import (
    normalize_retry_on,
    validate_operation,
    validate_retry_options,
)
