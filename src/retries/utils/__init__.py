r"""Utility functions for retry execution.

This package provides helpers for computing sleep times with exponential
backoff and jitter, invoking the retry observer, and emitting structured
log records.
"""

from __future__ import annotations

__all__ = [
    "calculate_backoff",
    "calculate_sleep_time",
    "invoke_on_retry",
    "log_structured",
]

from retries.utils.callbacks import invoke_on_retry
from retries.utils.sleep import calculate_backoff, calculate_sleep_time
from retries.utils.structured_logging import log_structured
