r"""Backoff strategies for retry delays.

This package provides the backoff strategy interface and the capped
exponential backoff used between attempts.
"""

from __future__ import annotations

__all__ = ["BaseBackoffStrategy", "ExponentialBackoff"]

from retries.backoff.base import BaseBackoffStrategy
from retries.backoff.exponential import ExponentialBackoff
