r"""Retry package implementing class-based composition pattern.

This package provides a modular retry execution system using composition
and strategy patterns.

Public API:
    - RetryDecider: Logic for deciding whether to retry
    - RetryStrategy: Strategy for calculating retry delays
    - CallbackManager: Manager for callback invocations
    - RetryExecutor: Synchronous retry executor
"""

from __future__ import annotations

__all__ = [
    "CallbackManager",
    "RetryDecider",
    "RetryExecutor",
    "RetryStrategy",
]

from retries.retry.decider import RetryDecider
from retries.retry.executor import RetryExecutor
from retries.retry.manager import CallbackManager
from retries.retry.strategy import RetryStrategy
