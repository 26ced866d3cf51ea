r"""Retry strategy for calculating backoff delays.

This module provides the RetryStrategy class for calculating the delay
to wait between two attempts.
"""

from __future__ import annotations

__all__ = ["RetryStrategy"]

from typing import TYPE_CHECKING

from retries.backoff.exponential import ExponentialBackoff
from retries.utils.sleep import calculate_sleep_time

if TYPE_CHECKING:
    from collections.abc import Callable


class RetryStrategy:
    """Strategy for calculating retry delays with backoff and jitter.

    The raw delay grows exponentially from ``base_delay`` and is capped at
    ``max_delay``. It is then jittered to a value between half and all of
    the raw delay, and never drops below ``base_delay``.

    Args:
        base_delay: Delay after the first failure, and the minimum delay.
        max_delay: Maximum delay.
        random: Optional callable returning a float in [0, 1), used for
            the jitter draws. Defaults to ``random.random``.

    Attributes:
        base_delay: Delay after the first failure, and the minimum delay.
        backoff_strategy: Capped exponential backoff instance.
        random: Optional source of jitter draws.
    """

    def __init__(
        self,
        base_delay: float,
        max_delay: float,
        random: Callable[[], float] | None = None,
    ) -> None:
        self.base_delay = base_delay
        self.backoff_strategy: ExponentialBackoff = ExponentialBackoff(
            base_delay=base_delay, max_delay=max_delay
        )
        self.random = random

    def calculate_delay(self, attempt: int) -> float:
        """Calculate delay before the next attempt.

        Args:
            attempt: The number of the attempt that failed (1-indexed).

        Returns:
            Sleep time in seconds.
        """
        return calculate_sleep_time(
            attempt=attempt,
            backoff_strategy=self.backoff_strategy,
            min_delay=self.base_delay,
            random=self.random,
        )
