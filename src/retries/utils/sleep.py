r"""Backoff and sleep time calculation utilities.

This module provides functions for calculating the sleep time between
two attempts from a backoff strategy, with half-to-full jitter and a
floor at the base delay.
"""

from __future__ import annotations

__all__ = ["calculate_backoff", "calculate_sleep_time"]

import logging
import random as _random
from typing import TYPE_CHECKING

from retries.backoff.exponential import ExponentialBackoff

if TYPE_CHECKING:
    from collections.abc import Callable

    from retries.backoff.base import BaseBackoffStrategy

logger: logging.Logger = logging.getLogger(__name__)


def calculate_sleep_time(
    attempt: int,
    backoff_strategy: BaseBackoffStrategy,
    min_delay: float = 0.0,
    random: Callable[[], float] | None = None,
) -> float:
    """Calculate sleep time for retry with backoff strategy and jitter.

    The sleep time is calculated as follows:
    1. Determine the raw delay: ``backoff_strategy.calculate(attempt)``
    2. Apply jitter: ``jittered = raw * (0.5 + 0.5 * u)`` where ``u`` is
       drawn uniformly from [0, 1), so the jittered delay lies in
       [raw / 2, raw)
    3. Apply the floor: ``max(min_delay, jittered)``

    Args:
        attempt: The number of the attempt that failed (1-indexed).
        backoff_strategy: Strategy computing the raw delay.
        min_delay: The delay is never shorter than this value.
        random: Optional callable returning a float in [0, 1). Defaults to
            ``random.random``, which is safe to call from several threads.

    Returns:
        The calculated sleep time in seconds.

    Example:
        ```pycon
        >>> from retries.backoff import ExponentialBackoff
        >>> from retries.utils.sleep import calculate_sleep_time
        >>> backoff = ExponentialBackoff(base_delay=1.0, max_delay=8.0)
        >>> calculate_sleep_time(3, backoff, min_delay=1.0, random=lambda: 0.0)
        2.0
        >>> calculate_sleep_time(3, backoff, min_delay=1.0, random=lambda: 0.5)
        3.0
        >>> # The floor applies when jitter halves the first delay
        >>> calculate_sleep_time(1, backoff, min_delay=1.0, random=lambda: 0.0)
        1.0

        ```
    """
    draw = (random or _random.random)()
    raw_delay = backoff_strategy.calculate(attempt)
    jittered = raw_delay * (0.5 + 0.5 * draw)
    sleep_time = max(min_delay, jittered)
    logger.debug(
        f"Waiting {sleep_time:.2f}s before attempt {attempt + 1} "
        f"(raw={raw_delay:.2f}s, jittered={jittered:.2f}s, floor={min_delay:.2f}s)"
    )
    return sleep_time


def calculate_backoff(
    attempt: int,
    base_delay: float,
    max_delay: float,
    random: Callable[[], float] | None = None,
) -> float:
    """Calculate the delay to wait after a failed attempt.

    The result always satisfies ``base_delay <= delay <= max_delay``.

    Args:
        attempt: The number of the attempt that failed (1-indexed).
        base_delay: Delay after the first failure, and the minimum delay.
        max_delay: Upper bound for the delay.
        random: Optional callable returning a float in [0, 1).

    Returns:
        The delay in seconds.

    Example:
        ```pycon
        >>> from retries.utils.sleep import calculate_backoff
        >>> calculate_backoff(1, base_delay=0.5, max_delay=1.0, random=lambda: 0.0)
        0.5
        >>> calculate_backoff(2, base_delay=0.5, max_delay=1.0, random=lambda: 0.0)
        0.5
        >>> calculate_backoff(5, base_delay=0.5, max_delay=1.0, random=lambda: 0.5)
        0.75

        ```
    """
    return calculate_sleep_time(
        attempt=attempt,
        backoff_strategy=ExponentialBackoff(base_delay=base_delay, max_delay=max_delay),
        min_delay=base_delay,
        random=random,
    )
