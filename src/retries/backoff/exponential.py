r"""Exponential backoff strategy."""

from __future__ import annotations

__all__ = ["ExponentialBackoff"]

from retries.backoff.base import BaseBackoffStrategy
from retries.exceptions import ConfigurationError

# Exponents beyond this are far past any practical max_delay; clamping keeps
# 2.0 ** exponent from raising OverflowError on very long retry sequences.
_MAX_EXPONENT = 1000


class ExponentialBackoff(BaseBackoffStrategy):
    """Exponential backoff strategy.

    Calculates delay as: base_delay * (2 ** (attempt - 1)), with optional
    max_delay cap.

    Args:
        base_delay: The delay after the first failed attempt
            (default: 0.5).
        max_delay: Optional maximum delay cap in seconds. If specified,
            delays will not exceed this value.

    Example:
        ```pycon
        >>> from retries.backoff import ExponentialBackoff
        >>> backoff = ExponentialBackoff(base_delay=0.5)
        >>> backoff.calculate(1)  # After the first attempt
        0.5
        >>> backoff.calculate(2)
        1.0
        >>> backoff.calculate(3)
        2.0
        >>> # With max_delay cap
        >>> backoff = ExponentialBackoff(base_delay=1.0, max_delay=5.0)
        >>> backoff.calculate(10)  # Would be 512.0, but capped
        5.0

        ```
    """

    def __init__(self, base_delay: float = 0.5, max_delay: float | None = None) -> None:
        if base_delay < 0:
            msg = f"base_delay must be non-negative, got {base_delay}"
            raise ConfigurationError(msg, field="base_delay")
        if max_delay is not None and max_delay < 0:
            msg = f"max_delay must be non-negative if specified, got {max_delay}"
            raise ConfigurationError(msg, field="max_delay")

        self.base_delay = base_delay
        self.max_delay = max_delay

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(base_delay={self.base_delay}, max_delay={self.max_delay})"

    def calculate(self, attempt: int) -> float:
        """Calculate exponential backoff delay.

        Args:
            attempt: The number of the attempt that failed (1-indexed).

        Returns:
            The calculated delay: base_delay * (2 ** (attempt - 1)),
            capped at max_delay if set.
        """
        exponent = min(max(attempt - 1, 0), _MAX_EXPONENT)
        delay = self.base_delay * (2.0**exponent)
        if self.max_delay is not None:
            delay = min(delay, self.max_delay)
        return delay
