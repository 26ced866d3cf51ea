r"""Abstract base class for backoff strategies."""

from __future__ import annotations

__all__ = ["BaseBackoffStrategy"]

from abc import ABC, abstractmethod


class BaseBackoffStrategy(ABC):
    """Abstract base class for backoff strategies.

    A backoff strategy determines how long to wait before retrying a
    failed operation based on the number of the attempt that failed.
    Jitter is applied on top of the returned value by the caller.
    """

    @abstractmethod
    def calculate(self, attempt: int) -> float:
        """Calculate the backoff delay after a failed attempt.

        Args:
            attempt: The number of the attempt that just failed
                (1-indexed). For example, attempt=1 is the delay before
                the second attempt.

        Returns:
            The delay in seconds before the next attempt, before jitter.
        """
