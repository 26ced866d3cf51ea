r"""Exceptions raised by the retries package itself.

Errors raised by the operation under retry are never wrapped: they reach
the caller unchanged. Only configuration problems detected before the
first attempt are reported with the exceptions defined here.
"""

from __future__ import annotations

__all__ = ["ConfigurationError"]


class ConfigurationError(ValueError):
    """Raised when retry options or the operation are invalid.

    The error is raised before the operation is invoked for the first
    time, so it never triggers a retry.

    Args:
        message: Description of the invalid configuration.
        field: Name of the offending option, if any.

    Attributes:
        field: Name of the offending option, or ``None`` when the error
            is not tied to a single option (e.g. a missing operation).

    Example:
        ```pycon
        >>> from retries.exceptions import ConfigurationError
        >>> error = ConfigurationError("max_attempts must be > 0, got 0", field="max_attempts")
        >>> error.field
        'max_attempts'
        >>> str(error)
        'max_attempts must be > 0, got 0'
        >>> isinstance(error, ValueError)
        True

        ```
    """

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field
