r"""Structured logging utilities for machine-readable retry logs.

The retry executor logs every retry and every terminal failure with
structured fields (``attempt``, ``max_attempts``, ``delay``, ``elapsed``,
``error_type``) attached to the log record. This module provides a JSON
formatter that renders those fields, and context-local correlation ids to
tie the records of one logical operation together.

The structured output is opt-in: the package never installs handlers.

Example:
    Render retry logs as JSON:

    ```python
    import logging
    from retries.utils.structured_logging import StructuredFormatter

    handler = logging.StreamHandler()
    handler.setFormatter(StructuredFormatter())

    logger = logging.getLogger("retries")
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    ```

    Tag the records of one operation:

    ```python
    import retries
    from retries.utils.structured_logging import correlation_id

    with correlation_id("sync-job-42"):
        retries.run(lambda attempt: fetch_batch(), retry_on=OSError)
    ```
"""

from __future__ import annotations

__all__ = [
    "StructuredFormatter",
    "clear_correlation_id",
    "correlation_id",
    "get_correlation_id",
    "log_structured",
    "set_correlation_id",
]

import contextlib
import contextvars
import json
import logging
import time
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Iterator

_correlation_id: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "retries_correlation_id", default=None
)

# Attributes every LogRecord carries; anything else on a record came from ``extra``
_RECORD_ATTRIBUTES = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime"}


def get_correlation_id() -> str | None:
    """Get the correlation id of the current context.

    Returns:
        The current correlation id, or None if not set.
    """
    return _correlation_id.get()


def set_correlation_id(value: str) -> None:
    """Set the correlation id for the current context.

    The id is stored in a context variable, so each thread (and each
    asyncio task) sees its own value.

    Args:
        value: The correlation id (e.g. a job id or a trace id).

    Example:
        ```pycon
        >>> from retries.utils.structured_logging import (
        ...     clear_correlation_id,
        ...     get_correlation_id,
        ...     set_correlation_id,
        ... )
        >>> set_correlation_id("job-7")
        >>> get_correlation_id()
        'job-7'
        >>> clear_correlation_id()
        >>> get_correlation_id() is None
        True

        ```
    """
    _correlation_id.set(value)


def clear_correlation_id() -> None:
    """Clear the correlation id for the current context."""
    _correlation_id.set(None)


@contextlib.contextmanager
def correlation_id(value: str) -> Iterator[str]:
    """Set a correlation id for the duration of a ``with`` block.

    The previous id is restored on exit, so blocks can be nested.

    Args:
        value: The correlation id.

    Yields:
        The correlation id.

    Example:
        ```pycon
        >>> from retries.utils.structured_logging import correlation_id, get_correlation_id
        >>> with correlation_id("outer"):
        ...     with correlation_id("inner"):
        ...         print(get_correlation_id())
        ...     print(get_correlation_id())
        ...
        inner
        outer

        ```
    """
    token = _correlation_id.set(value)
    try:
        yield value
    finally:
        _correlation_id.reset(token)


class StructuredFormatter(logging.Formatter):
    """JSON formatter for structured logging.

    Each record is rendered as one JSON object with the fields
    ``timestamp`` (ISO 8601, UTC), ``level``, ``logger``, ``message``,
    ``module``, ``function``, ``line``, ``thread`` and ``process``, plus
    ``correlation_id`` when one is set, ``exception`` when the record
    carries exception info, and every field passed through ``extra``.
    Values that are not JSON serializable are rendered with ``repr``.

    Example:
        ```pycon
        >>> import json
        >>> import logging
        >>> from retries.utils.structured_logging import StructuredFormatter
        >>> record = logging.makeLogRecord(
        ...     {"name": "retries", "levelname": "DEBUG", "msg": "Retrying", "attempt": 2}
        ... )
        >>> payload = json.loads(StructuredFormatter().format(record))
        >>> payload["message"], payload["attempt"]
        ('Retrying', 2)

        ```
    """

    def format(self, record: logging.LogRecord) -> str:
        """Format a log record as JSON.

        Args:
            record: The log record to format.

        Returns:
            JSON-formatted log string.
        """
        log_data: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
            "thread": record.threadName,
            "process": record.process,
        }

        current_id = get_correlation_id()
        if current_id is not None:
            log_data["correlation_id"] = current_id

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        for key, value in vars(record).items():
            if key not in _RECORD_ATTRIBUTES:
                log_data[key] = value

        return json.dumps(log_data, default=repr)

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:  # noqa: N802
        """Format the record creation time as ISO 8601 in UTC.

        Args:
            record: The log record.
            datefmt: Ignored, the output is always ISO 8601.

        Returns:
            Timestamp with millisecond precision, e.g.
            ``2024-01-31T12:00:00.123Z``.
        """
        return time.strftime("%Y-%m-%dT%H:%M:%S", time.gmtime(record.created)) + f".{int(record.msecs):03d}Z"


def log_structured(
    logger: logging.Logger,
    level: int,
    message: str,
    **extra: Any,
) -> None:
    """Log a message with structured fields.

    The fields are attached to the record through ``extra``, so they are
    available to filters and handlers and rendered by
    ``StructuredFormatter``. Nothing is computed when the level is
    disabled.

    Args:
        logger: Logger to use.
        level: Log level (e.g. ``logging.DEBUG``).
        message: Log message.
        **extra: Structured fields to attach to the record.
    """
    if logger.isEnabledFor(level):
        logger.log(level, message, extra=extra, stacklevel=2)
