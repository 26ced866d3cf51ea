r"""Unit tests for callback invocation utilities."""

from __future__ import annotations

from unittest.mock import Mock

import pytest

from retries.utils.callbacks import invoke_on_retry


def test_invoke_on_retry(mock_callback: Mock) -> None:
    error = KeyError("a")
    invoke_on_retry(mock_callback, error=error, attempt=2, elapsed=1.5)
    mock_callback.assert_called_once_with(error, 2, 1.5)


def test_invoke_on_retry_none() -> None:
    invoke_on_retry(None, error=KeyError("a"), attempt=1, elapsed=0.0)


def test_invoke_on_retry_propagates_callback_error() -> None:
    callback = Mock(side_effect=RuntimeError("callback failed"))
    with pytest.raises(RuntimeError, match=r"callback failed"):
        invoke_on_retry(callback, error=KeyError("a"), attempt=1, elapsed=0.0)
