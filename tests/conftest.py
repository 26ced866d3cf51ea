from __future__ import annotations

import itertools
from typing import TYPE_CHECKING
from unittest.mock import Mock, patch

import pytest

from retries.core.config import reset_default_options

if TYPE_CHECKING:
    from collections.abc import Callable, Generator


@pytest.fixture(autouse=True)
def default_options() -> Generator[None, None, None]:
    """Restore the process-wide default options around each test."""
    reset_default_options()
    yield
    reset_default_options()


@pytest.fixture
def mock_sleep() -> Generator[Mock, None, None]:
    """Patch time.sleep to make tests run faster."""
    with patch("time.sleep", return_value=None) as mock:
        yield mock


@pytest.fixture
def mock_callback() -> Mock:
    """Create a mock callback function for testing the retry observer.

    Returns:
        A Mock object that can be used as an on_retry callback.
    """
    return Mock()


@pytest.fixture
def fake_clock() -> Callable[[], float]:
    """Create a clock that advances by 10 seconds on each call.

    The first call returns 0.0, the second 10.0, and so on.
    """
    ticks = itertools.count(start=0.0, step=10.0)
    return lambda: next(ticks)
