r"""Unit tests for sleep time calculation."""

from __future__ import annotations

import random
from unittest.mock import Mock, patch

import pytest

from retries import calculate_backoff
from retries.backoff import ExponentialBackoff
from retries.utils.sleep import calculate_sleep_time

##########################################
#     Tests for calculate_sleep_time     #
##########################################


def test_calculate_sleep_time_no_jitter_draw() -> None:
    backoff = ExponentialBackoff(base_delay=1.0, max_delay=8.0)
    assert calculate_sleep_time(3, backoff, random=lambda: 0.0) == 2.0


def test_calculate_sleep_time_jitter_range() -> None:
    backoff = ExponentialBackoff(base_delay=1.0, max_delay=8.0)
    assert calculate_sleep_time(4, backoff, random=lambda: 0.0) == 4.0
    assert calculate_sleep_time(4, backoff, random=lambda: 0.5) == 6.0
    assert calculate_sleep_time(4, backoff, random=lambda: 0.999) < 8.0


def test_calculate_sleep_time_floor() -> None:
    backoff = ExponentialBackoff(base_delay=1.0, max_delay=8.0)
    assert calculate_sleep_time(1, backoff, min_delay=1.0, random=lambda: 0.0) == 1.0


def test_calculate_sleep_time_default_random() -> None:
    backoff = ExponentialBackoff(base_delay=1.0, max_delay=8.0)
    with patch("retries.utils.sleep._random.random", return_value=0.5) as mock_random:
        assert calculate_sleep_time(2, backoff) == 1.5
    mock_random.assert_called_once_with()


def test_calculate_sleep_time_uses_backoff_strategy() -> None:
    backoff = Mock(calculate=Mock(return_value=10.0))
    assert calculate_sleep_time(7, backoff, random=lambda: 0.0) == 5.0
    backoff.calculate.assert_called_once_with(7)


#######################################
#     Tests for calculate_backoff     #
#######################################


def test_calculate_backoff_first_attempt_floored() -> None:
    assert calculate_backoff(1, base_delay=0.5, max_delay=1.0, random=lambda: 0.0) == 0.5


def test_calculate_backoff_grows_exponentially() -> None:
    delays = [
        calculate_backoff(attempt, base_delay=1.0, max_delay=100.0, random=lambda: 0.0)
        for attempt in range(1, 6)
    ]
    assert delays == [1.0, 1.0, 2.0, 4.0, 8.0]


def test_calculate_backoff_capped() -> None:
    assert calculate_backoff(20, base_delay=1.0, max_delay=3.0, random=lambda: 0.5) == 2.25


@pytest.mark.parametrize("attempt", [1, 2, 3, 5, 8, 13, 100])
@pytest.mark.parametrize("draw", [0.0, 0.25, 0.5, 0.75, 0.999999])
@pytest.mark.parametrize(("base_delay", "max_delay"), [(0.5, 1.0), (0.0, 0.0), (0.1, 30.0), (2.0, 2.0)])
def test_calculate_backoff_bounds(
    attempt: int, draw: float, base_delay: float, max_delay: float
) -> None:
    delay = calculate_backoff(attempt, base_delay=base_delay, max_delay=max_delay, random=lambda: draw)
    assert base_delay <= delay <= max_delay


def test_calculate_backoff_bounds_random_draws() -> None:
    rng = random.Random(1234)
    for attempt in range(1, 50):
        delay = calculate_backoff(attempt, base_delay=0.2, max_delay=5.0, random=rng.random)
        assert 0.2 <= delay <= 5.0
