r"""Unit tests for the with_retries decorator."""

from __future__ import annotations

from unittest.mock import Mock

import pytest

from retries import ConfigurationError, RetryOptions, set_default_options, with_retries


class CustomErrorA(RuntimeError):
    pass


class CustomErrorB(RuntimeError):
    pass


def test_with_retries_returns_result() -> None:
    @with_retries(sleep_enabled=False)
    def add(a: int, b: int) -> int:
        return a + b

    assert add(1, b=2) == 3


def test_with_retries_retries_with_same_arguments() -> None:
    func = Mock(side_effect=[CustomErrorA, CustomErrorA, "done"], __name__="func")
    decorated = with_retries(retry_on=CustomErrorA, sleep_enabled=False)(func)

    assert decorated("a", key="b") == "done"
    assert func.call_count == 3
    for call_args in func.call_args_list:
        assert call_args.args == ("a",)
        assert call_args.kwargs == {"key": "b"}


def test_with_retries_reraises_after_max_attempts() -> None:
    func = Mock(side_effect=CustomErrorA, __name__="func")
    decorated = with_retries(max_attempts=2, retry_on=CustomErrorA, sleep_enabled=False)(func)

    with pytest.raises(CustomErrorA):
        decorated()
    assert func.call_count == 2


def test_with_retries_non_retryable_error() -> None:
    func = Mock(side_effect=CustomErrorB, __name__="func")
    decorated = with_retries(retry_on=CustomErrorA)(func)

    with pytest.raises(CustomErrorB):
        decorated()
    func.assert_called_once_with()


def test_with_retries_on_retry(mock_callback: Mock) -> None:
    @with_retries(max_attempts=3, on_retry=mock_callback, sleep_enabled=False)
    def always_fails() -> None:
        raise CustomErrorA

    with pytest.raises(CustomErrorA):
        always_fails()
    assert [c.args[1] for c in mock_callback.call_args_list] == [1, 2]


def test_with_retries_with_config() -> None:
    func = Mock(side_effect=CustomErrorA, __name__="func")
    config = RetryOptions(max_attempts=5, retry_on=CustomErrorA, sleep_enabled=False)

    with pytest.raises(CustomErrorA):
        with_retries(config)(func)()
    assert func.call_count == 5


def test_with_retries_injected_sleep() -> None:
    sleep = Mock()
    func = Mock(side_effect=[CustomErrorA, "done"], __name__="func")

    assert with_retries(base_delay=0.25, max_delay=0.25, sleep=sleep)(func)() == "done"
    sleep.assert_called_once_with(0.25)


def test_with_retries_reads_defaults_at_call_time() -> None:
    func = Mock(side_effect=CustomErrorA, __name__="func")
    decorated = with_retries(retry_on=CustomErrorA)(func)
    set_default_options(max_attempts=4, sleep_enabled=False)

    with pytest.raises(CustomErrorA):
        decorated()
    assert func.call_count == 4


def test_with_retries_preserves_metadata() -> None:
    @with_retries()
    def fetch_data() -> None:
        """Fetch the data."""

    assert fetch_data.__name__ == "fetch_data"
    assert fetch_data.__doc__ == "Fetch the data."


def test_with_retries_invalid_options() -> None:
    with pytest.raises(ConfigurationError, match=r"max_attempts must be > 0"):
        with_retries(max_attempts=0)


def test_with_retries_unknown_option() -> None:
    with pytest.raises(ConfigurationError, match=r"unknown retry option\(s\): tries"):
        with_retries(tries=3)
