r"""Unit tests for retry option validation."""

from __future__ import annotations

import math

import pytest

from retries.core.validation import (
    normalize_retry_on,
    validate_operation,
    validate_retry_options,
)
from retries.exceptions import ConfigurationError


class CustomError(Exception):
    pass


########################################
#     Tests for normalize_retry_on     #
########################################


def test_normalize_retry_on_single_class() -> None:
    assert normalize_retry_on(CustomError) == (CustomError,)


def test_normalize_retry_on_tuple() -> None:
    assert normalize_retry_on((KeyError, CustomError)) == (KeyError, CustomError)


def test_normalize_retry_on_generator() -> None:
    assert normalize_retry_on(cls for cls in [KeyError, OSError]) == (KeyError, OSError)


def test_normalize_retry_on_base_exception() -> None:
    assert normalize_retry_on(KeyboardInterrupt) == (KeyboardInterrupt,)


def test_normalize_retry_on_empty() -> None:
    with pytest.raises(ConfigurationError, match=r"at least one exception class") as exc_info:
        normalize_retry_on([])
    assert exc_info.value.field == "retry_on"


@pytest.mark.parametrize("retry_on", [int, [KeyError, "OSError"], [CustomError()]])
def test_normalize_retry_on_not_exception_classes(retry_on: object) -> None:
    with pytest.raises(ConfigurationError, match=r"retry_on must only contain exception classes"):
        normalize_retry_on(retry_on)


def test_normalize_retry_on_not_iterable() -> None:
    with pytest.raises(ConfigurationError, match=r"retry_on must be an exception class or an iterable"):
        normalize_retry_on(42)


############################################
#     Tests for validate_retry_options     #
############################################


def test_validate_retry_options_valid() -> None:
    validate_retry_options(max_attempts=1, base_delay=0.0, max_delay=0.0)
    validate_retry_options(max_attempts=3, base_delay=0.5, max_delay=1.0, on_retry=print)


@pytest.mark.parametrize("max_attempts", [0, -1])
def test_validate_retry_options_max_attempts_not_positive(max_attempts: int) -> None:
    with pytest.raises(ConfigurationError, match=rf"max_attempts must be > 0, got {max_attempts}"):
        validate_retry_options(max_attempts=max_attempts, base_delay=0.5, max_delay=1.0)


@pytest.mark.parametrize("max_attempts", [2.5, "3", True])
def test_validate_retry_options_max_attempts_not_integer(max_attempts: object) -> None:
    with pytest.raises(ConfigurationError, match=r"max_attempts must be an integer"):
        validate_retry_options(max_attempts=max_attempts, base_delay=0.5, max_delay=1.0)


def test_validate_retry_options_negative_base_delay() -> None:
    with pytest.raises(ConfigurationError, match=r"base_delay must be >= 0, got -1") as exc_info:
        validate_retry_options(max_attempts=3, base_delay=-1, max_delay=1.0)
    assert exc_info.value.field == "base_delay"


def test_validate_retry_options_negative_max_delay() -> None:
    with pytest.raises(ConfigurationError, match=r"max_delay must be >= 0, got -1") as exc_info:
        validate_retry_options(max_attempts=3, base_delay=0, max_delay=-1)
    assert exc_info.value.field == "max_delay"


def test_validate_retry_options_base_delay_greater_than_max_delay() -> None:
    with pytest.raises(
        ConfigurationError, match=r"base_delay \(2\) cannot be greater than max_delay \(1\)"
    ):
        validate_retry_options(max_attempts=3, base_delay=2, max_delay=1)


def test_validate_retry_options_on_retry_not_callable() -> None:
    with pytest.raises(ConfigurationError, match=r"on_retry must be callable") as exc_info:
        validate_retry_options(max_attempts=3, base_delay=0.5, max_delay=1.0, on_retry=42)
    assert exc_info.value.field == "on_retry"


@pytest.mark.parametrize("delay", ["1", None, True, [0.5]])
@pytest.mark.parametrize("field", ["base_delay", "max_delay"])
def test_validate_retry_options_delay_not_a_number(field: str, delay: object) -> None:
    delays = {"base_delay": 0.0, "max_delay": 1.0, field: delay}
    with pytest.raises(ConfigurationError, match=rf"{field} must be a number") as exc_info:
        validate_retry_options(max_attempts=3, **delays)
    assert exc_info.value.field == field


@pytest.mark.parametrize("delay", [math.nan, math.inf, -math.inf])
@pytest.mark.parametrize("field", ["base_delay", "max_delay"])
def test_validate_retry_options_delay_not_finite(field: str, delay: float) -> None:
    delays = {"base_delay": 0.0, "max_delay": 1.0, field: delay}
    with pytest.raises(ConfigurationError, match=rf"{field} must be finite") as exc_info:
        validate_retry_options(max_attempts=3, **delays)
    assert exc_info.value.field == field


def test_validate_retry_options_integer_delays() -> None:
    validate_retry_options(max_attempts=3, base_delay=0, max_delay=2)


########################################
#     Tests for validate_operation     #
########################################


def test_validate_operation_callable() -> None:
    validate_operation(lambda attempt: attempt)
    validate_operation(print)


def test_validate_operation_missing() -> None:
    with pytest.raises(ConfigurationError, match=r"an operation to retry is required") as exc_info:
        validate_operation(None)
    assert exc_info.value.field is None


def test_validate_operation_not_callable() -> None:
    with pytest.raises(ConfigurationError, match=r"operation must be callable"):
        validate_operation(42)
