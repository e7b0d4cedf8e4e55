r"""Unit tests for option constructors."""

from __future__ import annotations

import collections.abc
from typing import get_origin
from unittest.mock import Mock

import pytest

from aretry.backoff import backoff_delay, constant_delay
from aretry.config import RetryConfig
from aretry.context import Context
from aretry.options import (
    Option,
    attempts,
    clamp_max_delay,
    context,
    delay,
    delay_type,
    max_delay,
    on_retry,
    retry_if,
)


@pytest.mark.parametrize("number", [-1, 0, 1, 20])
def test_attempts(number: int) -> None:
    """Test attempts accepts any integer unchanged."""
    config = RetryConfig()
    attempts(number)(config)
    assert config.attempts == number


def test_delay() -> None:
    config = RetryConfig()
    delay(0.2)(config)
    assert config.delay == 0.2


@pytest.mark.parametrize("seconds", [0, 0.0, -0.5, -10])
def test_delay_non_positive_uses_default(seconds: float) -> None:
    """Test non-positive delays are replaced by the default."""
    config = RetryConfig(delay=3.0)
    delay(seconds)(config)
    assert config.delay == 0.1


def test_max_delay() -> None:
    config = RetryConfig()
    max_delay(5.0)(config)
    assert config.max_delay == 5.0


@pytest.mark.parametrize("seconds", [-0.1, -5.0])
def test_max_delay_negative_clamped_to_zero(seconds: float) -> None:
    """Test negative max delays are clamped to zero."""
    config = RetryConfig(max_delay=2.0)
    max_delay(seconds)(config)
    assert config.max_delay == 0.0


def test_clamp_max_delay() -> None:
    config = RetryConfig()
    clamp_max_delay()(config)
    assert config.clamp_max_delay is True
    clamp_max_delay(False)(config)
    assert config.clamp_max_delay is False


def test_on_retry(mock_callback: Mock) -> None:
    config = RetryConfig()
    on_retry(mock_callback)(config)
    assert config.on_retry is mock_callback


def test_on_retry_none_uses_no_op(mock_callback: Mock) -> None:
    """Test a None callback is replaced by a no-op."""
    config = RetryConfig(on_retry=mock_callback)
    on_retry(None)(config)
    assert config.on_retry is not mock_callback
    assert config.on_retry(1, 0.1, ValueError("boom")) is None


def test_retry_if() -> None:
    predicate = Mock(return_value=False)
    config = RetryConfig()
    retry_if(predicate)(config)
    assert config.retry_if is predicate


def test_retry_if_none_always_retries() -> None:
    """Test a None predicate is replaced by an always-retry predicate."""
    config = RetryConfig(retry_if=lambda error: False)  # noqa: ARG005
    retry_if(None)(config)
    assert config.retry_if(ValueError("boom")) is True


def test_context() -> None:
    ctx = Context.with_timeout(10)
    config = RetryConfig()
    context(ctx)(config)
    assert config.context is ctx


def test_context_none_never_cancels() -> None:
    """Test a None context is replaced by a background context."""
    config = RetryConfig()
    context(None)(config)
    assert isinstance(config.context, Context)
    assert config.context.deadline is None
    assert not config.context.done()


def test_delay_type() -> None:
    config = RetryConfig()
    delay_type(constant_delay)(config)
    assert config.delay_type is constant_delay


def test_delay_type_none_uses_exponential() -> None:
    """Test a None strategy falls back to exponential backoff."""
    config = RetryConfig(delay_type=constant_delay)
    delay_type(None)(config)
    assert config.delay_type is backoff_delay


def test_options_are_reusable() -> None:
    """Test an option can be applied to several configs."""
    option = attempts(7)
    config1, config2 = RetryConfig(), RetryConfig()
    option(config1)
    option(config2)
    assert config1.attempts == config2.attempts == 7


def test_option_alias() -> None:
    """Test ``Option`` is a callable alias taking a config."""
    assert get_origin(Option) is collections.abc.Callable
    assert isinstance(attempts(3), collections.abc.Callable)
