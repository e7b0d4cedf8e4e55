r"""Retry configuration and its defaults.

A ``RetryConfig`` is assembled once per call from a fresh default and
the option-appliers of ``aretry.options``, then handed to a retry
executor. After assembly only ``max_backoff`` is ever written, by the
exponential delay strategy.
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_ATTEMPTS",
    "DEFAULT_DELAY",
    "DEFAULT_MAX_DELAY",
    "MAX_DURATION_BITS",
    "RetryConfig",
    "build_config",
]

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from aretry.backoff.exponential import backoff_delay
from aretry.context import Context
from aretry.defaults import (
    DEFAULT_ATTEMPTS,
    DEFAULT_DELAY,
    DEFAULT_MAX_DELAY,
    MAX_DURATION_BITS,
)

if TYPE_CHECKING:
    from collections.abc import Callable

    from aretry.backoff.base import DelayStrategy
    from aretry.options import Option


def _no_op_callback() -> Callable[[int, float, Exception], None]:
    def on_retry(attempt: int, wait: float, error: Exception) -> None:  # noqa: ARG001
        pass

    return on_retry


def _always_retry_predicate() -> Callable[[Exception], bool]:
    def retry_if(error: Exception) -> bool:  # noqa: ARG001
        return True

    return retry_if


@dataclass
class RetryConfig:
    """Configuration for one retry loop invocation.

    Args:
        attempts: Maximum number of task invocations. Values <= 0 retry
            until success, predicate rejection or cancellation.
        delay: Base delay in seconds between attempts.
        max_delay: Maximum delay in seconds. Only enforced by
            ``backoff_delay`` when ``clamp_max_delay`` is set.
        delay_type: Strategy computing the wait before the next attempt.
        retry_if: Predicate deciding whether an error is worth retrying.
        on_retry: Callback invoked after each failed attempt, before
            waiting, with ``(attempt, wait, error)``.
        context: Cancellation handle checked before the first attempt
            and during every wait.
        clamp_max_delay: Clamp ``backoff_delay`` results to ``max_delay``
            when ``max_delay`` is positive.
        max_backoff: Largest exponent ``backoff_delay`` may use. Computed
            on first use and cached here.

    Example:
        ```pycon
        >>> from aretry.config import RetryConfig
        >>> config = RetryConfig()
        >>> config.attempts
        3
        >>> config.delay
        0.1
        >>> config.max_backoff is None
        True

        ```
    """

    attempts: int = DEFAULT_ATTEMPTS
    delay: float = DEFAULT_DELAY
    max_delay: float = DEFAULT_MAX_DELAY
    delay_type: DelayStrategy = backoff_delay
    retry_if: Callable[[Exception], bool] = field(default_factory=_always_retry_predicate)
    on_retry: Callable[[int, float, Exception], None] = field(default_factory=_no_op_callback)
    context: Context = field(default_factory=Context.background)
    clamp_max_delay: bool = False
    max_backoff: int | None = None


def build_config(*options: Option) -> RetryConfig:
    """Build a configuration from the defaults and option-appliers.

    Options are applied in order, so a later option overrides an
    earlier one setting the same field.

    Args:
        *options: Option-appliers created by ``aretry.options``.

    Returns:
        A fresh, fully populated configuration.

    Example:
        ```pycon
        >>> from aretry.config import build_config
        >>> from aretry.options import attempts, delay
        >>> config = build_config(attempts(5), delay(0.2), attempts(7))
        >>> config.attempts, config.delay
        (7, 0.2)

        ```
    """
    config = RetryConfig()
    for option in options:
        option(config)
    return config
