r"""Option constructors configuring the retry loop.

Each constructor returns an ``Option``: a function applied to a
``RetryConfig`` while it is being assembled. Inputs are normalized when
the option is constructed, never rejected.

Example:
    ```pycon
    >>> from aretry.config import build_config
    >>> from aretry.options import attempts, delay, delay_type
    >>> from aretry.backoff import constant_delay
    >>> config = build_config(attempts(5), delay(-1.0), delay_type(constant_delay))
    >>> config.attempts, config.delay
    (5, 0.1)

    ```
"""

from __future__ import annotations

__all__ = [
    "Option",
    "attempts",
    "clamp_max_delay",
    "context",
    "delay",
    "delay_type",
    "max_delay",
    "on_retry",
    "retry_if",
]

from collections.abc import Callable
from typing import TYPE_CHECKING

from aretry.backoff.exponential import backoff_delay
from aretry.context import Context
from aretry.defaults import DEFAULT_DELAY

if TYPE_CHECKING:
    from aretry.backoff.base import DelayStrategy
    from aretry.config import RetryConfig

Option = Callable[["RetryConfig"], None]


def attempts(number: int) -> Option:
    """Set the maximum number of task invocations.

    Args:
        number: The attempt limit. Values <= 0 retry until success,
            predicate rejection or cancellation.
    """

    def apply(config: RetryConfig) -> None:
        config.attempts = number

    return apply


def delay(seconds: float) -> Option:
    """Set the base delay between attempts.

    Args:
        seconds: The base delay. Non-positive values are replaced by the
            0.1s default.
    """
    if seconds <= 0:
        seconds = DEFAULT_DELAY

    def apply(config: RetryConfig) -> None:
        config.delay = seconds

    return apply


def max_delay(seconds: float) -> Option:
    """Set the maximum delay between attempts.

    Args:
        seconds: The maximum delay. Negative values are clamped to 0,
            meaning no explicit cap.
    """
    seconds = max(seconds, 0.0)

    def apply(config: RetryConfig) -> None:
        config.max_delay = seconds

    return apply


def clamp_max_delay(enabled: bool = True) -> Option:
    """Make ``backoff_delay`` honor ``max_delay`` as a hard ceiling."""

    def apply(config: RetryConfig) -> None:
        config.clamp_max_delay = enabled

    return apply


def on_retry(callback: Callable[[int, float, Exception], None] | None) -> Option:
    """Set the callback invoked after each failed attempt.

    The callback receives ``(attempt, wait, error)`` where ``attempt``
    counts failed attempts from 1 and ``wait`` is the upcoming delay in
    seconds. It runs on the caller's thread before the wait starts.

    Args:
        callback: The callback, or ``None`` for a no-op.
    """
    if callback is None:

        def callback(attempt: int, wait: float, error: Exception) -> None:  # noqa: ARG001
            pass

    def apply(config: RetryConfig) -> None:
        config.on_retry = callback

    return apply


def retry_if(predicate: Callable[[Exception], bool] | None) -> Option:
    """Set the predicate deciding whether an error is retried.

    Args:
        predicate: Returns ``True`` to keep retrying, ``False`` to stop
            and re-raise the error. ``None`` retries every error.
    """
    if predicate is None:

        def predicate(error: Exception) -> bool:  # noqa: ARG001
            return True

    def apply(config: RetryConfig) -> None:
        config.retry_if = predicate

    return apply


def context(ctx: Context | None) -> Option:
    """Set the cancellation context.

    Args:
        ctx: The context, or ``None`` for one that never cancels.
    """

    def apply(config: RetryConfig) -> None:
        config.context = ctx if ctx is not None else Context.background()

    return apply


def delay_type(strategy: DelayStrategy | None) -> Option:
    """Set the delay strategy.

    Args:
        strategy: The strategy, or ``None`` for ``backoff_delay``.
    """
    if strategy is None:
        strategy = backoff_delay

    def apply(config: RetryConfig) -> None:
        config.delay_type = strategy

    return apply
