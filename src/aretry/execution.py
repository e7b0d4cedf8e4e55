r"""Retry a callable until it succeeds.

This module provides the ``execute`` entry point, which builds a fresh
configuration from option-appliers and runs the synchronous retry loop.
"""

from __future__ import annotations

__all__ = ["execute"]

from typing import TYPE_CHECKING, TypeVar

from aretry.config import build_config
from aretry.retry.executor import RetryExecutor

if TYPE_CHECKING:
    from collections.abc import Callable

    from aretry.options import Option

T = TypeVar("T")


def execute(task: Callable[[], T], *options: Option) -> T:
    """Call ``task`` until it succeeds, with automatic retry logic.

    The task is called at most ``attempts`` times (3 by default, no
    limit if <= 0). Between attempts the loop waits for the delay given
    by the configured strategy (exponential backoff from 0.1s by
    default), unless the cancellation context resolves first.

    Args:
        task: Zero-argument callable. Raising an ``Exception`` marks the
            attempt as failed.
        *options: Option-appliers from ``aretry.options``, applied in
            order over the defaults.

    Returns:
        The value returned by the first successful attempt.

    Raises:
        AttemptsExhaustedError: If a positive attempt limit is reached
            without success.
        CancelledError: If the cancellation context resolves before the
            first attempt or during a wait.
        Exception: The task's own exception when ``retry_if`` rejects it.

    Example:
        ```pycon
        >>> from aretry import execute
        >>> from aretry.backoff import constant_delay
        >>> from aretry.options import attempts, delay, delay_type
        >>> calls = []
        >>> def flaky():
        ...     calls.append(1)
        ...     if len(calls) < 3:
        ...         raise ConnectionError("not yet")
        ...     return "ok"
        ...
        >>> execute(flaky, attempts(5), delay(0.001), delay_type(constant_delay))
        'ok'
        >>> len(calls)
        3

        ```
    """
    return RetryExecutor(build_config(*options)).execute(task)
