r"""Synchronous retry executor.

This module provides the RetryExecutor class that drives a task through
the retry loop on the caller's thread.
"""

from __future__ import annotations

__all__ = ["RetryExecutor"]

import logging
from typing import TYPE_CHECKING, TypeVar

from aretry.retry.decider import Decision, RetryDecider
from aretry.retry.executor_core import exhausted_error, prepare_retry

if TYPE_CHECKING:
    from collections.abc import Callable

    from aretry.config import RetryConfig

logger: logging.Logger = logging.getLogger(__name__)

T = TypeVar("T")


class RetryExecutor:
    """Executes a task with automatic retry logic.

    Invocations never overlap: the executor calls the task, evaluates
    the outcome, then either returns, raises, or waits before calling it
    again. The cancellation context is observed before the first
    attempt and during every wait. A running task is never interrupted.

    Attributes:
        config: The assembled retry configuration.
        decider: Logic deciding whether a failed attempt is retried.

    Example:
        ```pycon
        >>> from aretry.config import build_config
        >>> from aretry.options import attempts, delay
        >>> from aretry.retry import RetryExecutor
        >>> executor = RetryExecutor(build_config(attempts(3), delay(0.001)))
        >>> executor.execute(lambda: "done")
        'done'

        ```
    """

    def __init__(self, config: RetryConfig) -> None:
        self.config = config
        self.decider: RetryDecider = RetryDecider(config.attempts, config.retry_if)

    def execute(self, task: Callable[[], T]) -> T:
        """Call ``task`` until it succeeds or the loop terminates.

        Args:
            task: Zero-argument callable. Raising an ``Exception`` marks
                the attempt as failed.

        Returns:
            The value returned by the first successful attempt.

        Raises:
            AttemptsExhaustedError: If a positive attempt limit is
                reached without success.
            CancelledError: If the context is resolved before the first
                attempt or while waiting. ``DeadlineExceededError`` when
                its deadline elapsed.
            Exception: The task's own exception, unchanged, when the
                ``retry_if`` predicate rejects it.
        """
        context = self.config.context
        if context.done():
            logger.debug("Context resolved before the first attempt")
            raise context.cancellation_error()

        made = 0
        while True:
            made += 1
            try:
                return task()
            except Exception as exc:  # noqa: BLE001
                error = exc

            decision = self.decider.decide(error, made)
            if decision is Decision.REJECTED:
                raise error
            if decision is Decision.EXHAUSTED:
                raise exhausted_error(self.config) from None

            wait = prepare_retry(self.config, made, error)
            if context.wait(wait):
                logger.debug(f"Context resolved while waiting after attempt {made}")
                raise context.cancellation_error()
