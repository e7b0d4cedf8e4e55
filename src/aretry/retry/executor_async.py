r"""Asynchronous retry executor.

This module provides the AsyncRetryExecutor class that drives a
coroutine function through the retry loop.
"""

from __future__ import annotations

__all__ = ["AsyncRetryExecutor"]

import logging
from typing import TYPE_CHECKING, TypeVar

from aretry.retry.decider import Decision, RetryDecider
from aretry.retry.executor_core import exhausted_error, prepare_retry

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from aretry.config import RetryConfig

logger: logging.Logger = logging.getLogger(__name__)

T = TypeVar("T")


class AsyncRetryExecutor:
    """Executes a coroutine function with automatic retry logic.

    Same loop as ``RetryExecutor``, except that every wait races
    ``asyncio`` timers against the cancellation context, letting other
    tasks run in the meantime. The ``on_retry`` callback stays
    synchronous.

    Attributes:
        config: The assembled retry configuration.
        decider: Logic deciding whether a failed attempt is retried.

    Example:
        ```pycon
        >>> import asyncio
        >>> from aretry.config import build_config
        >>> from aretry.retry import AsyncRetryExecutor
        >>> async def task():
        ...     return 42
        ...
        >>> asyncio.run(AsyncRetryExecutor(build_config()).execute(task))
        42

        ```
    """

    def __init__(self, config: RetryConfig) -> None:
        self.config = config
        self.decider: RetryDecider = RetryDecider(config.attempts, config.retry_if)

    async def execute(self, task: Callable[[], Awaitable[T]]) -> T:
        """Await ``task()`` until it succeeds or the loop terminates.

        Args:
            task: Zero-argument coroutine function. Raising an
                ``Exception`` marks the attempt as failed.

        Returns:
            The value returned by the first successful attempt.

        Raises:
            AttemptsExhaustedError: If a positive attempt limit is
                reached without success.
            CancelledError: If the context is resolved before the first
                attempt or while waiting.
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
                return await task()
            except Exception as exc:  # noqa: BLE001
                error = exc

            decision = self.decider.decide(error, made)
            if decision is Decision.REJECTED:
                raise error
            if decision is Decision.EXHAUSTED:
                raise exhausted_error(self.config) from None

            wait = prepare_retry(self.config, made, error)
            if await context.wait_async(wait):
                logger.debug(f"Context resolved while waiting after attempt {made}")
                raise context.cancellation_error()
