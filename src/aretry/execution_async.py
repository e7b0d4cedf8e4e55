r"""Retry a coroutine function until it succeeds.

This module provides the ``execute_async`` entry point, the asyncio
counterpart of ``aretry.execution.execute``.
"""

from __future__ import annotations

__all__ = ["execute_async"]

from typing import TYPE_CHECKING, TypeVar

from aretry.config import build_config
from aretry.retry.executor_async import AsyncRetryExecutor

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from aretry.options import Option

T = TypeVar("T")


async def execute_async(task: Callable[[], Awaitable[T]], *options: Option) -> T:
    """Await ``task()`` until it succeeds, with automatic retry logic.

    Args:
        task: Zero-argument coroutine function. Raising an
            ``Exception`` marks the attempt as failed.
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
        >>> import asyncio
        >>> from aretry import execute_async
        >>> from aretry.options import attempts
        >>> async def fetch():
        ...     return {"status": "ok"}
        ...
        >>> asyncio.run(execute_async(fetch, attempts(2)))
        {'status': 'ok'}

        ```
    """
    return await AsyncRetryExecutor(build_config(*options)).execute(task)
