r"""aretry - Retry a fallible unit of work until it succeeds.

The task is invoked repeatedly until it succeeds, a retry predicate
rejects its error, an attempt limit is reached, or an external
cancellation context fires. Behavior is tuned with composable options
applied over a default configuration.

Key Features:
    - Attempt limits, including "retry until success or cancellation"
    - Constant and exponential (overflow-safe) delay strategies
    - Custom retry predicates and ``on_retry`` progress callbacks
    - Cooperative cancellation with explicit cancel or deadlines
    - Synchronous and asyncio entry points

Example:
    ```pycon
    >>> from aretry import Context, execute, options
    >>> from aretry.backoff import constant_delay
    >>> with Context.with_timeout(30) as ctx:
    ...     result = execute(
    ...         lambda: "ok",
    ...         options.context(ctx),
    ...         options.attempts(20),
    ...         options.delay(0.2),
    ...         options.delay_type(constant_delay),
    ...     )
    ...
    >>> result
    'ok'

    ```
"""

from __future__ import annotations

__all__ = [
    "AttemptsExhaustedError",
    "CancelledError",
    "Context",
    "DeadlineExceededError",
    "RetryConfig",
    "RetryError",
    "__version__",
    "backoff_delay",
    "constant_delay",
    "execute",
    "execute_async",
    "options",
]

from importlib.metadata import PackageNotFoundError, version

from aretry import options
from aretry.backoff import backoff_delay, constant_delay
from aretry.config import RetryConfig
from aretry.context import Context
from aretry.exceptions import (
    AttemptsExhaustedError,
    CancelledError,
    DeadlineExceededError,
    RetryError,
)
from aretry.execution import execute
from aretry.execution_async import execute_async

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
