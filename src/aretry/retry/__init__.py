r"""Retry package implementing the retry control loop.

Public API:
    - RetryDecider: Logic for deciding whether to retry
    - Decision: Outcome of a RetryDecider evaluation
    - RetryExecutor: Synchronous retry executor
    - AsyncRetryExecutor: Asynchronous retry executor
"""

from __future__ import annotations

__all__ = [
    "AsyncRetryExecutor",
    "Decision",
    "RetryDecider",
    "RetryExecutor",
]

from aretry.retry.decider import Decision, RetryDecider
from aretry.retry.executor import RetryExecutor
from aretry.retry.executor_async import AsyncRetryExecutor
