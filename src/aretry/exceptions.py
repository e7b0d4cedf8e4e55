r"""Exceptions raised by the retry loop.

The task's own exceptions are never wrapped: a rejected error is
re-raised as-is. The classes below only describe the terminal states
owned by the library itself.
"""

from __future__ import annotations

__all__ = [
    "AttemptsExhaustedError",
    "CancelledError",
    "DeadlineExceededError",
    "RetryError",
]

from typing import Any


class RetryError(Exception):
    """Base class for errors raised by ``aretry``."""


class AttemptsExhaustedError(RetryError):
    """Raised when a positive attempt limit is reached without success.

    The last task error is deliberately not attached. Capture it with
    an ``on_retry`` callback if it is needed.

    Args:
        attempts: The configured attempt limit.

    Example:
        ```pycon
        >>> from aretry.exceptions import AttemptsExhaustedError
        >>> exc = AttemptsExhaustedError(attempts=3)
        >>> str(exc)
        'finished all attempts'
        >>> exc.attempts
        3

        ```
    """

    def __init__(self, attempts: int | None = None) -> None:
        super().__init__("finished all attempts")
        self.attempts = attempts


class CancelledError(RetryError):
    """Raised when the cancellation context fires before success.

    Args:
        reason: Optional reason given to ``Context.cancel``.
    """

    def __init__(self, reason: Any = None) -> None:
        message = "context cancelled" if reason is None else f"context cancelled: {reason}"
        super().__init__(message)
        self.reason = reason


class DeadlineExceededError(CancelledError):
    """Raised when the cancellation context's deadline elapsed."""

    def __init__(self, deadline: float | None = None) -> None:
        RetryError.__init__(self, "context deadline exceeded")
        self.reason = None
        self.deadline = deadline
