r"""Signature shared by delay strategies."""

from __future__ import annotations

__all__ = ["DelayStrategy"]

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from aretry.config import RetryConfig


class DelayStrategy(Protocol):
    """Callable computing how long to wait before the next attempt.

    Any plain function with this signature can be passed to
    ``aretry.options.delay_type``.
    """

    def __call__(self, attempt: int, error: BaseException, config: RetryConfig) -> float:
        """Calculate the wait before the next attempt.

        Args:
            attempt: Number of failed attempts so far (1-indexed).
            error: The error raised by the last attempt.
            config: The configuration of the running retry loop.

        Returns:
            The wait in seconds.
        """
        ...
