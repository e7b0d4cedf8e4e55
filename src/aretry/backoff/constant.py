r"""Constant delay strategy."""

from __future__ import annotations

__all__ = ["constant_delay"]

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from aretry.config import RetryConfig


def constant_delay(attempt: int, error: BaseException, config: RetryConfig) -> float:  # noqa: ARG001
    """Return the configured base delay for every attempt.

    Args:
        attempt: Number of failed attempts so far (unused).
        error: The error raised by the last attempt (unused).
        config: The running configuration.

    Returns:
        ``config.delay``.

    Example:
        ```pycon
        >>> from aretry.backoff import constant_delay
        >>> from aretry.config import RetryConfig
        >>> config = RetryConfig(delay=0.25)
        >>> constant_delay(1, ValueError(), config)
        0.25
        >>> constant_delay(10, ValueError(), config)
        0.25

        ```
    """
    return config.delay
