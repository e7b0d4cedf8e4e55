r"""Exponential delay strategy with overflow protection."""

from __future__ import annotations

__all__ = ["backoff_delay", "max_backoff_exponent"]

import logging
from typing import TYPE_CHECKING

from aretry.defaults import DEFAULT_DELAY, MAX_DURATION_BITS

if TYPE_CHECKING:
    from aretry.config import RetryConfig

logger: logging.Logger = logging.getLogger(__name__)

NANOSECONDS_PER_SECOND = 1_000_000_000


def max_backoff_exponent(delay: float) -> int:
    """Compute the largest doubling exponent that keeps ``delay`` in range.

    Durations are bounded by a signed 64-bit nanosecond count, so the
    exponent is ``63`` minus the number of bits needed to represent the
    delay in nanoseconds.

    Args:
        delay: The base delay in seconds. Non-positive values are
            replaced by the 0.1s default.

    Returns:
        The exponent cap, never negative.

    Example:
        ```pycon
        >>> from aretry.backoff.exponential import max_backoff_exponent
        >>> max_backoff_exponent(0.1)  # 100_000_000ns needs 27 bits
        36
        >>> max_backoff_exponent(0.0) == max_backoff_exponent(0.1)
        True

        ```
    """
    if delay <= 0:
        delay = DEFAULT_DELAY
    nanoseconds = max(round(delay * NANOSECONDS_PER_SECOND), 1)
    return max(MAX_DURATION_BITS - nanoseconds.bit_length(), 0)


def backoff_delay(attempt: int, error: BaseException, config: RetryConfig) -> float:  # noqa: ARG001
    """Double the base delay on every attempt.

    Calculates delay as: delay * (2 ** min(attempt, cap)), where ``cap``
    comes from ``max_backoff_exponent`` and is cached on
    ``config.max_backoff`` the first time it is needed.

    When ``config.clamp_max_delay`` is set and ``config.max_delay`` is
    positive, the result is also capped at ``config.max_delay``.

    Args:
        attempt: Number of failed attempts so far (1-indexed).
        error: The error raised by the last attempt (unused).
        config: The running configuration.

    Returns:
        The wait in seconds.

    Example:
        ```pycon
        >>> from aretry.backoff import backoff_delay
        >>> from aretry.config import RetryConfig
        >>> config = RetryConfig(delay=0.1)
        >>> backoff_delay(1, ValueError(), config)
        0.2
        >>> backoff_delay(3, ValueError(), config)
        0.8
        >>> config.max_backoff
        36

        ```
    """
    delay = config.delay
    if delay <= 0:
        delay = DEFAULT_DELAY
    if config.max_backoff is None:
        config.max_backoff = max_backoff_exponent(delay)
        logger.debug(f"Exponential backoff exponent capped at {config.max_backoff}")
    wait = delay * (2 ** min(attempt, config.max_backoff))
    if config.clamp_max_delay and 0 < config.max_delay < wait:
        wait = config.max_delay
    return wait
