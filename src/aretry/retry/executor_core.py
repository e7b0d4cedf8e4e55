r"""Shared core logic for retry executors.

This module provides helpers used by both the synchronous and the
asynchronous retry executors.
"""

from __future__ import annotations

__all__ = ["exhausted_error", "prepare_retry"]

import logging
from typing import TYPE_CHECKING

from aretry.exceptions import AttemptsExhaustedError

if TYPE_CHECKING:
    from aretry.config import RetryConfig

logger: logging.Logger = logging.getLogger(__name__)


def prepare_retry(config: RetryConfig, attempt: int, error: Exception) -> float:
    """Compute the next wait and report it to the ``on_retry`` callback.

    Args:
        config: The running configuration.
        attempt: Number of failed attempts so far (1-indexed).
        error: The exception raised by the last attempt.

    Returns:
        The wait in seconds before the next attempt.
    """
    wait = config.delay_type(attempt, error, config)
    logger.debug(f"Attempt {attempt} failed with {type(error).__name__}, waiting {wait:.3f}s")
    config.on_retry(attempt, wait, error)
    return wait


def exhausted_error(config: RetryConfig) -> AttemptsExhaustedError:
    """Create the error raised once the attempt limit is reached."""
    return AttemptsExhaustedError(attempts=config.attempts)
