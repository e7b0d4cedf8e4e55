r"""Decision logic applied after a failed attempt.

This module provides the RetryDecider class that decides whether the
retry loop keeps going once the task raised.
"""

from __future__ import annotations

__all__ = ["Decision", "RetryDecider"]

import enum
import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

logger: logging.Logger = logging.getLogger(__name__)


class Decision(enum.Enum):
    """Outcome of evaluating a failed attempt."""

    RETRY = "retry"
    EXHAUSTED = "exhausted"
    REJECTED = "rejected"


class RetryDecider:
    """Decides whether a failed task should be retried.

    The retry predicate is consulted before the attempt limit, so an
    error rejected on the last allowed attempt ends in ``REJECTED`` and
    reaches the caller unchanged.

    Args:
        attempts: Maximum number of task invocations. Values <= 0 skip
            the limit check.
        retry_if: Predicate returning ``True`` to keep retrying.

    Example:
        ```pycon
        >>> from aretry.retry.decider import Decision, RetryDecider
        >>> decider = RetryDecider(attempts=2, retry_if=lambda error: True)
        >>> decider.decide(ValueError("boom"), made=1)
        <Decision.RETRY: 'retry'>
        >>> decider.decide(ValueError("boom"), made=2)
        <Decision.EXHAUSTED: 'exhausted'>

        ```
    """

    def __init__(self, attempts: int, retry_if: Callable[[Exception], bool]) -> None:
        self.attempts = attempts
        self.retry_if = retry_if

    def decide(self, error: Exception, made: int) -> Decision:
        """Evaluate the error raised by the latest attempt.

        Args:
            error: The exception raised by the task.
            made: Number of task invocations made so far, including the
                one that raised ``error``.

        Returns:
            The decision for the retry loop.
        """
        if not self.retry_if(error):
            logger.debug(f"retry_if rejected {type(error).__name__} after {made} attempt(s)")
            return Decision.REJECTED
        if self.attempts > 0 and made >= self.attempts:
            logger.debug(f"All {self.attempts} attempts used")
            return Decision.EXHAUSTED
        return Decision.RETRY
