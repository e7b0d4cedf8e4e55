r"""Delay strategies computing the wait between attempts.

Strategies are plain functions of ``(attempt, error, config)`` so they
can be passed around as values, e.g. ``delay_type(constant_delay)``.
"""

from __future__ import annotations

__all__ = [
    "DelayStrategy",
    "backoff_delay",
    "constant_delay",
    "max_backoff_exponent",
]

from aretry.backoff.base import DelayStrategy
from aretry.backoff.constant import constant_delay
from aretry.backoff.exponential import backoff_delay, max_backoff_exponent
