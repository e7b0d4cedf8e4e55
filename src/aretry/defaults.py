r"""Default values shared by the configuration and the delay strategies."""

from __future__ import annotations

__all__ = ["DEFAULT_ATTEMPTS", "DEFAULT_DELAY", "DEFAULT_MAX_DELAY", "MAX_DURATION_BITS"]

# Default number of task invocations
# Values <= 0 mean "retry until success or cancellation"
DEFAULT_ATTEMPTS = 3

# Default base delay in seconds between attempts
# Also substituted for any non-positive delay
DEFAULT_DELAY = 0.1

# Default maximum delay in seconds
# 0.0 means no explicit cap beyond overflow protection
DEFAULT_MAX_DELAY = 0.0

# Delays must fit a signed 64-bit nanosecond count
MAX_DURATION_BITS = 63
