from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import Mock

import pytest

from aretry import Context

if TYPE_CHECKING:
    from collections.abc import Callable


@pytest.fixture
def mock_callback() -> Mock:
    """Create a mock ``on_retry`` callback for testing."""
    return Mock()


@pytest.fixture
def cancelled_context() -> Context:
    """Create a context that is already cancelled."""
    ctx = Context()
    ctx.cancel("cancelled by test")
    return ctx


@pytest.fixture
def flaky_task() -> Callable[[int], Mock]:
    """Create tasks failing ``failures`` times before returning "ok".

    The returned task is a Mock, so ``call_count`` gives the number of
    invocations.
    """

    def factory(failures: int) -> Mock:
        return Mock(side_effect=[RuntimeError(f"failure {i}") for i in range(failures)] + ["ok"])

    return factory
