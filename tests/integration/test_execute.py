r"""Integration tests for the ``execute`` entry point."""

from __future__ import annotations

import logging
import threading
import time
from unittest.mock import Mock

import pytest

from aretry import (
    AttemptsExhaustedError,
    CancelledError,
    Context,
    DeadlineExceededError,
    constant_delay,
    execute,
    options,
)


def make_task(failures: int) -> Mock:
    """Create a closure-style task failing ``failures`` times."""
    remaining = [failures]

    def task() -> None:
        if remaining[0] == 0:
            return None
        remaining[0] -= 1
        msg = "random errors"
        raise RuntimeError(msg)

    return Mock(wraps=task)


def test_execute_end_to_end_constant_delay() -> None:
    """Test ten failures then success with a constant 200ms delay."""
    progress = Mock()
    task = make_task(10)
    with Context.with_timeout(30) as ctx:
        start = time.monotonic()
        result = execute(
            task,
            options.context(ctx),
            options.attempts(20),
            options.on_retry(progress),
            options.delay(0.2),
            options.max_delay(5.0),
            options.delay_type(constant_delay),
        )
        elapsed = time.monotonic() - start
    assert result is None
    assert task.call_count == 11
    assert progress.call_count == 10
    assert [c.args[0] for c in progress.call_args_list] == list(range(1, 11))
    assert all(c.args[1] == 0.2 for c in progress.call_args_list)
    assert all(isinstance(c.args[2], RuntimeError) for c in progress.call_args_list)
    assert 1.9 <= elapsed < 10.0


def test_execute_defaults() -> None:
    """Test the defaults allow three attempts with exponential waits."""
    progress = Mock()
    task = Mock(side_effect=OSError("down"))
    with pytest.raises(AttemptsExhaustedError):
        execute(task, options.on_retry(progress))
    assert task.call_count == 3
    assert [c.args[1] for c in progress.call_args_list] == [0.2, 0.4]


def test_execute_capture_last_error_via_callback() -> None:
    """Test the last task error can be captured through on_retry."""
    errors = []
    task = Mock(side_effect=[ValueError("a"), ValueError("b"), ValueError("c")])
    with pytest.raises(AttemptsExhaustedError):
        execute(
            task,
            options.attempts(3),
            options.delay(0.001),
            options.delay_type(constant_delay),
            options.on_retry(lambda attempt, wait, error: errors.append(str(error))),
        )
    assert errors == ["a", "b"]


def test_execute_unlimited_attempts_until_deadline() -> None:
    """Test attempts(0) retries until the deadline fires."""
    task = Mock(side_effect=RuntimeError("boom"))
    start = time.monotonic()
    with pytest.raises(DeadlineExceededError):
        execute(
            task,
            options.attempts(0),
            options.delay(0.01),
            options.delay_type(constant_delay),
            options.context(Context.with_timeout(0.3)),
        )
    assert 0.25 <= time.monotonic() - start < 3.0


def test_execute_cancel_from_another_thread() -> None:
    """Test an external cancel preempts a long wait."""
    ctx = Context()
    timer = threading.Timer(0.05, ctx.cancel, args=("operator abort",))
    timer.start()
    try:
        start = time.monotonic()
        with pytest.raises(CancelledError, match=r"operator abort"):
            execute(
                Mock(side_effect=RuntimeError("boom")),
                options.attempts(0),
                options.delay(60.0),
                options.context(ctx),
            )
        assert time.monotonic() - start < 5
    finally:
        timer.cancel()


def test_execute_pre_cancelled_never_invokes_task() -> None:
    ctx = Context()
    ctx.cancel()
    task = Mock(return_value="ok")
    with pytest.raises(CancelledError):
        execute(task, options.context(ctx))
    task.assert_not_called()


def test_execute_clamped_backoff() -> None:
    """Test clamp_max_delay caps the exponential waits."""
    progress = Mock()
    with pytest.raises(AttemptsExhaustedError):
        execute(
            Mock(side_effect=RuntimeError("boom")),
            options.attempts(4),
            options.delay(0.01),
            options.max_delay(0.03),
            options.clamp_max_delay(),
            options.on_retry(progress),
        )
    assert [c.args[1] for c in progress.call_args_list] == [0.02, 0.03, 0.03]


def test_execute_logs_retries(caplog: pytest.LogCaptureFixture) -> None:
    """Test failed attempts are traced at debug level."""
    with caplog.at_level(logging.DEBUG, logger="aretry"):
        with pytest.raises(AttemptsExhaustedError):
            execute(
                Mock(side_effect=RuntimeError("boom")),
                options.attempts(2),
                options.delay(0.001),
                options.delay_type(constant_delay),
            )
    assert "Attempt 1 failed with RuntimeError" in caplog.text
    assert "All 2 attempts used" in caplog.text
