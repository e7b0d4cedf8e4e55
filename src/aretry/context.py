r"""Cancellation handle observed by the retry loop.

A ``Context`` is resolved at most once, either explicitly with
``cancel`` or implicitly when its deadline passes. The retry loop only
looks at it before the first attempt and while waiting between
attempts; a running task is never interrupted.
"""

from __future__ import annotations

__all__ = ["Context"]

import asyncio
import functools
import logging
import threading
import time
from typing import TYPE_CHECKING, Any

from aretry.exceptions import CancelledError, DeadlineExceededError

if TYPE_CHECKING:
    from collections.abc import Callable
    from types import TracebackType

    from aretry.exceptions import RetryError

logger: logging.Logger = logging.getLogger(__name__)


def _set_result_unless_done(future: asyncio.Future) -> None:
    if not future.done():
        future.set_result(None)


def _wake_threadsafe(loop: asyncio.AbstractEventLoop, future: asyncio.Future) -> None:
    try:
        loop.call_soon_threadsafe(_set_result_unless_done, future)
    except RuntimeError:
        # The waiting loop already closed, nobody is left to wake
        logger.debug("Skipping wake-up of a closed event loop")


class Context:
    """External cancellation signal with an optional deadline.

    A context created without a deadline never resolves on its own, which
    makes ``Context()`` the "never cancels" default. Deadlines are
    expressed on the ``time.monotonic`` clock and are observed lazily, so
    no helper thread or timer is ever started.

    Args:
        deadline: Optional ``time.monotonic()`` value after which the
            context resolves with ``DeadlineExceededError``.

    Example:
        ```pycon
        >>> from aretry.context import Context
        >>> ctx = Context()
        >>> ctx.done()
        False
        >>> ctx.cancel("shutting down")
        >>> ctx.done()
        True
        >>> ctx.error
        CancelledError('context cancelled: shutting down')

        ```
    """

    def __init__(self, deadline: float | None = None) -> None:
        self._deadline = deadline
        self._event = threading.Event()
        self._lock = threading.Lock()
        self._error: RetryError | None = None
        self._listeners: list[Callable[[], None]] = []

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(deadline={self._deadline}, done={self.done()})"

    def __enter__(self) -> Context:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.cancel()

    @classmethod
    def background(cls) -> Context:
        """Return a context that never resolves on its own."""
        return cls()

    @classmethod
    def with_deadline(cls, deadline: float) -> Context:
        """Return a context resolving at ``deadline`` (``time.monotonic`` clock)."""
        return cls(deadline=deadline)

    @classmethod
    def with_timeout(cls, timeout: float) -> Context:
        """Return a context resolving ``timeout`` seconds from now.

        Args:
            timeout: Number of seconds before the deadline. Values <= 0
                give a context that is already resolved.

        Returns:
            The new context.
        """
        return cls(deadline=time.monotonic() + timeout)

    @property
    def deadline(self) -> float | None:
        return self._deadline

    @property
    def error(self) -> RetryError | None:
        """The recorded cancellation error, or ``None`` while unresolved."""
        self._check_deadline()
        return self._error

    def cancellation_error(self) -> RetryError | None:
        """Return a new copy of the recorded cancellation error.

        Each caller gets its own instance, so raising it never mutates
        the error kept by the context.

        Returns:
            A fresh ``CancelledError`` or ``DeadlineExceededError``, or
            ``None`` while unresolved.
        """
        error = self.error
        if isinstance(error, DeadlineExceededError):
            return DeadlineExceededError(error.deadline)
        if isinstance(error, CancelledError):
            return CancelledError(error.reason)
        return error

    def cancel(self, reason: Any = None) -> None:
        """Resolve the context with ``CancelledError(reason)``.

        Only the first resolution is recorded; later calls are ignored.
        """
        self._resolve(CancelledError(reason))

    def done(self) -> bool:
        """Indicate whether the context is resolved."""
        self._check_deadline()
        return self._error is not None

    def remaining(self) -> float | None:
        """Return the seconds left before the deadline, or ``None`` without one."""
        if self._deadline is None:
            return None
        return max(self._deadline - time.monotonic(), 0.0)

    def wait(self, timeout: float) -> bool:
        """Block until the context resolves or ``timeout`` seconds elapse.

        Args:
            timeout: Maximum number of seconds to block.

        Returns:
            ``True`` if the context resolved first, ``False`` if the
            timeout elapsed first.
        """
        if self.done():
            return True
        remaining = self.remaining()
        deadline_first = remaining is not None and remaining <= timeout
        bound = remaining if deadline_first else timeout
        if self._event.wait(min(max(bound, 0.0), threading.TIMEOUT_MAX)):
            return True
        if deadline_first:
            self._resolve(DeadlineExceededError(self._deadline))
            return True
        return False

    async def wait_async(self, timeout: float) -> bool:
        """Asynchronous counterpart of ``wait``.

        The cancellation side is a future of the running loop that
        ``cancel`` wakes thread-safely. Whichever side loses the race is
        cancelled and unregistered before returning.

        Args:
            timeout: Maximum number of seconds to wait.

        Returns:
            ``True`` if the context resolved first, ``False`` if the
            timeout elapsed first.
        """
        if self.done():
            return True
        loop = asyncio.get_running_loop()
        waiter = loop.create_future()

        wake = functools.partial(_wake_threadsafe, loop, waiter)

        if not self._add_listener(wake):
            return True
        remaining = self.remaining()
        deadline_first = remaining is not None and remaining <= timeout
        bound = remaining if deadline_first else timeout
        try:
            await asyncio.wait_for(waiter, max(bound, 0.0))
        except asyncio.TimeoutError:
            if deadline_first:
                self._resolve(DeadlineExceededError(self._deadline))
                return True
            return self.done()
        finally:
            self._remove_listener(wake)
        return True

    def _check_deadline(self) -> None:
        if (
            self._deadline is not None
            and self._error is None
            and time.monotonic() >= self._deadline
        ):
            self._resolve(DeadlineExceededError(self._deadline))

    def _resolve(self, error: RetryError) -> None:
        with self._lock:
            if self._error is not None:
                return
            self._error = error
            listeners, self._listeners = self._listeners, []
        logger.debug(f"Context resolved: {error}")
        self._event.set()
        for listener in listeners:
            listener()

    def _add_listener(self, listener: Callable[[], None]) -> bool:
        with self._lock:
            if self._error is not None:
                return False
            self._listeners.append(listener)
            return True

    def _remove_listener(self, listener: Callable[[], None]) -> None:
        with self._lock:
            if listener in self._listeners:
                self._listeners.remove(listener)
