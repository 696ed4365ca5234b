"""Scheduler adapter backed by the running asyncio event loop."""

import asyncio
import logging
from collections.abc import Callable

logger = logging.getLogger(__name__)


class RepeatingHandle:
    """Self-rescheduling timer on an event loop.

    Each run schedules the next one, so a cancelled handle stops after at most
    the call that is already executing.
    """

    def __init__(
        self,
        loop: asyncio.AbstractEventLoop,
        interval: float,
        callback: Callable[[], None],
    ) -> None:
        self._loop = loop
        self._interval = interval
        self._callback = callback
        self._handle: asyncio.TimerHandle | None = None
        self._cancelled = False
        self._schedule()

    @property
    def cancelled(self) -> bool:
        """Whether the recurrence has been stopped."""
        return self._cancelled

    def _schedule(self) -> None:
        self._handle = self._loop.call_later(self._interval, self._run)

    def _run(self) -> None:
        if self._cancelled:
            return
        # Reschedule first so a raising callback does not kill the timer
        self._schedule()
        self._callback()

    def cancel(self) -> None:
        """Stop the recurrence."""
        self._cancelled = True
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None


class AsyncioScheduler:
    """Scheduler implementation using ``loop.call_later``.

    Must be used from code running inside the event loop (e.g. FastAPI
    ``async def`` routes). The loop is resolved per call, so one scheduler
    instance can be shared by every game on that loop.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop

    def _get_loop(self) -> asyncio.AbstractEventLoop:
        if self._loop is not None:
            return self._loop
        return asyncio.get_running_loop()

    def call_later(self, delay: float, callback: Callable[[], None]) -> asyncio.TimerHandle:
        """Run callback once after delay seconds."""
        return self._get_loop().call_later(delay, callback)

    def call_every(self, interval: float, callback: Callable[[], None]) -> RepeatingHandle:
        """Run callback every interval seconds until cancelled."""
        if interval <= 0:
            raise ValueError(f"Interval must be positive, got {interval}")
        return RepeatingHandle(self._get_loop(), interval, callback)
