"""Manual (virtual clock) scheduler adapter for deterministic play.

Time only moves when ``advance`` is called. Useful for:
- Unit and API tests without real sleeps
- Scripted drivers and replays
"""

import heapq
import itertools
import logging
from collections.abc import Callable
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)


@dataclass(order=True)
class _ScheduledCall:
    """Entry in the virtual timeline, ordered by (due, seq)."""

    due: float
    seq: int
    callback: Callable[[], None] = field(compare=False)
    interval: float | None = field(default=None, compare=False)
    cancelled: bool = field(default=False, compare=False)

    def cancel(self) -> None:
        self.cancelled = True


class ManualHandle:
    """Cancel handle for a call on a ManualScheduler."""

    def __init__(self, entry: _ScheduledCall) -> None:
        self._entry = entry

    @property
    def cancelled(self) -> bool:
        return self._entry.cancelled

    def cancel(self) -> None:
        """Cancel the call (and any recurrence)."""
        self._entry.cancel()


class ManualScheduler:
    """Scheduler implementation driven by an explicit virtual clock.

    Callbacks due at the same instant run in the order they were scheduled.
    A recurring call keeps its handle across runs, so cancelling it stops
    all future runs.
    """

    def __init__(self) -> None:
        self._now = 0.0
        self._queue: list[_ScheduledCall] = []
        self._seq = itertools.count()

    @property
    def now(self) -> float:
        """Current virtual time in seconds."""
        return self._now

    @property
    def pending_count(self) -> int:
        """Number of scheduled, not-cancelled calls."""
        return sum(1 for entry in self._queue if not entry.cancelled)

    def call_later(self, delay: float, callback: Callable[[], None]) -> ManualHandle:
        """Run callback once after delay virtual seconds."""
        if delay < 0:
            raise ValueError(f"Delay must be non-negative, got {delay}")
        entry = _ScheduledCall(self._now + delay, next(self._seq), callback)
        heapq.heappush(self._queue, entry)
        return ManualHandle(entry)

    def call_every(self, interval: float, callback: Callable[[], None]) -> ManualHandle:
        """Run callback every interval virtual seconds until cancelled."""
        if interval <= 0:
            raise ValueError(f"Interval must be positive, got {interval}")
        entry = _ScheduledCall(self._now + interval, next(self._seq), callback, interval)
        heapq.heappush(self._queue, entry)
        return ManualHandle(entry)

    def advance(self, seconds: float) -> int:
        """Move the clock forward, running every callback that falls due.

        Args:
            seconds: Virtual seconds to advance (>= 0)

        Returns:
            Number of callbacks run
        """
        if seconds < 0:
            raise ValueError(f"Cannot move clock backwards by {seconds}")

        target = self._now + seconds
        ran = 0
        while self._queue and self._queue[0].due <= target:
            entry = heapq.heappop(self._queue)
            if entry.cancelled:
                continue
            self._now = entry.due
            if entry.interval is not None:
                # Same entry object so the caller's handle still cancels it
                entry.due += entry.interval
                entry.seq = next(self._seq)
                heapq.heappush(self._queue, entry)
            entry.callback()
            ran += 1

        self._now = target
        return ran

    def run_pending(self) -> int:
        """Advance until no one-shot calls remain (recurring calls keep going).

        Returns:
            Number of callbacks run
        """
        ran = 0
        while True:
            one_shots = [e for e in self._queue if not e.cancelled and e.interval is None]
            if not one_shots:
                return ran
            ran += self.advance(min(e.due for e in one_shots) - self._now)
