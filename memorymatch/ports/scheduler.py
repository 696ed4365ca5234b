"""Port interface for scheduling delayed and recurring callbacks."""

from collections.abc import Callable
from typing import Protocol, runtime_checkable


@runtime_checkable
class CancelHandle(Protocol):
    """Handle to a scheduled callback."""

    def cancel(self) -> None:
        """Cancel the callback. Safe to call more than once, or after it ran."""
        ...


@runtime_checkable
class Scheduler(Protocol):
    """Port for time-based callbacks.

    Abstracts the event loop driving a game (asyncio in production, a
    virtual clock in tests). All callbacks run on the scheduler's single
    thread; implementations never run two callbacks concurrently.
    """

    def call_later(self, delay: float, callback: Callable[[], None]) -> CancelHandle:
        """Run callback once after delay seconds.

        Args:
            delay: Seconds to wait (>= 0)
            callback: Zero-argument function to run

        Returns:
            Handle that cancels the pending call
        """
        ...

    def call_every(self, interval: float, callback: Callable[[], None]) -> CancelHandle:
        """Run callback every interval seconds until cancelled.

        The first call happens one interval from now.

        Args:
            interval: Period in seconds (> 0)
            callback: Zero-argument function to run

        Returns:
            Handle that stops the recurrence
        """
        ...
