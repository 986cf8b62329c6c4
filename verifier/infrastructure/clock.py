"""Time source and schedulable delays for backoff and rate limiting."""

import asyncio
import time


class Clock:
    """
    Monotonic time source with an awaitable sleep.

    Components take a Clock instead of calling time/asyncio directly so tests
    can substitute a virtual clock and never wait on the wall clock.
    Times are in seconds.
    """

    def now(self) -> float:
        """Return the current monotonic time."""
        return time.monotonic()

    async def sleep(self, seconds: float) -> None:
        """Suspend the calling task. Cancellable like asyncio.sleep."""
        if seconds > 0:
            await asyncio.sleep(seconds)


class VirtualClock(Clock):
    """
    Clock whose time only moves when something sleeps or advance() is called.

    sleep() still yields to the event loop once so other tasks interleave as
    they would with real delays.
    """

    def __init__(self, start: float = 0.0) -> None:
        self._now = start
        self.sleeps: list[float] = []

    def now(self) -> float:
        return self._now

    def advance(self, seconds: float) -> None:
        """Move time forward without sleeping."""
        self._now += seconds

    async def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        if seconds > 0:
            self._now += seconds
        await asyncio.sleep(0)
