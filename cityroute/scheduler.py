"""Timer abstractions that drive the animation.

The animation driver never sleeps or loops on its own. It asks a scheduler
to call it back at a fixed interval and keeps the returned handle so the
timer can be cancelled explicitly. Two schedulers ship here:

- ``ManualScheduler`` fires timers only when ``advance`` is called, which
  makes tick-by-tick behavior deterministic in tests and headless runs.
- ``AsyncioScheduler`` re-arms ``loop.call_later`` after every tick, so the
  callbacks run cooperatively on the event loop thread.
"""

from __future__ import annotations

import asyncio
from typing import Callable, List, Optional, Protocol

TickCallback = Callable[[], None]


class TimerHandle(Protocol):
    """A repeating timer that can be cancelled any number of times."""

    @property
    def cancelled(self) -> bool: ...

    def cancel(self) -> None: ...


class Scheduler(Protocol):
    def call_every(self, interval_s: float, callback: TickCallback) -> TimerHandle: ...


class ManualTimer:
    def __init__(self, interval_s: float, callback: TickCallback) -> None:
        self.interval_s = interval_s
        self.callback = callback
        self._cancelled = False

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        self._cancelled = True


class ManualScheduler:
    """Scheduler whose clock only moves when ``advance`` is called."""

    def __init__(self) -> None:
        self._timers: List[ManualTimer] = []
        self.ticks = 0

    def call_every(self, interval_s: float, callback: TickCallback) -> ManualTimer:
        if interval_s <= 0:
            raise ValueError("interval_s must be > 0")
        timer = ManualTimer(interval_s, callback)
        self._timers.append(timer)
        return timer

    @property
    def active_timers(self) -> List[ManualTimer]:
        return [timer for timer in self._timers if not timer.cancelled]

    def advance(self, ticks: int = 1) -> None:
        """Fire every live timer once per tick, in registration order.

        A timer cancelled by an earlier callback in the same tick is skipped.
        Timers registered during a tick first fire on the next one.
        """
        for _ in range(ticks):
            self.ticks += 1
            for timer in list(self._timers):
                if not timer.cancelled:
                    timer.callback()
            self._timers = [timer for timer in self._timers if not timer.cancelled]

    def run_until_idle(self, max_ticks: int = 100_000) -> int:
        """Advance until no timer is live. Returns the number of ticks taken."""
        start = self.ticks
        while self.active_timers:
            if self.ticks - start >= max_ticks:
                raise RuntimeError(f"timers still active after {max_ticks} ticks")
            self.advance()
        return self.ticks - start


class AsyncioTimer:
    def __init__(self, loop: asyncio.AbstractEventLoop, interval_s: float, callback: TickCallback) -> None:
        self._loop = loop
        self._interval_s = interval_s
        self._callback = callback
        self._cancelled = False
        self._handle: Optional[asyncio.TimerHandle] = None
        self._arm()

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        self._cancelled = True
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _arm(self) -> None:
        self._handle = self._loop.call_later(self._interval_s, self._fire)

    def _fire(self) -> None:
        self._handle = None
        if self._cancelled:
            return
        self._callback()
        # The callback may have cancelled this timer (route completed or superseded)
        if not self._cancelled:
            self._arm()


class AsyncioScheduler:
    """Fixed-cadence timers on an asyncio event loop.

    Uses the running loop when ``loop`` is not given, so it must be created
    (or first used) from inside a coroutine.
    """

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None) -> None:
        self._loop = loop

    def call_every(self, interval_s: float, callback: TickCallback) -> AsyncioTimer:
        if interval_s <= 0:
            raise ValueError("interval_s must be > 0")
        loop = self._loop or asyncio.get_running_loop()
        return AsyncioTimer(loop, interval_s, callback)
