"""Mini README: Recurring timer backends for the path animator.

Structure:
    * TimerHandle - abstract cancellable handle for a recurring timer.
    * Scheduler - abstract factory arming recurring timers.
    * AsyncioScheduler - re-arms callbacks on a running asyncio loop.
    * ManualScheduler - virtual clock advanced explicitly by the caller.

Both backends run callbacks on a single logical queue, so two firings never
overlap. Cancelling a handle, including from inside its own callback, guarantees
it never fires again.
"""

from __future__ import annotations

import asyncio
import itertools
from abc import ABC, abstractmethod
from typing import Callable, List, Optional

from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

TimerCallback = Callable[[], None]


class TimerHandle(ABC):
    """Handle to a recurring timer."""

    @property
    @abstractmethod
    def active(self) -> bool:
        """Whether the timer is still armed."""

    @abstractmethod
    def cancel(self) -> None:
        """Disarm the timer; calling it more than once is harmless."""


class Scheduler(ABC):
    """Arms recurring timers on a single-threaded queue."""

    @abstractmethod
    def call_every(self, interval: float, callback: TimerCallback) -> TimerHandle:
        """Invoke ``callback`` every ``interval`` seconds until cancelled."""


class _AsyncioTimer(TimerHandle):
    def __init__(
        self, loop: asyncio.AbstractEventLoop, interval: float, callback: TimerCallback
    ) -> None:
        self._loop = loop
        self._interval = interval
        self._callback = callback
        self._active = True
        self._pending: Optional[asyncio.TimerHandle] = loop.call_later(interval, self._fire)

    @property
    def active(self) -> bool:
        return self._active

    def _fire(self) -> None:
        self._pending = None
        if not self._active:
            return
        try:
            self._callback()
        except Exception:
            self._active = False
            raise
        if self._active:
            self._pending = self._loop.call_later(self._interval, self._fire)

    def cancel(self) -> None:
        self._active = False
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None


class AsyncioScheduler(Scheduler):
    """Scheduler backed by ``loop.call_later`` on an asyncio event loop."""

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None) -> None:
        self._loop = loop

    def call_every(self, interval: float, callback: TimerCallback) -> TimerHandle:
        if interval <= 0:
            raise ValueError(f"Timer interval must be positive, got {interval}")
        loop = self._loop or asyncio.get_running_loop()
        return _AsyncioTimer(loop, interval, callback)


class _ManualTimer(TimerHandle):
    def __init__(self, due: float, interval: float, callback: TimerCallback, order: int) -> None:
        self.due = due
        self.interval = interval
        self.callback = callback
        self.order = order
        self._active = True

    @property
    def active(self) -> bool:
        return self._active

    def cancel(self) -> None:
        self._active = False


class ManualScheduler(Scheduler):
    """Deterministic scheduler driven by an explicit virtual clock.

    Nothing fires until ``advance`` or ``run_until_idle`` is called. Due timers
    fire in time order (ties broken by arming order), one callback at a time.
    """

    def __init__(self) -> None:
        self.now = 0.0
        self.firings = 0
        self._timers: List[_ManualTimer] = []
        self._sequence = itertools.count()

    def call_every(self, interval: float, callback: TimerCallback) -> TimerHandle:
        if interval <= 0:
            raise ValueError(f"Timer interval must be positive, got {interval}")
        timer = _ManualTimer(self.now + interval, interval, callback, next(self._sequence))
        self._timers.append(timer)
        return timer

    @property
    def active_timers(self) -> int:
        return sum(1 for timer in self._timers if timer.active)

    def _next_due(self, deadline: Optional[float]) -> Optional[_ManualTimer]:
        self._timers = [timer for timer in self._timers if timer.active]
        candidates = [
            timer for timer in self._timers if deadline is None or timer.due <= deadline
        ]
        if not candidates:
            return None
        return min(candidates, key=lambda timer: (timer.due, timer.order))

    def _fire(self, timer: _ManualTimer) -> None:
        self.now = max(self.now, timer.due)
        timer.due += timer.interval
        self.firings += 1
        timer.callback()

    def advance(self, seconds: float) -> int:
        """Move the clock forward, firing every timer that falls due."""

        if seconds < 0:
            raise ValueError("Cannot move the clock backwards")
        deadline = self.now + seconds
        fired = 0
        # Small epsilon so repeated float additions of the interval still land.
        timer = self._next_due(deadline + 1e-9)
        while timer is not None:
            self._fire(timer)
            fired += 1
            timer = self._next_due(deadline + 1e-9)
        self.now = max(self.now, deadline)
        return fired

    def run_until_idle(self, max_firings: int = 1_000_000) -> int:
        """Fire timers until none remain armed and return how many fired."""

        fired = 0
        timer = self._next_due(None)
        while timer is not None:
            if fired >= max_firings:
                raise RuntimeError(f"Timers still armed after {max_firings} firings")
            self._fire(timer)
            fired += 1
            timer = self._next_due(None)
        LOGGER.debug("Manual scheduler idle after %s firings at t=%.3fs", fired, self.now)
        return fired
