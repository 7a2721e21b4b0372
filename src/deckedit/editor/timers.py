#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/deckedit/editor/timers.py
"""Delayed callbacks for the single-threaded editor.

The editor never blocks; anything that must happen later goes through a
:class:`Scheduler`. An ``asyncio`` event loop satisfies the protocol as is
(``loop.call_later`` returns a handle with ``cancel()``); the
:class:`ManualScheduler` runs callbacks only when its clock is advanced,
which makes timing deterministic for replays and tests.
"""

from __future__ import annotations

import heapq
import itertools
import logging
from typing import Callable, Optional, Protocol

logger = logging.getLogger(__name__)


class TimerHandle(Protocol):
    """Handle returned by :meth:`Scheduler.call_later`."""

    def cancel(self) -> None:
        """Prevent the callback from running."""
        ...


class Scheduler(Protocol):
    """Anything able to run a callback after a delay in seconds."""

    def call_later(self, delay: float, callback: Callable[[], None]) -> TimerHandle:
        """Schedule ``callback`` to run after ``delay`` seconds."""
        ...


class ScheduledCall:
    """A pending callback of a :class:`ManualScheduler`."""

    __slots__ = ("when", "callback", "cancelled")

    def __init__(self, when: float, callback: Callable[[], None]):
        self.when = when
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class ManualScheduler:
    """Scheduler driven by an explicit clock.

    Examples
    --------
        >>> scheduler = ManualScheduler()
        >>> calls = []
        >>> _ = scheduler.call_later(0.1, lambda: calls.append("done"))
        >>> _ = scheduler.advance(0.05)
        >>> calls
        []
        >>> _ = scheduler.advance(0.05)
        >>> calls
        ['done']

    """

    def __init__(self) -> None:
        self.now = 0.0
        self._queue: list[tuple[float, int, ScheduledCall]] = []
        self._counter = itertools.count()

    def call_later(self, delay: float, callback: Callable[[], None]) -> ScheduledCall:
        call = ScheduledCall(self.now + max(delay, 0.0), callback)
        heapq.heappush(self._queue, (call.when, next(self._counter), call))
        return call

    @property
    def pending(self) -> int:
        """Number of callbacks still waiting to run."""
        return sum(1 for _, _, call in self._queue if not call.cancelled)

    def advance(self, seconds: float) -> int:
        """Move the clock forward, running every callback that falls due.

        Callbacks scheduled while advancing run too if they fall due before
        the new time.

        Returns
        -------
        int
            Number of callbacks run

        """
        target = self.now + seconds
        ran = 0
        while self._queue and self._queue[0][0] <= target:
            when, _, call = heapq.heappop(self._queue)
            if call.cancelled:
                continue
            self.now = when
            call.callback()
            ran += 1
        self.now = target
        return ran

    def run_all(self) -> int:
        """Run callbacks until none are pending, advancing the clock as needed."""
        ran = 0
        while self._queue:
            ran += self.advance(max(self._queue[0][0] - self.now, 0.0))
        return ran


class GuardedScheduler:
    """Scheduler wrapper that reports callback exceptions instead of raising them.

    Parameters
    ----------
    scheduler : Scheduler
        Scheduler that runs the callbacks
    on_error : Callable[[Exception], None]
        Called from inside the ``except`` block when a callback raises, so
        it may log with ``exc_info=True``

    """

    def __init__(self, scheduler: Scheduler, on_error: Callable[[Exception], None]):
        self.scheduler = scheduler
        self._on_error = on_error

    def call_later(self, delay: float, callback: Callable[[], None]) -> TimerHandle:
        def run() -> None:
            try:
                callback()
            except Exception as e:
                self._on_error(e)

        return self.scheduler.call_later(delay, run)


class CoalescingTimer:
    """Schedule-or-refresh a single pending callback.

    Calling :meth:`schedule` while a callback is pending cancels it and
    starts the delay over, so a burst of calls results in one callback.

    Parameters
    ----------
    scheduler : Scheduler
        Where the callback is scheduled
    delay : float
        Delay in seconds, measured from the latest :meth:`schedule`
    callback : Callable[[], None]
        Function to run

    """

    def __init__(self, scheduler: Scheduler, delay: float, callback: Callable[[], None]):
        self._scheduler = scheduler
        self.delay = delay
        self._callback = callback
        self._handle: Optional[TimerHandle] = None

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def schedule(self) -> None:
        self.cancel()
        self._handle = self._scheduler.call_later(self.delay, self._fire)

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _fire(self) -> None:
        self._handle = None
        self._callback()
