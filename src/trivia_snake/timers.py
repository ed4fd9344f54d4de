# timers.py
from __future__ import annotations
from typing import Callable, List, Protocol
import heapq
import itertools
import logging

logger = logging.getLogger(__name__)


class Timer(Protocol):
    @property
    def active(self) -> bool: ...
    def cancel(self) -> None: ...


class Scheduler(Protocol):
    def schedule(self, period_ms: float, callback: Callable[[], None]) -> Timer: ...


class PeriodicTimer:
    """Handle returned by TickScheduler.schedule(); cancel() may be called any number of times."""

    def __init__(self, scheduler: "TickScheduler", period_ms: float, callback: Callable[[], None], due_ms: float):
        self.period_ms = period_ms
        self.callback = callback
        self.due_ms = due_ms
        self._scheduler = scheduler
        self._active = True

    @property
    def active(self) -> bool:
        return self._active

    def cancel(self) -> None:
        if self._active:
            self._active = False
            self._scheduler._forget(self)

    def __repr__(self) -> str:
        state = "active" if self._active else "cancelled"
        return f"PeriodicTimer(period_ms={self.period_ms:.1f}, due_ms={self.due_ms:.1f}, {state})"


class TickScheduler:
    """
    Cooperative periodic timers driven by an external millisecond clock.

    The game loop calls run_due(pygame.time.get_ticks()) every frame; tests
    call it with synthetic times. Callbacks run one at a time, in due order,
    so each one sees the state committed by the previous one.
    """

    def __init__(self, now_ms: float = 0.0):
        self.now_ms = now_ms
        self._queue: List[tuple] = []   # (due_ms, seq, timer)
        self._timers: List[PeriodicTimer] = []
        self._seq = itertools.count()

    def schedule(self, period_ms: float, callback: Callable[[], None]) -> PeriodicTimer:
        if period_ms <= 0:
            raise ValueError(f"Timer period must be positive, got {period_ms}")
        timer = PeriodicTimer(self, period_ms, callback, self.now_ms + period_ms)
        self._timers.append(timer)
        heapq.heappush(self._queue, (timer.due_ms, next(self._seq), timer))
        return timer

    def run_due(self, now_ms: float, catch_up: bool = True) -> int:
        """
        Fire the timers that are due at now_ms. Returns the number of callbacks run.

        With catch_up, every elapsed period fires (synthetic clocks in tests).
        Without it, a timer that fell behind fires once and its next period
        starts from now_ms, so a stalled frame does not replay a burst of ticks.
        """
        fired = 0
        while self._queue and self._queue[0][0] <= now_ms:
            due, _, timer = heapq.heappop(self._queue)
            if not timer.active:
                continue  # cancelled after it was queued
            self.now_ms = due if catch_up else now_ms
            timer.due_ms = due + timer.period_ms
            if not catch_up and timer.due_ms <= now_ms:
                timer.due_ms = now_ms + timer.period_ms
            heapq.heappush(self._queue, (timer.due_ms, next(self._seq), timer))
            timer.callback()
            fired += 1
        self.now_ms = max(self.now_ms, now_ms)
        return fired

    def advance(self, delta_ms: float) -> int:
        return self.run_due(self.now_ms + delta_ms)

    def cancel_all(self) -> None:
        for timer in list(self._timers):
            timer.cancel()
        self._queue.clear()

    @property
    def active_timers(self) -> List[PeriodicTimer]:
        return list(self._timers)

    def _forget(self, timer: PeriodicTimer) -> None:
        if timer in self._timers:
            self._timers.remove(timer)
