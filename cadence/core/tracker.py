# cadence/core/tracker.py
# Drift-free elapsed-time tracker accumulating wall-clock deltas across play/pause cycles

from __future__ import annotations

import time
from typing import Callable

from .scheduler import FrameScheduler, ScheduleHandle

Clock = Callable[[], float]
TickListener = Callable[[float], None]


# default clock: monotonic milliseconds
def monotonic_ms() -> float:
    return time.monotonic() * 1000.0


# * Stopwatch that sums clock deltas instead of counting refresh ticks,
# * so scheduling jitter in the refresh loop never leaks into elapsed time
class ElapsedTracker:
    def __init__(
        self,
        scheduler: FrameScheduler | None = None,
        clock: Clock = monotonic_ms,
        name: str = "tracker",
    ) -> None:
        self.name = name
        self._scheduler = scheduler
        self._clock = clock
        self._accumulated_ms: float = 0.0
        self._run_start: float | None = None
        self._refresh: ScheduleHandle | None = None
        self._listeners: list[TickListener] = []

    @property
    def is_running(self) -> bool:
        return self._run_start is not None

    @property
    def accumulated_ms(self) -> float:
        return self._accumulated_ms

    @property
    def elapsed_ms(self) -> float:
        if self._run_start is None:
            return self._accumulated_ms
        return self._accumulated_ms + (self._clock() - self._run_start)

    @property
    def elapsed_seconds(self) -> float:
        return self.elapsed_ms / 1000.0

    # start running; no-op if already running
    def play(self) -> None:
        if self._run_start is not None:
            return
        self._run_start = self._clock()
        if self._scheduler is not None:
            self._refresh = self._scheduler.schedule_repeating(self._tick)

    # fold the current run into the accumulated total; no-op if paused
    def pause(self) -> None:
        if self._run_start is None:
            return
        self._cancel_refresh()
        self._accumulated_ms += self._clock() - self._run_start
        self._run_start = None
        self._notify()

    # stop any run & force elapsed to baseline_ms
    def reset(self, baseline_ms: float = 0.0) -> None:
        self._cancel_refresh()
        self._accumulated_ms = max(0.0, float(baseline_ms))
        self._run_start = None
        self._notify()

    # teardown: freeze at current value & drop listeners
    def close(self) -> None:
        self.pause()
        self._cancel_refresh()
        self._listeners.clear()

    # * Register listener called w/ elapsed seconds on every refresh frame; returns unsubscribe
    def subscribe(self, listener: TickListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _tick(self) -> None:
        if self._run_start is None:
            return
        self._notify()

    def _notify(self) -> None:
        if not self._listeners:
            return
        value = self.elapsed_seconds
        for listener in list(self._listeners):
            listener(value)

    def _cancel_refresh(self) -> None:
        if self._refresh is not None and self._scheduler is not None:
            self._scheduler.cancel(self._refresh)
        self._refresh = None

    def __repr__(self) -> str:
        state = "running" if self.is_running else "paused"
        return f"{self.__class__.__name__}({self.name!r}, {state}, {self.elapsed_seconds:.3f}s)"
