# cadence/core/scheduler.py
# Cooperative frame scheduler: repeating refresh callbacks & deferred one-shot actions

# Single-threaded by contract: callbacks only ever run inside run_frame(), on the
# thread that owns the scheduler. Deferred callbacks queued w/ call_soon() run at
# the start of the next frame, strictly after the code that queued them returns.

from __future__ import annotations

import itertools
from collections import deque
from dataclasses import dataclass
from typing import Callable, Protocol, runtime_checkable

Callback = Callable[[], None]


# handle returned for every scheduled callback; pass to cancel()
@dataclass(eq=False)
class ScheduleHandle:
    id: int
    repeating: bool
    cancelled: bool = False
    done: bool = False

    @property
    def active(self) -> bool:
        return not (self.cancelled or self.done)


# * Scheduler capability injected into trackers & the schedule engine
@runtime_checkable
class FrameScheduler(Protocol):
    def schedule_repeating(self, callback: Callback) -> ScheduleHandle: ...

    def call_soon(self, callback: Callback) -> ScheduleHandle: ...

    def cancel(self, handle: ScheduleHandle | None) -> None: ...


# * Frame-driven scheduler; the host loop calls run_frame() once per display frame
class CooperativeScheduler:
    def __init__(self) -> None:
        self._ids = itertools.count(1)
        self._repeating: dict[int, tuple[ScheduleHandle, Callback]] = {}
        self._soon: deque[tuple[ScheduleHandle, Callback]] = deque()
        self.frame_count = 0

    def schedule_repeating(self, callback: Callback) -> ScheduleHandle:
        handle = ScheduleHandle(next(self._ids), repeating=True)
        self._repeating[handle.id] = (handle, callback)
        return handle

    def call_soon(self, callback: Callback) -> ScheduleHandle:
        handle = ScheduleHandle(next(self._ids), repeating=False)
        self._soon.append((handle, callback))
        return handle

    # cancelled one-shots stay queued & are skipped when drained
    def cancel(self, handle: ScheduleHandle | None) -> None:
        if handle is None:
            return
        handle.cancelled = True
        self._repeating.pop(handle.id, None)

    @property
    def pending_count(self) -> int:
        return sum(1 for handle, _ in self._soon if handle.active)

    @property
    def repeating_count(self) -> int:
        return len(self._repeating)

    # * Run one frame: deferred callbacks first (FIFO), then every repeating callback
    def run_frame(self) -> None:
        self.frame_count += 1

        # callbacks queued during this drain wait for the next frame
        batch = list(self._soon)
        self._soon.clear()
        for handle, callback in batch:
            if not handle.active:
                continue
            handle.done = True
            callback()

        for handle, callback in list(self._repeating.values()):
            if handle.active:
                callback()

    # run frames until no deferred callbacks remain
    def run_until_idle(self, max_frames: int = 100) -> int:
        frames = 0
        while self.pending_count and frames < max_frames:
            self.run_frame()
            frames += 1
        return frames

    # cancel everything (teardown)
    def close(self) -> None:
        for handle, _ in self._soon:
            handle.cancelled = True
        self._soon.clear()
        for handle, _ in self._repeating.values():
            handle.cancelled = True
        self._repeating.clear()
