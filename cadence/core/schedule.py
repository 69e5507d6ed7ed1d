# cadence/core/schedule.py
# Schedule engine: section navigation, play/pause of the tracker pair & schedule-deviation math

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Sequence

from .exceptions import EmptyPlanError
from .report import build_report
from .scheduler import CooperativeScheduler, FrameScheduler, ScheduleHandle
from .timefmt import round_half_up
from .tracker import Clock, ElapsedTracker, monotonic_ms
from .types import PresentationPlan, Section, TimingReport, TimingSnapshot
from .verbose import vlog_session, vlog_transition

SnapshotListener = Callable[[TimingSnapshot], None]


# ** Pure derived-value helpers (seconds in, seconds out)


# time that should have elapsed if exactly on schedule through the current point
def ideal_elapsed(
    sections: Sequence[Section], current_index: int, section_elapsed: float
) -> float:
    if not sections:
        return 0.0
    completed = sum(s.planned_duration for s in sections[:current_index])
    return completed + min(section_elapsed, sections[current_index].planned_duration)


# >= 0 ahead of schedule (on time counts as ahead), < 0 behind
def schedule_deviation(ideal: float, global_elapsed: float) -> int:
    return round_half_up(ideal - global_elapsed)


def progress_fraction(total_planned: float, global_elapsed: float) -> float:
    if total_planned <= 0:
        return 0.0
    return min(1.0, global_elapsed / total_planned)


# * Runtime state of one presenting-mode session; destroyed on exit
@dataclass
class PresentationSession:
    section_tracker: ElapsedTracker
    global_tracker: ElapsedTracker
    history: list[float | None] = field(default_factory=list)
    current_index: int = 0
    finished: bool = False
    pending_resume: ScheduleHandle | None = None


# * Owns the session & is its single mutator; derived values are computed on read
class ScheduleEngine:
    def __init__(
        self,
        plan: PresentationPlan | Sequence[Section],
        scheduler: FrameScheduler | None = None,
        clock: Clock = monotonic_ms,
    ) -> None:
        if isinstance(plan, PresentationPlan):
            self.plan = plan
        else:
            self.plan = PresentationPlan(sections=list(plan))
        self._scheduler: FrameScheduler = scheduler or CooperativeScheduler()
        self._clock = clock
        self._session: PresentationSession | None = None
        self._listeners: list[SnapshotListener] = []

    # ===== STATE ACCESSORS =====

    @property
    def sections(self) -> list[Section]:
        return self.plan.sections

    @property
    def scheduler(self) -> FrameScheduler:
        return self._scheduler

    @property
    def session(self) -> PresentationSession | None:
        return self._session

    @property
    def is_presenting(self) -> bool:
        return self._session is not None

    @property
    def is_finished(self) -> bool:
        return self._session is not None and self._session.finished

    @property
    def is_running(self) -> bool:
        return self._session is not None and self._session.section_tracker.is_running

    @property
    def has_pending_resume(self) -> bool:
        s = self._session
        return s is not None and s.pending_resume is not None and s.pending_resume.active

    @property
    def current_index(self) -> int:
        return self._session.current_index if self._session is not None else 0

    @property
    def current_section(self) -> Section | None:
        if self._session is None or not self.sections:
            return None
        return self.sections[self._session.current_index]

    @property
    def next_section(self) -> Section | None:
        if self._session is None:
            return None
        index = self._session.current_index + 1
        return self.sections[index] if index < len(self.sections) else None

    @property
    def history(self) -> list[float | None]:
        return list(self._session.history) if self._session is not None else []

    # ===== LIFECYCLE =====

    # * Start a fresh session; rejects an empty plan
    def enter_presentation_mode(self) -> PresentationSession:
        if not self.sections:
            raise EmptyPlanError()
        if self._session is not None:
            self._teardown()

        section_tracker = ElapsedTracker(self._scheduler, self._clock, name="section")
        global_tracker = ElapsedTracker(self._scheduler, self._clock, name="presentation")
        section_tracker.reset(0)
        global_tracker.reset(0)
        # trackers always run together; one publisher is enough
        global_tracker.subscribe(self._on_tick)

        self._session = PresentationSession(
            section_tracker=section_tracker,
            global_tracker=global_tracker,
            history=[0.0] * len(self.sections),
        )
        vlog_session(
            "Presentation started",
            f"{len(self.sections)} sections, {self.total_planned:.0f}s planned",
        )
        return self._session

    # * Destroy the session, cancelling anything still scheduled; idempotent
    def exit_presentation_mode(self) -> None:
        if self._session is None:
            return
        self._teardown()
        vlog_session("Presentation mode exited")

    def _teardown(self) -> None:
        s = self._session
        if s is None:
            return
        self._cancel_pending_resume(s)
        for tracker in (s.section_tracker, s.global_tracker):
            tracker.reset(0)
            tracker.close()
        self._session = None

    # ===== TRANSITIONS =====

    def toggle_play_pause(self) -> None:
        s = self._active_session()
        if s is None:
            return
        # a queued resume means the pair is logically running
        if self._cancel_pending_resume(s):
            vlog_transition("Pause", "pending resume cancelled")
            return
        if s.section_tracker.is_running:
            self._pause_both(s)
            vlog_transition("Pause", self._position_detail(s))
        else:
            self._play_both(s)
            vlog_transition("Play", self._position_detail(s))

    # * Leave the current section for index; resume is deferred until after the reset
    def go_to_section(self, index: int, keep_playing: bool = False) -> None:
        s = self._active_session()
        if s is None:
            return
        if not 0 <= index < len(self.sections) or index == s.current_index:
            return

        self._record_current(s)
        had_pending = self._cancel_pending_resume(s)
        was_running = s.section_tracker.is_running or had_pending
        self._pause_both(s)

        previous = s.current_index
        s.current_index = index
        s.section_tracker.reset(0)

        if keep_playing and was_running:
            s.pending_resume = self._scheduler.call_soon(lambda: self._resume(s))

        vlog_transition(
            f"Section {previous + 1} -> {index + 1}",
            f"recorded {s.history[previous]:.2f}s, resume={'deferred' if s.pending_resume else 'no'}",
        )

    def go_next(self) -> None:
        s = self._active_session()
        if s is None:
            return
        if s.current_index >= len(self.sections) - 1:
            self.finish_presentation()
        else:
            self.go_to_section(s.current_index + 1, keep_playing=True)

    def go_prev(self) -> None:
        s = self._active_session()
        if s is None:
            return
        self.go_to_section(s.current_index - 1, keep_playing=True)

    # * Record the last section & stop; terminal for the session
    def finish_presentation(self) -> None:
        s = self._active_session()
        if s is None:
            return
        self._record_current(s)
        self._cancel_pending_resume(s)
        self._pause_both(s)
        s.finished = True
        vlog_transition(
            "Finished",
            f"total {s.global_tracker.elapsed_seconds:.2f}s of {self.total_planned:.0f}s planned",
        )

    # restart the section clock at 0; run state & presentation clock unchanged
    def reset_current_section(self) -> None:
        s = self._active_session()
        if s is None:
            return
        was_running = s.section_tracker.is_running
        s.section_tracker.reset(0)
        if was_running:
            s.section_tracker.play()
        vlog_transition("Section reset", self._position_detail(s))

    # ===== DERIVED VALUES =====

    @property
    def section_elapsed(self) -> float:
        return self._session.section_tracker.elapsed_seconds if self._session else 0.0

    @property
    def global_elapsed(self) -> float:
        return self._session.global_tracker.elapsed_seconds if self._session else 0.0

    @property
    def total_planned(self) -> float:
        return self.plan.total_planned_seconds

    @property
    def section_remaining(self) -> float:
        section = self.current_section
        if section is None:
            return 0.0
        return section.planned_duration - self.section_elapsed

    @property
    def total_remaining(self) -> float:
        return max(0.0, self.total_planned - self.global_elapsed)

    @property
    def progress_fraction(self) -> float:
        return progress_fraction(self.total_planned, self.global_elapsed)

    @property
    def ideal_elapsed(self) -> float:
        if self._session is None:
            return 0.0
        return ideal_elapsed(self.sections, self._session.current_index, self.section_elapsed)

    @property
    def schedule_deviation(self) -> int:
        return schedule_deviation(self.ideal_elapsed, self.global_elapsed)

    # * Consistent view of every exposed value, reading each clock once
    def snapshot(self) -> TimingSnapshot:
        s = self._session
        section_elapsed = self.section_elapsed
        global_elapsed = self.global_elapsed
        total_planned = self.total_planned
        index = s.current_index if s is not None else 0

        if s is not None and self.sections:
            planned = self.sections[index].planned_duration
            ideal = ideal_elapsed(self.sections, index, section_elapsed)
        else:
            planned = 0.0
            ideal = 0.0

        return TimingSnapshot(
            current_index=index,
            section_count=len(self.sections),
            section_elapsed=section_elapsed,
            global_elapsed=global_elapsed,
            section_remaining=planned - section_elapsed,
            total_planned=total_planned,
            total_remaining=max(0.0, total_planned - global_elapsed),
            progress_fraction=progress_fraction(total_planned, global_elapsed),
            schedule_deviation=schedule_deviation(ideal, global_elapsed),
            is_running=s is not None and s.section_tracker.is_running,
            finished=s is not None and s.finished,
            range_status=self.plan.classify_elapsed(global_elapsed),
        )

    def report(self) -> TimingReport:
        return build_report(self.sections, self.history)

    # * Register listener receiving a snapshot on every refresh frame; returns unsubscribe
    def subscribe(self, listener: SnapshotListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # ===== INTERNALS =====

    def _active_session(self) -> PresentationSession | None:
        s = self._session
        if s is None or s.finished:
            return None
        return s

    def _record_current(self, s: PresentationSession) -> None:
        s.history[s.current_index] = s.section_tracker.elapsed_seconds

    def _play_both(self, s: PresentationSession) -> None:
        s.section_tracker.play()
        s.global_tracker.play()

    def _pause_both(self, s: PresentationSession) -> None:
        s.section_tracker.pause()
        s.global_tracker.pause()

    def _resume(self, s: PresentationSession) -> None:
        s.pending_resume = None
        # stale callback from a torn-down or finished session
        if self._session is not s or s.finished:
            return
        self._play_both(s)
        vlog_transition("Resume", self._position_detail(s))

    # returns True if a resume was still queued
    def _cancel_pending_resume(self, s: PresentationSession) -> bool:
        handle = s.pending_resume
        s.pending_resume = None
        if handle is None or not handle.active:
            return False
        self._scheduler.cancel(handle)
        return True

    def _on_tick(self, _elapsed: float) -> None:
        if not self._listeners:
            return
        snapshot = self.snapshot()
        for listener in list(self._listeners):
            listener(snapshot)

    def _position_detail(self, s: PresentationSession) -> str:
        return (
            f"section {s.current_index + 1}/{len(self.sections)}, "
            f"section={s.section_tracker.elapsed_seconds:.2f}s, "
            f"global={s.global_tracker.elapsed_seconds:.2f}s"
        )
