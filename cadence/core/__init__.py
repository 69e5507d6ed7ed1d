# cadence/core/__init__.py
# Timing core: trackers, scheduler, schedule engine & report aggregation

from .types import (
    Section,
    PresentationPlan,
    RangeStatus,
    ReportRow,
    ReportTotals,
    TimingReport,
    TimingSnapshot,
    coerce_non_negative,
)
from .scheduler import CooperativeScheduler, FrameScheduler, ScheduleHandle
from .tracker import ElapsedTracker, monotonic_ms
from .schedule import ScheduleEngine, PresentationSession
from .report import build_report

__all__ = [
    "Section",
    "PresentationPlan",
    "RangeStatus",
    "ReportRow",
    "ReportTotals",
    "TimingReport",
    "TimingSnapshot",
    "coerce_non_negative",
    "CooperativeScheduler",
    "FrameScheduler",
    "ScheduleHandle",
    "ElapsedTracker",
    "monotonic_ms",
    "ScheduleEngine",
    "PresentationSession",
    "build_report",
]
