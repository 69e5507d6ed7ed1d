# cadence/core/types.py
# Pure dataclasses for sections, plans, report rows & timing snapshots - no I/O dependencies

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

# leading decimal number of a string ("5min" -> "5", " 2.5e1 s" -> "2.5e1")
_LEADING_NUMBER = re.compile(r"\s*[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")


# * Coerce user-entered numeric value to non-negative float; anything unusable becomes 0
def coerce_non_negative(value: Any) -> float:
    if isinstance(value, bool) or value is None:
        return 0.0
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        match = _LEADING_NUMBER.match(value)
        if match is None:
            return 0.0
        number = float(match.group())
    else:
        return 0.0
    if not math.isfinite(number) or number < 0:
        return 0.0
    return number


# classification of global elapsed time against the plan's min/max range
class RangeStatus(Enum):
    UNDER_RANGE = "under_range"
    IN_RANGE = "in_range"
    OVER_RANGE = "over_range"


# one timed segment of a presentation
@dataclass(frozen=True)
class Section:
    name: str = ""
    presenter: str = ""
    planned_minutes: float = 0.0
    planned_seconds: float = 0.0

    def __post_init__(self) -> None:
        # frozen dataclass: coerce through object.__setattr__
        object.__setattr__(self, "name", str(self.name or ""))
        object.__setattr__(self, "presenter", str(self.presenter or ""))
        object.__setattr__(
            self, "planned_minutes", coerce_non_negative(self.planned_minutes)
        )
        object.__setattr__(
            self, "planned_seconds", coerce_non_negative(self.planned_seconds)
        )

    # planned duration in seconds
    @property
    def planned_duration(self) -> float:
        return self.planned_minutes * 60 + self.planned_seconds

    def display_name(self, index: int) -> str:
        return self.name or f"Section {index + 1}"

    @property
    def display_presenter(self) -> str:
        return self.presenter or "-"


# ordered sections plus the presentation-wide validity range (minutes)
@dataclass
class PresentationPlan:
    sections: list[Section] = field(default_factory=list)
    presenters: list[str] = field(default_factory=list)
    min_time_minutes: float = 0.0
    max_time_minutes: float = 0.0

    def __post_init__(self) -> None:
        self.min_time_minutes = coerce_non_negative(self.min_time_minutes)
        self.max_time_minutes = coerce_non_negative(self.max_time_minutes)

    @property
    def total_planned_seconds(self) -> float:
        return sum(s.planned_duration for s in self.sections)

    @property
    def total_planned_minutes(self) -> float:
        return self.total_planned_seconds / 60

    # total planned time fits inside [min, max] & range is well-formed
    @property
    def is_valid(self) -> bool:
        total = self.total_planned_minutes
        return (
            self.min_time_minutes <= self.max_time_minutes
            and self.min_time_minutes <= total <= self.max_time_minutes
        )

    # classify elapsed seconds against the min/max range (display only)
    def classify_elapsed(self, elapsed_seconds: float) -> RangeStatus:
        min_sec = self.min_time_minutes * 60
        max_sec = self.max_time_minutes * 60
        if min_sec <= elapsed_seconds <= max_sec:
            return RangeStatus.IN_RANGE
        if elapsed_seconds > max_sec:
            return RangeStatus.OVER_RANGE
        return RangeStatus.UNDER_RANGE


# one report line: planned vs actual for a section w/ running totals
@dataclass(frozen=True)
class ReportRow:
    name: str
    presenter: str
    planned_sec: float
    actual_sec: float
    deviation_sec: float
    cumulative_planned_sec: float
    cumulative_actual_sec: float
    cumulative_deviation_sec: float

    # positive deviation means the section ran long
    @property
    def ran_long(self) -> bool:
        return self.deviation_sec > 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "presenter": self.presenter,
            "planned": self.planned_sec,
            "actual": self.actual_sec,
            "deviation": self.deviation_sec,
            "cumulative_planned": self.cumulative_planned_sec,
            "cumulative_actual": self.cumulative_actual_sec,
            "cumulative_deviation": self.cumulative_deviation_sec,
        }


@dataclass(frozen=True)
class ReportTotals:
    total_planned: float = 0.0
    total_actual: float = 0.0
    total_deviation: float = 0.0

    def to_dict(self) -> dict[str, float]:
        return {
            "total_planned": self.total_planned,
            "total_actual": self.total_actual,
            "total_deviation": self.total_deviation,
        }


# full post-presentation report
@dataclass(frozen=True)
class TimingReport:
    rows: tuple[ReportRow, ...] = ()
    totals: ReportTotals = field(default_factory=ReportTotals)

    def to_dict(self) -> dict[str, Any]:
        return {
            "rows": [row.to_dict() for row in self.rows],
            "totals": self.totals.to_dict(),
        }


# point-in-time view of every value the presenter screen shows
@dataclass(frozen=True)
class TimingSnapshot:
    current_index: int
    section_count: int
    section_elapsed: float
    global_elapsed: float
    section_remaining: float
    total_planned: float
    total_remaining: float
    progress_fraction: float
    schedule_deviation: int
    is_running: bool
    finished: bool
    range_status: RangeStatus

    # on-time counts as ahead
    @property
    def is_ahead(self) -> bool:
        return self.schedule_deviation >= 0

    @property
    def is_overtime(self) -> bool:
        return self.section_remaining < 0

    @property
    def is_last_section(self) -> bool:
        return self.current_index >= self.section_count - 1
