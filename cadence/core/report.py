# cadence/core/report.py
# Planned vs actual report aggregation - a pure fold over sections & recorded history

from __future__ import annotations

from typing import Any, Sequence

from .types import (
    ReportRow,
    ReportTotals,
    Section,
    TimingReport,
    coerce_non_negative,
)


# actual seconds recorded for a section; unset or invalid entries count as 0
def _actual_at(history: Sequence[Any], index: int) -> float:
    if index >= len(history):
        return 0.0
    return coerce_non_negative(history[index])


# * Build per-section rows w/ running cumulative planned/actual/deviation & totals
def build_report(sections: Sequence[Section], history: Sequence[Any]) -> TimingReport:
    rows: list[ReportRow] = []
    cumulative_planned = 0.0
    cumulative_actual = 0.0

    for index, section in enumerate(sections):
        planned = section.planned_duration
        actual = _actual_at(history, index)
        cumulative_planned += planned
        cumulative_actual += actual
        rows.append(
            ReportRow(
                name=section.display_name(index),
                presenter=section.display_presenter,
                planned_sec=planned,
                actual_sec=actual,
                deviation_sec=actual - planned,
                cumulative_planned_sec=cumulative_planned,
                cumulative_actual_sec=cumulative_actual,
                cumulative_deviation_sec=cumulative_actual - cumulative_planned,
            )
        )

    if not rows:
        return TimingReport()

    last = rows[-1]
    totals = ReportTotals(
        total_planned=last.cumulative_planned_sec,
        total_actual=last.cumulative_actual_sec,
        total_deviation=last.cumulative_deviation_sec,
    )
    return TimingReport(rows=tuple(rows), totals=totals)
