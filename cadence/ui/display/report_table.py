# cadence/ui/display/report_table.py
# Post-presentation report rendering: summary line & planned vs actual table

from __future__ import annotations

from ...cadence_io.console import console
from ...core.timefmt import format_clock, format_deviation
from ...core.types import TimingReport
from ..core.rich_components import Group, Table, Text, RenderableType, themed_table
from ..theming.theme_engine import CadenceColors, accent_gradient


# red when the section ran long, green otherwise
def _deviation_text(seconds: float) -> Text:
    color = CadenceColors.OVERTIME if seconds > 0 else CadenceColors.AHEAD
    return Text(format_deviation(seconds), style=color)


# * Build the report table: one row per section plus a totals footer
def build_report_table(report: TimingReport) -> Table:
    table = themed_table(show_footer=True, title="Presentation Summary")
    totals = report.totals

    table.add_column("Section", footer="TOTAL", no_wrap=True)
    table.add_column("Presenter")
    table.add_column("Planned", justify="right", footer=format_clock(totals.total_planned))
    table.add_column("Actual", justify="right", footer=format_clock(totals.total_actual))
    table.add_column(
        "Deviation", justify="right", footer=_deviation_text(totals.total_deviation)
    )
    table.add_column("Cum. Planned", justify="right")
    table.add_column("Cum. Actual", justify="right")
    table.add_column("Cum. Deviation", justify="right")

    for row in report.rows:
        table.add_row(
            row.name,
            row.presenter,
            format_clock(row.planned_sec),
            format_clock(row.actual_sec),
            _deviation_text(row.deviation_sec),
            format_clock(row.cumulative_planned_sec),
            format_clock(row.cumulative_actual_sec),
            _deviation_text(row.cumulative_deviation_sec),
        )
    return table


# headline: total time & total deviation
def build_report_summary(report: TimingReport) -> Text:
    totals = report.totals
    summary = Text()
    summary.append("Total time ", style=CadenceColors.DIM)
    summary.append(format_clock(totals.total_actual), style="bold")
    summary.append("   Total deviation ", style=CadenceColors.DIM)
    summary.append_text(_deviation_text(totals.total_deviation))
    return summary


def render_report(report: TimingReport) -> RenderableType:
    return Group(build_report_summary(report), build_report_table(report))


# * Print the full report to the shared console
def show_report(report: TimingReport) -> None:
    console.print()
    console.print(accent_gradient("Presentation Report"))
    console.print(render_report(report))
