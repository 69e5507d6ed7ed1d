# cadence/ui/display/plan_table.py
# Plan overview: sections w/ planned durations & range validity

from __future__ import annotations

from ...cadence_io.console import console
from ...core.timefmt import format_clock
from ...core.types import PresentationPlan
from ..core.rich_components import Table, Text, themed_table
from ..theming.theme_engine import CadenceColors, accent_gradient


def build_plan_table(plan: PresentationPlan) -> Table:
    table = themed_table(show_footer=True)
    table.add_column("#", justify="right", footer="")
    table.add_column("Section", footer="TOTAL")
    table.add_column("Presenter")
    table.add_column(
        "Planned", justify="right", footer=format_clock(plan.total_planned_seconds)
    )

    for index, section in enumerate(plan.sections):
        table.add_row(
            str(index + 1),
            section.display_name(index),
            section.display_presenter,
            format_clock(section.planned_duration),
        )
    return table


def _range_verdict(plan: PresentationPlan) -> str:
    total = plan.total_planned_minutes
    if plan.is_valid:
        return "within range"
    if total < plan.min_time_minutes:
        return f"{plan.min_time_minutes - total:.1f} min short of the minimum"
    # total > max here, min > max included
    return f"{total - plan.max_time_minutes:.1f} min over the maximum"


# "10-15 min" range line, green when the total fits
def build_range_line(plan: PresentationPlan) -> Text:
    color = CadenceColors.IN_RANGE if plan.is_valid else CadenceColors.OVER_RANGE
    line = Text()
    line.append(f"Total {plan.total_planned_minutes:g} min ", style="bold")
    line.append(
        f"(target {plan.min_time_minutes:g}-{plan.max_time_minutes:g} min) ",
        style=CadenceColors.DIM,
    )
    line.append(_range_verdict(plan), style=color)
    return line


# * Print plan table & range verdict
def show_plan(plan: PresentationPlan, source: str | None = None) -> None:
    console.print()
    console.print(accent_gradient("Presentation Plan"))
    if source:
        console.print(f"[dim]{source}[/]")
    if not plan.sections:
        console.print("[warning]No sections configured.[/]")
        return
    console.print(build_plan_table(plan))
    console.print(build_range_line(plan))
