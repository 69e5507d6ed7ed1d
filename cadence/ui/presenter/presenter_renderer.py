# cadence/ui/presenter/presenter_renderer.py
# Renders the live presenter screen from a timing snapshot

from __future__ import annotations

from typing import TYPE_CHECKING

from ...core.timefmt import format_clock, format_deviation, format_remaining
from ...core.types import RangeStatus, TimingSnapshot
from ..core.rich_components import (
    Align,
    Group,
    ProgressBar,
    RenderableType,
    Table,
    Text,
    themed_panel,
)
from ..theming.theme_engine import CadenceColors

if TYPE_CHECKING:
    from ...core.schedule import ScheduleEngine


KEY_HINTS = [
    ("Space", "Play / Pause"),
    ("←", "Previous"),
    ("→", "Next"),
    ("r", "Reset section"),
    ("f", "Finish"),
    ("q", "Quit"),
]

_RANGE_COLORS = {
    RangeStatus.IN_RANGE: CadenceColors.IN_RANGE,
    RangeStatus.OVER_RANGE: CadenceColors.OVER_RANGE,
}


class PresenterRenderer:
    def __init__(self, show_next_section: bool = True, width: int = 72):
        self.show_next_section = show_next_section
        self.width = width

    # * Compose the full screen: header, big timer, totals, progress & key hints
    def render_screen(self, engine: "ScheduleEngine", snapshot: TimingSnapshot) -> RenderableType:
        section = engine.current_section
        if section is None:
            return themed_panel(
                Align.center(Text("No sections configured.", style=CadenceColors.DIM)),
                title="Cadence",
                width=self.width,
            )

        parts: list[RenderableType] = [
            self._render_header(engine, snapshot),
            Align.center(self.render_timer(snapshot)),
        ]
        if self.show_next_section:
            upcoming = self._render_next(engine)
            if upcoming is not None:
                parts.append(upcoming)
        parts.append(self.render_totals(engine, snapshot))
        parts.append(ProgressBar(total=1.0, completed=snapshot.progress_fraction))
        parts.append(self.render_key_hints(snapshot))

        state = "▶ running" if snapshot.is_running else "⏸ paused"
        return themed_panel(
            Group(*parts),
            title=f"Cadence  [dim]{state}[/]",
            width=self.width,
            padding=(1, 2),
        )

    def _render_header(self, engine: "ScheduleEngine", snapshot: TimingSnapshot) -> RenderableType:
        section = engine.sections[snapshot.current_index]
        header = Text(justify="center")
        header.append(
            f"SECTION {snapshot.current_index + 1} / {snapshot.section_count}\n",
            style=CadenceColors.DIM,
        )
        header.append(section.name or "Untitled", style=f"bold {CadenceColors.ACCENT_PRIMARY}")
        header.append("\n")
        header.append(section.presenter or "No presenter", style=CadenceColors.ACCENT_SECONDARY)
        return header

    # section countdown; red once it goes negative
    def render_timer(self, snapshot: TimingSnapshot) -> Text:
        style = (
            f"bold {CadenceColors.OVERTIME}"
            if snapshot.is_overtime
            else f"bold {CadenceColors.ACCENT_PRIMARY}"
        )
        return Text(format_remaining(snapshot.section_remaining), style=style)

    def _render_next(self, engine: "ScheduleEngine") -> RenderableType | None:
        upcoming = engine.next_section
        if upcoming is None:
            return None
        line = Text(justify="center")
        line.append("Next  ", style=CadenceColors.DIM)
        line.append(f"{upcoming.name or 'Untitled'} - {upcoming.presenter or '?'}")
        return line

    # remaining total, real elapsed vs target range, ahead/behind
    def render_totals(self, engine: "ScheduleEngine", snapshot: TimingSnapshot) -> Table:
        plan = engine.plan
        table = Table.grid(expand=True)
        for _ in range(3):
            table.add_column(justify="center", ratio=1)

        table.add_row(
            Text("Remaining", style=CadenceColors.DIM),
            Text("Elapsed", style=CadenceColors.DIM),
            Text("Ahead" if snapshot.is_ahead else "Behind", style=CadenceColors.DIM),
        )

        elapsed = Text(
            format_clock(snapshot.global_elapsed),
            style=_RANGE_COLORS.get(snapshot.range_status, ""),
        )
        elapsed.append(
            f" / {format_clock(plan.min_time_minutes * 60)}-{format_clock(plan.max_time_minutes * 60)}",
            style=CadenceColors.DIM,
        )
        deviation_color = CadenceColors.AHEAD if snapshot.is_ahead else CadenceColors.BEHIND
        table.add_row(
            Text(format_clock(snapshot.total_remaining), style="bold"),
            elapsed,
            Text(format_deviation(snapshot.schedule_deviation), style=f"bold {deviation_color}"),
        )
        return table

    def render_key_hints(self, snapshot: TimingSnapshot) -> Text:
        hints = Text(justify="center")
        for i, (key_label, action) in enumerate(KEY_HINTS):
            if i:
                hints.append("   ")
            if key_label == "→" and snapshot.is_last_section:
                action = "Finish"
            hints.append(key_label, style=f"bold {CadenceColors.ACCENT_SECONDARY}")
            hints.append(f" {action}", style=CadenceColors.DIM)
        return hints
