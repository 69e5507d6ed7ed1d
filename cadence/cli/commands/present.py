# cadence/cli/commands/present.py
# Run a plan in presenting mode, then print (and optionally save) the timing report

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from ...cadence_io.console import console
from ...cadence_io.report_io import default_report_path, write_report
from ...config.settings import get_settings
from ...core.exceptions import EmptyPlanError
from ...ui.display.report_table import show_report
from ...ui.presenter.presenter_display import run_presenter
from ...ui.theming.theme_engine import styled_checkmark
from ..app import app
from ..decorators import handle_cadence_error
from ..helpers import load_plan, resolve_plan_path


# Live needs a real terminal for screen mode & raw key reads
def _is_interactive() -> bool:
    return bool(console.is_terminal)


@app.command(
    name="present",
    help="Present a plan w/ live section & schedule timers (space: play/pause, n/p: navigate, f: finish, q: quit)",
)
@handle_cadence_error
def present(
    ctx: typer.Context,
    plan: Optional[Path] = typer.Argument(
        None,
        help="Plan JSON file (defaults to the plan_path setting)",
        envvar="CADENCE_PLAN",
    ),
    save: bool = typer.Option(
        False, "--save", "-s", help="Save the report into the report_dir setting"
    ),
    save_report: Optional[Path] = typer.Option(
        None, "--save-report", "-o", help="Save the report JSON to this path"
    ),
) -> None:
    settings = get_settings(ctx)
    plan_path = resolve_plan_path(settings, plan)
    presentation = load_plan(plan_path)
    if not presentation.sections:
        raise EmptyPlanError()

    if not _is_interactive():
        console.print("[warning]Presenting mode needs an interactive terminal.[/]")
        raise typer.Exit(1)

    report = run_presenter(
        presentation,
        refresh_per_second=settings.refresh_per_second,
        show_next_section=settings.show_next_section,
    )
    if report is None:
        console.print("[dim]Presentation ended before the last section; no report generated.[/]")
        return

    show_report(report)

    target = save_report
    if target is None and save:
        target = default_report_path(settings.report_path)
    if target is not None:
        write_report(target, presentation, report)
        console.print(styled_checkmark(), f"Report saved to {target}")
