# cadence/cli/commands/report.py
# Rebuild & print a timing report from a saved report or a raw history list

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer

from ...cadence_io.console import console
from ...cadence_io.report_io import load_report
from ..app import app
from ..decorators import handle_cadence_error
from ..helpers import load_plan
from ...ui.display.report_table import show_report


@app.command(name="report", help="Print the timing report for a saved run")
@handle_cadence_error
def report_cmd(
    source: Path = typer.Argument(
        ..., help="Saved report JSON, or a JSON list of per-section seconds"
    ),
    plan: Optional[Path] = typer.Option(
        None,
        "--plan",
        "-p",
        help="Plan JSON to pair w/ the history (overrides any embedded plan)",
    ),
    as_json: bool = typer.Option(
        False, "--json", help="Print the report as JSON instead of a table"
    ),
) -> None:
    override = load_plan(plan) if plan is not None else None
    _, report = load_report(source, override)

    if as_json:
        console.print_json(json.dumps(report.to_dict()))
        return
    show_report(report)
