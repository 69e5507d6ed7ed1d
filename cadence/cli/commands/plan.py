# cadence/cli/commands/plan.py
# Show a presentation plan: sections, presenters & planned total vs allowed range

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from ...config.settings import get_settings
from ...ui.display.plan_table import show_plan
from ..app import app
from ..decorators import handle_cadence_error
from ..helpers import load_plan, resolve_plan_path


@app.command(name="plan", help="Show sections, presenters & planned total for a plan")
@handle_cadence_error
def plan_cmd(
    ctx: typer.Context,
    plan: Optional[Path] = typer.Argument(
        None,
        help="Plan JSON file (defaults to the plan_path setting)",
        envvar="CADENCE_PLAN",
    ),
) -> None:
    settings = get_settings(ctx)
    plan_path = resolve_plan_path(settings, plan)
    show_plan(load_plan(plan_path), source=str(plan_path))
