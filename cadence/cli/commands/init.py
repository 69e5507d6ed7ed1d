# cadence/cli/commands/init.py
# Write a starter presentation plan

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from ...cadence_io.console import console
from ...config.plan_store import PlanStore, default_plan
from ...config.settings import get_settings
from ..app import app
from ..decorators import handle_cadence_error
from ..helpers import resolve_plan_path


@app.command(name="init", help="Create a starter plan (Introduction / Demo / Closing)")
@handle_cadence_error
def init_plan(
    ctx: typer.Context,
    path: Optional[Path] = typer.Argument(
        None, help="Where to write the plan (defaults to the plan_path setting)"
    ),
    force: bool = typer.Option(
        False, "--force", "-f", help="Overwrite an existing plan file"
    ),
) -> None:
    settings = get_settings(ctx)
    store = PlanStore(resolve_plan_path(settings, path))

    if store.exists() and not force:
        raise typer.BadParameter(
            f"Plan file {store.path} already exists (use --force to overwrite)"
        )

    store.save(default_plan())
    console.print(f"[green]Initialized plan[/] at {store.path}")
    console.print(f"[dim]Edit it, then run [/][cadence.accent2]cadence present {store.path}[/]")
