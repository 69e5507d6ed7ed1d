# cadence/cli/commands/config.py
# Settings mgmt subcommands for Cadence CLI (list/get/set/reset/path) w/ JSON-backed storage

from __future__ import annotations

import json
from dataclasses import fields
from typing import Any

import typer
from rich.markup import escape

from ...cadence_io.console import console
from ...config.settings import CadenceSettings, settings_manager
from ...ui.theming.theme_definitions import THEMES
from ...ui.theming.theme_engine import (
    accent_gradient,
    apply_console_theme,
    styled_bullet,
    styled_checkmark,
    success_gradient,
)
from ..app import app

# * Sub-app for config commands; registered on root app
config_app = typer.Typer(
    rich_markup_mode="rich", help="[cadence.accent2]Manage Cadence settings[/]"
)
app.add_typer(config_app, name="config")


def _known_keys() -> set[str]:
    return {f.name for f in fields(CadenceSettings)}


def _valid_themes() -> set[str]:
    return set(THEMES.keys())


# coerce string value to JSON value (numbers, bools, null) or keep raw string
def _coerce_value(raw: str) -> Any:
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw


def _require_known(key: str) -> None:
    if key not in _known_keys():
        raise typer.BadParameter(f"Unknown setting: {key}")


# * Print current settings & config path
def _print_current_settings() -> None:
    data = settings_manager.list_settings()

    console.print()
    console.print(accent_gradient("Current Configuration"))
    console.print(f"[dim]Config file: {escape(str(settings_manager.config_path))}[/]")
    console.print()

    width = max(len(k) for k in data)
    for key, value in data.items():
        console.print(
            styled_bullet(),
            f"[cadence.accent]{key.ljust(width)}[/]",
            f"[cadence.accent2]{escape(json.dumps(value))}[/]",
        )

    console.print()
    console.print(
        "[dim]Use [/][cadence.accent2]cadence config --help[/][dim] to see available commands[/]"
    )


@config_app.callback(invoke_without_command=True)
def config_callback(ctx: typer.Context) -> None:
    if ctx.invoked_subcommand is None:
        _print_current_settings()


# * Get a specific setting value & print as JSON
@config_app.command()
def get(key: str) -> None:
    _require_known(key)
    value = settings_manager.get(key)
    # print JSON for consistency (strings quoted)
    console.print(f"[cadence.accent2]{escape(json.dumps(value))}[/]")


# * Set a specific setting value; values are JSON-coerced when possible
@config_app.command(name="set")
def set_cmd(key: str, value: str) -> None:
    _require_known(key)

    if key == "theme" and value not in _valid_themes():
        valid_themes = ", ".join(sorted(_valid_themes()))
        raise typer.BadParameter(
            f"Invalid theme '{value}'. Valid themes: {valid_themes}"
        )

    # path-like settings stay strings even when they parse as JSON (e.g. "2024")
    coerced: Any = value if key in ("plan_path", "report_dir", "theme") else _coerce_value(value)
    try:
        settings_manager.set(key, coerced)
    except (TypeError, ValueError) as e:
        raise typer.BadParameter(str(e))

    if key == "theme":
        apply_console_theme()

    console.print(
        styled_checkmark(),
        success_gradient(f"Set {key}"),
        f"[cadence.accent2]{escape(json.dumps(coerced))}[/]",
    )


# * Reset all settings to defaults
@config_app.command()
def reset() -> None:
    settings_manager.reset()
    console.print(styled_checkmark(), success_gradient("Reset settings to defaults"))


# * Show the configuration file path
@config_app.command()
def path() -> None:
    console.print(f"[cadence.accent2]{escape(str(settings_manager.config_path))}[/]")


# * Explicit 'list' command to show current settings
@config_app.command(name="list")
def list_cmd() -> None:
    _print_current_settings()
