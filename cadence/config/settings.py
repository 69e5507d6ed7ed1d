# cadence/config/settings.py
# Configuration management for Cadence CLI including default plan path & display settings

from pathlib import Path
from typing import Dict, Any, Optional, cast
import typer
from dataclasses import dataclass, asdict

from ..cadence_io.generics import read_json_safe, write_json_safe
from ..core.exceptions import JSONParsingError, FileReadError


# * Default settings dataclass for Cadence CLI w/ plan location & presenter display options
@dataclass
class CadenceSettings:
    # default paths
    plan_path: str = "cadence_plan.json"
    report_dir: str = "reports"

    # presenter screen refresh cadence (frames per second)
    refresh_per_second: int = 30

    # theme setting
    theme: str = "deep_blue"

    # show the upcoming section under the main timer
    show_next_section: bool = True

    # dev mode setting (enables DEBUG output w/ --verbose)
    dev_mode: bool = False

    def __post_init__(self) -> None:
        # Validate settings values after initialization.
        if not isinstance(self.plan_path, str) or not self.plan_path.strip():
            raise ValueError(f"plan_path must be a non-empty string, got {self.plan_path!r}")

        if not isinstance(self.report_dir, str):
            raise ValueError(
                f"report_dir must be a string, got {type(self.report_dir).__name__}"
            )

        # refresh validation (bools are ints in Python; reject explicitly)
        if (
            isinstance(self.refresh_per_second, bool)
            or not isinstance(self.refresh_per_second, int)
            or not 1 <= self.refresh_per_second <= 120
        ):
            raise ValueError(
                f"refresh_per_second must be an integer 1-120, got {self.refresh_per_second!r}"
            )

        # strict bool validation (no coercion)
        if not isinstance(self.show_next_section, bool):
            raise ValueError(
                f"show_next_section must be a boolean (true/false), "
                f"got {type(self.show_next_section).__name__}"
            )

        if not isinstance(self.dev_mode, bool):
            raise ValueError(
                f"dev_mode must be a boolean (true/false), "
                f"got {type(self.dev_mode).__name__}: {self.dev_mode}"
            )

    @property
    def plan_file(self) -> Path:
        return Path(self.plan_path)

    @property
    def report_path(self) -> Path:
        return Path(self.report_dir)


# * Settings management class w/ JSON persistence for loading, saving, & modifying settings
class SettingsManager:
    def __init__(self, config_path: Optional[Path] = None):
        self.config_path = config_path or Path.home() / ".cadence" / "config.json"
        self._settings: Optional[CadenceSettings] = None

    # load settings from file or return defaults
    def load(self) -> CadenceSettings:
        if self._settings is not None:
            return self._settings

        if self.config_path.exists():
            try:
                data = read_json_safe(self.config_path)
                if not isinstance(data, dict):
                    raise TypeError("config root must be a JSON object")
                self._settings = CadenceSettings(**data)
            except (JSONParsingError, FileReadError, TypeError, ValueError) as e:
                typer.echo(f"Warning: Invalid config file {self.config_path}: {e}")
                typer.echo("Using default settings")
                self._settings = CadenceSettings()
        else:
            self._settings = CadenceSettings()

        return self._settings

    # save settings to file
    def save(self, settings: CadenceSettings) -> None:
        write_json_safe(asdict(settings), self.config_path)
        self._settings = settings
        self._notify_settings_changed()

    def _notify_settings_changed(self) -> None:
        # theme colors are cached per theme name
        from ..ui.theming.theme_engine import reset_color_cache

        reset_color_cache()

    # get a specific setting value
    def get(self, key: str) -> Any:
        settings = self.load()
        return getattr(settings, key, None)

    # set a specific setting value; re-validates through the dataclass
    def set(self, key: str, value: Any) -> None:
        settings = self.load()
        if not hasattr(settings, key):
            raise ValueError(f"Unknown setting: {key}")

        data = asdict(settings)
        data[key] = value
        self.save(CadenceSettings(**data))

    # reset to default settings
    def reset(self) -> None:
        self.save(CadenceSettings())

    # list all settings as a dictionary
    def list_settings(self) -> Dict[str, Any]:
        return asdict(self.load())


# global settings manager instance
settings_manager = SettingsManager()


# * Retrieve settings preferring injected object from Typer context
def get_settings(
    ctx: typer.Context, provided: Optional[CadenceSettings] = None
) -> CadenceSettings:
    # prefer explicitly provided settings
    if provided is not None:
        return provided

    # search ctx, parent, & root for CadenceSettings
    candidates: list[typer.Context] = [ctx]
    parent = cast(Optional[typer.Context], getattr(ctx, "parent", None))
    if parent is not None:
        candidates.append(parent)
    find_root = getattr(ctx, "find_root", None)
    root_ctx = (
        cast(Optional[typer.Context], find_root()) if callable(find_root) else None
    )
    if root_ctx is not None:
        candidates.append(root_ctx)

    for c in candidates:
        obj = getattr(c, "obj", None)
        if isinstance(obj, CadenceSettings):
            return obj

    # fallback to loading from disk
    return settings_manager.load()
