# tests/conftest.py
# Pytest configuration w/ isolation fixtures for deterministic test runs

import json
from pathlib import Path

import pytest
from rich.console import Console


# * Manually advanced millisecond clock for tracker & engine tests
class FakeClock:
    def __init__(self, start_ms: float = 1_000.0):
        self.now_ms = start_ms

    def __call__(self) -> float:
        return self.now_ms

    def advance(self, seconds: float) -> None:
        self.now_ms += seconds * 1000.0

    def advance_ms(self, ms: float) -> None:
        self.now_ms += ms


@pytest.fixture(autouse=True)
def isolate_config(tmp_path, monkeypatch):
    # Patch Path.home() to isolated temp directory
    fake_home = tmp_path / "fake_home"
    cadence_dir = fake_home / ".cadence"
    cadence_dir.mkdir(parents=True)

    config_data = {
        "plan_path": "cadence_plan.json",
        "report_dir": "reports",
        "refresh_per_second": 30,
        "theme": "deep_blue",
        "show_next_section": True,
        "dev_mode": False,
    }
    with open(cadence_dir / "config.json", "w") as f:
        json.dump(config_data, f, indent=2)

    monkeypatch.setattr(Path, "home", lambda: fake_home)
    # keep a developer's .env / shell from leaking a plan path into CLI tests
    monkeypatch.delenv("CADENCE_PLAN", raising=False)

    # ! reset global settings_manager state & point it at the isolated config
    from cadence.config.settings import settings_manager

    settings_manager._settings = None
    settings_manager.config_path = cadence_dir / "config.json"

    # ! reset CadenceColors cache to pick up isolated settings
    from cadence.ui.theming.theme_engine import reset_color_cache

    reset_color_cache()

    # ! reset output manager to the silent sink for test isolation
    from cadence.core.output import reset_output_manager

    reset_output_manager()

    yield fake_home

    reset_output_manager()


@pytest.fixture
def fake_clock():
    return FakeClock()


@pytest.fixture
def recording_console():
    # swap the shared console for a recording one; every module prints through the proxy
    from cadence.cadence_io.console import console, reset_console
    from cadence.ui.theming.theme_engine import get_cadence_theme

    recorder = Console(
        record=True, width=120, force_terminal=False, theme=get_cadence_theme()
    )
    console._set_console(recorder)
    yield recorder
    reset_console()


@pytest.fixture
def three_section_plan():
    # 3 min / 5 min / 2 min, allowed range 10-15 min
    from cadence.core.types import PresentationPlan, Section

    return PresentationPlan(
        sections=[
            Section("Intro", "Ana", planned_minutes=3),
            Section("Demo", "Ben", planned_minutes=5),
            Section("Wrap", "Ana", planned_minutes=2),
        ],
        presenters=["Ana", "Ben"],
        min_time_minutes=10,
        max_time_minutes=15,
    )


@pytest.fixture
def plan_file(tmp_path, three_section_plan):
    from cadence.config.plan_store import PlanStore

    path = tmp_path / "plan.json"
    PlanStore(path).save(three_section_plan)
    return path


@pytest.fixture
def dev_mode_enabled(isolate_config):
    # Enable dev_mode for tests that require DEBUG output
    config_file = isolate_config / ".cadence" / "config.json"

    with open(config_file, "r") as f:
        config_data = json.load(f)
    config_data["dev_mode"] = True
    with open(config_file, "w") as f:
        json.dump(config_data, f)

    from cadence.config.settings import settings_manager

    settings_manager._settings = None
    return isolate_config
