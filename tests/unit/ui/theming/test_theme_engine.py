# tests/unit/ui/theming/test_theme_engine.py
# Unit tests for theme lookup, color caching & gradient helpers

from rich.console import Console

from cadence.config.settings import settings_manager
from cadence.ui.theming.theme_definitions import DEFAULT_THEME, THEMES
from cadence.ui.theming.theme_engine import (
    CadenceColors,
    accent_gradient,
    get_active_theme,
    get_cadence_theme,
    natural_gradient,
    reset_color_cache,
)


def test_default_theme_active():
    assert get_active_theme() == THEMES[DEFAULT_THEME]
    assert CadenceColors.ACCENT_PRIMARY == THEMES[DEFAULT_THEME][0]


# * saving a new theme invalidates the cached accent colors
def test_theme_change_updates_colors():
    settings_manager.set("theme", "stage_dark")
    assert CadenceColors.ACCENT_PRIMARY == THEMES["stage_dark"][0]
    assert CadenceColors.ACCENT_SECONDARY == THEMES["stage_dark"][2]


def test_unknown_theme_falls_back(isolate_config):
    config = isolate_config / ".cadence" / "config.json"
    config.write_text('{"theme": "neon"}')
    settings_manager._settings = None
    reset_color_cache()

    assert get_active_theme() == THEMES[DEFAULT_THEME]


def test_gradient_one_style_per_char():
    text = natural_gradient("Cadence")
    assert text.plain == "Cadence"
    assert len(text.spans) == len("Cadence")
    assert natural_gradient("").plain == ""
    assert accent_gradient("x").plain == "x"


# * every cadence.* style used in markup resolves against the theme
def test_theme_styles_resolve():
    console = Console(theme=get_cadence_theme())
    for name in ("cadence.accent", "cadence.accent2", "cadence.ahead", "cadence.behind", "warning", "dim"):
        assert console.get_style(name) is not None


# * re-applying after a theme change replaces the pushed theme instead of stacking
def test_apply_console_theme_replaces_push(recording_console):
    from cadence.ui.theming.theme_engine import apply_console_theme

    apply_console_theme()
    settings_manager.set("theme", "stage_dark")
    apply_console_theme()

    style = recording_console.get_style("cadence.accent")
    assert style.color.name == THEMES["stage_dark"][0]
    recording_console.pop_theme()
