# cadence/ui/theming/theme_engine.py
# Theme engine: palette lookup, schedule-status colors & gradient text helpers

from __future__ import annotations

from typing import Any

from rich.theme import ThemeStackError

from ..core.rich_components import Theme, Text
from .theme_definitions import THEMES, DEFAULT_THEME

# lazy import to avoid circular dependency
_settings_manager: Any = None
_import_attempted = False


def _get_settings_manager() -> Any:
    global _settings_manager, _import_attempted
    if not _import_attempted:
        _import_attempted = True
        from ...config.settings import settings_manager

        _settings_manager = settings_manager
    return _settings_manager


# current theme name; unknown names fall back to the default palette
def _get_current_theme_name() -> str:
    sm = _get_settings_manager()
    if sm:
        name = getattr(sm.load(), "theme", DEFAULT_THEME)
        if name in THEMES:
            return name
    return DEFAULT_THEME


def get_active_theme() -> list[str]:
    return THEMES[_get_current_theme_name()]


# descriptor resolving an accent color from the active theme, cached per theme name
class _LazyColorDescriptor:
    def __init__(self, index: int) -> None:
        self._index = index
        self._cached_theme: str | None = None
        self._cached_value: str | None = None

    def __get__(self, obj: object, objtype: type | None = None) -> str:
        current = _get_current_theme_name()
        if self._cached_theme != current:
            self._cached_value = THEMES[current][self._index]
            self._cached_theme = current
        return self._cached_value  # type: ignore[return-value]

    def reset(self) -> None:
        self._cached_theme = None
        self._cached_value = None


def _hex_to_rgb(hex_color: str) -> tuple[int, int, int]:
    hex_color = hex_color.lstrip("#")
    return (int(hex_color[0:2], 16), int(hex_color[2:4], 16), int(hex_color[4:6], 16))


def _rgb_to_hex(rgb: tuple[int, int, int]) -> str:
    return f"#{rgb[0]:02x}{rgb[1]:02x}{rgb[2]:02x}"


def _lerp_color(a_hex: str, b_hex: str, t: float) -> str:
    a = _hex_to_rgb(a_hex)
    b = _hex_to_rgb(b_hex)
    return _rgb_to_hex(tuple(int(round(x + (y - x) * t)) for x, y in zip(a, b)))  # type: ignore[arg-type]


# * Theme-aware accents plus fixed schedule-status colors
class CadenceColors:
    ACCENT_PRIMARY = _LazyColorDescriptor(0)
    ACCENT_LIGHT = _LazyColorDescriptor(1)
    ACCENT_SECONDARY = _LazyColorDescriptor(2)
    ACCENT_DEEP = _LazyColorDescriptor(4)
    CONTRAST = _LazyColorDescriptor(5)

    # schedule status (fixed across themes)
    AHEAD = "#10b981"  # emerald
    BEHIND = "#f97316"  # orange
    OVERTIME = "#ef4444"  # red
    IN_RANGE = "#10b981"
    OVER_RANGE = "#ef4444"

    SUCCESS = "#10b981"
    WARNING = "#ffaa00"
    ERROR = "#ff4444"
    INFO = "#4488ff"
    DIM = "#aaaaaa"
    DEBUG = "#00b5b5"

    @classmethod
    def gradient(cls) -> list[str]:
        return [cls.ACCENT_PRIMARY, cls.ACCENT_LIGHT, cls.ACCENT_SECONDARY, cls.ACCENT_DEEP]


def reset_color_cache() -> None:
    for attr in ("ACCENT_PRIMARY", "ACCENT_LIGHT", "ACCENT_SECONDARY", "ACCENT_DEEP", "CONTRAST"):
        desc = CadenceColors.__dict__.get(attr)
        if isinstance(desc, _LazyColorDescriptor):
            desc.reset()


# * Per-character gradient text w/ RGB interpolation between color stops
def natural_gradient(text: str, colors: list[str] | None = None) -> Text:
    if colors is None:
        colors = CadenceColors.gradient()

    if not text or not colors:
        return Text(text)
    if len(colors) < 2 or len(text) == 1:
        return Text(text, style=colors[0])

    result = Text()
    n_stops = len(colors)
    for i, char in enumerate(text):
        seg_pos = i / (len(text) - 1) * (n_stops - 1)
        idx = int(seg_pos)
        if idx >= n_stops - 1:
            color = colors[-1]
        else:
            color = _lerp_color(colors[idx], colors[idx + 1], seg_pos - idx)
        result.append(char, style=color)
    return result


def accent_gradient(text: str) -> Text:
    return natural_gradient(
        text,
        [CadenceColors.ACCENT_PRIMARY, CadenceColors.ACCENT_SECONDARY, CadenceColors.ACCENT_DEEP],
    )


def success_gradient(text: str) -> Text:
    return natural_gradient(text, [CadenceColors.SUCCESS, "#059669", "#047857"])


# * Rich theme w/ cadence.* style names used across the UI
def get_cadence_theme() -> Theme:
    return Theme(
        {
            "success": CadenceColors.SUCCESS,
            "warning": CadenceColors.WARNING,
            "error": CadenceColors.ERROR,
            "info": CadenceColors.INFO,
            "dim": CadenceColors.DIM,
            "debug": CadenceColors.DEBUG,
            "cadence.accent": CadenceColors.ACCENT_PRIMARY,
            "cadence.accent2": CadenceColors.ACCENT_SECONDARY,
            "cadence.contrast": CadenceColors.CONTRAST,
            "cadence.ahead": f"bold {CadenceColors.AHEAD}",
            "cadence.behind": f"bold {CadenceColors.BEHIND}",
            "cadence.overtime": f"bold {CadenceColors.OVERTIME}",
            "cadence.in_range": CadenceColors.IN_RANGE,
            "cadence.over_range": CadenceColors.OVER_RANGE,
            "cadence.ran_long": CadenceColors.OVERTIME,
            "cadence.ran_short": CadenceColors.AHEAD,
        }
    )


# * Push the theme for the current settings onto the shared console, replacing any earlier push
def apply_console_theme() -> None:
    from ...cadence_io.console import console

    reset_color_cache()
    try:
        console.pop_theme()
    except ThemeStackError:
        pass
    console.push_theme(get_cadence_theme())


def styled_checkmark() -> Text:
    return Text("✓", style=CadenceColors.SUCCESS)


def styled_bullet() -> Text:
    return Text("•", style=CadenceColors.ACCENT_SECONDARY)
