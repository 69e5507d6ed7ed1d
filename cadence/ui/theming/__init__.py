# cadence/ui/theming/__init__.py
# Theming utilities: palettes, status colors & console theme

from .theme_definitions import THEMES, DEFAULT_THEME
from .theme_engine import (
    CadenceColors,
    get_active_theme,
    natural_gradient,
    accent_gradient,
    success_gradient,
    get_cadence_theme,
    reset_color_cache,
    apply_console_theme,
    styled_checkmark,
    styled_bullet,
)

__all__ = [
    "THEMES",
    "DEFAULT_THEME",
    "CadenceColors",
    "get_active_theme",
    "natural_gradient",
    "accent_gradient",
    "success_gradient",
    "get_cadence_theme",
    "reset_color_cache",
    "apply_console_theme",
    "styled_checkmark",
    "styled_bullet",
]
