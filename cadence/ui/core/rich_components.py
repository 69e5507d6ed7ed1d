# cadence/ui/core/rich_components.py
# Centralized Rich component imports & themed builders

from __future__ import annotations

from typing import Any

# Core Rich components
from rich.console import Console, RenderableType, Group
from rich.text import Text
from rich.theme import Theme

# Layout & display components
from rich.panel import Panel
from rich.table import Table
from rich.live import Live
from rich.align import Align
from rich.progress_bar import ProgressBar
from rich import box


# * Themed Panel builder - consistent styling across UI
def themed_panel(
    content: Any,
    title: str | None = None,
    padding: tuple[int, int] = (0, 1),
    **kwargs: Any,
) -> Panel:
    # lazy import to avoid circular dependency
    from ..theming.theme_engine import CadenceColors

    formatted_title = f"[bold]{title}[/]" if title else None
    return Panel(
        content,
        title=formatted_title,
        title_align=kwargs.pop("title_align", "left"),
        border_style=kwargs.pop("border_style", CadenceColors.ACCENT_SECONDARY),
        padding=padding,
        **kwargs,
    )


# * Themed Table builder - consistent styling across UI
def themed_table(show_header: bool = True, **kwargs: Any) -> Table:
    from ..theming.theme_engine import CadenceColors

    return Table(
        border_style=kwargs.pop("border_style", CadenceColors.ACCENT_SECONDARY),
        header_style=kwargs.pop("header_style", f"bold {CadenceColors.ACCENT_PRIMARY}"),
        show_header=show_header,
        box=kwargs.pop("box", box.SIMPLE_HEAVY),
        **kwargs,
    )


__all__ = [
    "Console",
    "RenderableType",
    "Group",
    "Text",
    "Theme",
    "Panel",
    "Table",
    "Live",
    "Align",
    "ProgressBar",
    "box",
    "themed_panel",
    "themed_table",
]
