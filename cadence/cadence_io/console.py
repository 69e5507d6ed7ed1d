# cadence/cadence_io/console.py
# Shared Rich console every module prints through

# The proxy lets the CLI push themes & tests swap in a recording Console
# without breaking module-level `from ..cadence_io.console import console` references.

from __future__ import annotations

from typing import Any

from rich.console import Console


class _ConsoleProxy:
    __slots__ = ("_console",)

    def __init__(self) -> None:
        self._console = Console()

    def __getattr__(self, name: str) -> Any:
        return getattr(self._console, name)

    def _set_console(self, new_console: Console) -> None:
        self._console = new_console

    def _get_console(self) -> Console:
        return self._console


console = _ConsoleProxy()


# * Swap in a fresh default Console (tests)
def reset_console() -> Console:
    console._set_console(Console())
    return console._get_console()


__all__ = ["console", "reset_console"]
