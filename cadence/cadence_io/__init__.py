# cadence/cadence_io/__init__.py
# Console & file I/O helpers

from .console import console, reset_console
from .generics import ensure_parent, read_json_safe, write_json_safe

__all__ = [
    "console",
    "reset_console",
    "ensure_parent",
    "read_json_safe",
    "write_json_safe",
]
