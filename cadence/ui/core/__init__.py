# cadence/ui/core/__init__.py
# Shared Rich building blocks

from .rich_components import themed_panel, themed_table

__all__ = ["themed_panel", "themed_table"]
