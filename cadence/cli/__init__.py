# cadence/cli/__init__.py
# CLI entry point

from .app import app

__all__ = ["app"]
