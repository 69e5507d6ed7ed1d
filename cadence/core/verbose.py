# cadence/core/verbose.py
# Structured verbose logging for timer transitions, sessions, file I/O & config

from __future__ import annotations

from pathlib import Path
from typing import Any

from .output import OutputLevel, get_output_manager, set_output_manager


# * Register the CLI output manager for this invocation
def init_verbose(
    enabled: bool = False,
    log_file: Path | None = None,
    dev_mode: bool = False,
) -> None:
    from ..cli.output_manager import OutputManager

    if enabled and dev_mode:
        requested_level = OutputLevel.DEBUG
    elif enabled:
        requested_level = OutputLevel.VERBOSE
    else:
        requested_level = OutputLevel.NORMAL

    manager = OutputManager()
    manager.initialize(requested_level=requested_level, dev_mode=dev_mode, log_file=log_file)
    set_output_manager(manager)


def vlog(category: str, message: str, detail: str | None = None) -> None:
    get_output_manager().verbose(message, category, detail)


# * Timer state transitions (play, pause, navigation, finish)
def vlog_transition(action: str, detail: str | None = None) -> None:
    get_output_manager().verbose(action, "TIMER", detail)


# * Presenter session lifecycle
def vlog_session(event: str, detail: str | None = None) -> None:
    get_output_manager().verbose(event, "SESSION", detail)


def vlog_file_read(path: Path, size: int | None = None) -> None:
    size_str = f" ({size:,} bytes)" if size is not None else ""
    get_output_manager().verbose(f"Read: {path}{size_str}", "FILE")


def vlog_file_write(path: Path, size: int | None = None) -> None:
    size_str = f" ({size:,} bytes)" if size is not None else ""
    get_output_manager().verbose(f"Write: {path}{size_str}", "FILE")


def vlog_config(key: str, value: Any) -> None:
    get_output_manager().verbose(f"{key} = {value}", "CONFIG")


# * Close the log file w/ a session footer
def cleanup_verbose() -> None:
    get_output_manager().end_session()
