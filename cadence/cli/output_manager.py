# cadence/cli/output_manager.py
# Rich console & plain-text log file sink for verbose and debug output

from __future__ import annotations

import time
from datetime import datetime
from pathlib import Path
from typing import Optional, TextIO

from rich.markup import escape

from ..cadence_io.console import console
from ..core.output import OutputLevel

RULE = "=" * 60


# * Registered via set_output_manager() by the root callback; one per CLI invocation
class OutputManager:
    def __init__(self) -> None:
        self._level = OutputLevel.NORMAL
        self._dev_mode = False
        self._started = time.time()
        self._log_path: Path | None = None
        self._log: Optional[TextIO] = None

    # DEBUG is only reachable w/ dev_mode; otherwise capped at VERBOSE
    def initialize(
        self,
        requested_level: OutputLevel = OutputLevel.NORMAL,
        dev_mode: bool = False,
        log_file: Path | None = None,
    ) -> None:
        self._dev_mode = dev_mode
        ceiling = OutputLevel.DEBUG if dev_mode else OutputLevel.VERBOSE
        self._level = min(requested_level, ceiling)
        self._started = time.time()
        self._open_log(log_file)

    def get_level(self) -> OutputLevel:
        return self._level

    @property
    def log_file_path(self) -> Path | None:
        return self._log_path

    def debug(self, msg: str, category: str = "DEBUG") -> None:
        if self._level < OutputLevel.DEBUG:
            return
        console.print(f"[debug]\\[{category}][/] {escape(msg)}")
        self._write(f"[{self._elapsed()}] [{category}] {msg}")

    def verbose(self, msg: str, category: str = "INFO", detail: Optional[str] = None) -> None:
        if self._level < OutputLevel.VERBOSE:
            return
        stamp = self._elapsed()
        console.print(f"[dim]\\[{stamp}][/] [bold cyan]\\[{category}][/] {escape(msg)}")
        self._write(f"[{stamp}] [{category}] {msg}")
        for line in (detail or "").splitlines():
            console.print(f"  [dim]{escape(line)}[/]")
            self._write(f"  {line}")

    def start_session(self) -> None:
        self._started = time.time()
        lines = [f"Session Started: {datetime.now().isoformat()}", f"Level: {self._level.name}"]
        if self._dev_mode:
            lines.append("Mode: Developer (dev_mode enabled)")
        self._banner(lines)

    def end_session(self) -> None:
        self._banner([f"Session Ended: {datetime.now().isoformat()}"])
        self.close()

    def close(self) -> None:
        if self._log is not None:
            self._log.close()
            self._log = None

    def _elapsed(self) -> str:
        return f"{time.time() - self._started:.2f}s"

    def _open_log(self, log_file: Path | None) -> None:
        self.close()
        self._log_path = None
        if log_file is None:
            return
        try:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            self._log = open(log_file, "a", encoding="utf-8")
        except OSError as e:
            # logging must never take the timer down
            console.print(f"[warning]Could not open log file {escape(str(log_file))}: {escape(str(e))}[/]")
            return
        self._log_path = log_file

    def _banner(self, lines: list[str]) -> None:
        if self._log is None:
            return
        self._write(f"\n{RULE}")
        for line in lines:
            self._write(line)
        self._write(f"{RULE}\n")

    def _write(self, line: str) -> None:
        if self._log is not None:
            self._log.write(f"{line}\n")
            self._log.flush()
