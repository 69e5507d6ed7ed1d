# cadence/ui/presenter/presenter_input.py
# Key bindings for the interactive presenter

from __future__ import annotations

import os
import queue
import sys
import threading
from typing import TYPE_CHECKING, Any, Callable, TextIO

from readchar import key, readkey

if TYPE_CHECKING:
    from ...core.schedule import ScheduleEngine

# readchar uses termios for raw mode on POSIX; Windows consoles need no restore
termios: Any
if sys.platform == "win32":
    termios = None
else:
    import termios


NEXT_KEYS = (key.RIGHT, "l", "n")
PREV_KEYS = (key.LEFT, "h", "p")
QUIT_KEYS = ("q", "Q", key.ESC, key.CTRL_C)

# seconds stop() waits for the reader thread to exit
JOIN_TIMEOUT = 0.1


# * Maps keys to engine operations; handle_key() returns False to leave the loop
class PresenterInputHandler:
    def __init__(self, engine: "ScheduleEngine"):
        self.engine = engine

    def handle_key(self, k: str) -> bool:
        if k in QUIT_KEYS:
            return False
        if k == key.SPACE:
            self.engine.toggle_play_pause()
        elif k in NEXT_KEYS:
            self.engine.go_next()
        elif k in PREV_KEYS:
            self.engine.go_prev()
        elif k in ("r", "R"):
            self.engine.reset_current_section()
        elif k in ("f", "F"):
            self.engine.finish_presentation()
        return True


# * Reads keys on a daemon thread & hands them to the main loop through a queue;
# * the reader never touches engine state
class KeyReader:
    def __init__(self, read: Callable[[], str] = readkey, stream: TextIO | None = None):
        self._read = read
        self._stream = stream if stream is not None else sys.stdin
        self._keys: "queue.Queue[str]" = queue.Queue()
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None
        self._tty_fd: int | None = None
        self._tty_attrs: list | None = None

    def start(self) -> None:
        if self._thread is not None:
            return
        self._save_tty()
        self._thread = threading.Thread(target=self._run, name="cadence-keys", daemon=True)
        self._thread.start()

    def _run(self) -> None:
        while not self._stop.is_set():
            try:
                k = self._read()
            except (EOFError, KeyboardInterrupt):
                self._keys.put(key.CTRL_C)
                return
            self._keys.put(k)

    # next key or None once timeout (seconds) passes
    def get(self, timeout: float) -> str | None:
        try:
            return self._keys.get(timeout=timeout)
        except queue.Empty:
            return None

    # a readkey() still blocked in raw mode cannot be interrupted, so the terminal
    # mode saved at start() is put back here rather than left to its finally
    def stop(self) -> None:
        self._stop.set()
        if self._thread is not None:
            self._thread.join(timeout=JOIN_TIMEOUT)
            if not self._thread.is_alive():
                self._thread = None
        self._restore_tty()

    def _save_tty(self) -> None:
        if termios is None:
            return
        try:
            fd = self._stream.fileno()
        except (AttributeError, OSError, ValueError):
            return
        if not os.isatty(fd):
            return
        self._tty_fd = fd
        self._tty_attrs = termios.tcgetattr(fd)

    def _restore_tty(self) -> None:
        if termios is None or self._tty_attrs is None:
            return
        termios.tcsetattr(self._tty_fd, termios.TCSADRAIN, self._tty_attrs)
        self._tty_fd = None
        self._tty_attrs = None
