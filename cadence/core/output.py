# cadence/core/output.py
# Output levels & the process-wide log sink registry
# * core modules log through get_output_manager() & never import the CLI;
# * cadence/cli/output_manager.py registers the Rich-backed sink at startup

from __future__ import annotations

from enum import IntEnum
from typing import Optional, Protocol, runtime_checkable


class OutputLevel(IntEnum):
    NORMAL = 1
    VERBOSE = 2  # --verbose / --log-file
    DEBUG = 3  # --verbose w/ dev_mode


@runtime_checkable
class OutputInterface(Protocol):
    def get_level(self) -> OutputLevel: ...

    def debug(self, msg: str, category: str = "DEBUG") -> None: ...

    def verbose(self, msg: str, category: str = "INFO", detail: Optional[str] = None) -> None: ...

    def start_session(self) -> None: ...

    def end_session(self) -> None: ...


# * Sink in place until the CLI registers one; drops everything
class SilentOutput:
    def get_level(self) -> OutputLevel:
        return OutputLevel.NORMAL

    def debug(self, msg: str, category: str = "DEBUG") -> None:
        pass

    def verbose(self, msg: str, category: str = "INFO", detail: Optional[str] = None) -> None:
        pass

    def start_session(self) -> None:
        pass

    def end_session(self) -> None:
        pass


_output_manager: OutputInterface = SilentOutput()


def set_output_manager(manager: OutputInterface) -> None:
    global _output_manager
    _output_manager = manager


def get_output_manager() -> OutputInterface:
    return _output_manager


# back to the silent sink (tests & after a CLI run)
def reset_output_manager() -> None:
    set_output_manager(SilentOutput())
