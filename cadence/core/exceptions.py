# cadence/core/exceptions.py
# Custom exception hierarchy for Cadence (pure - no I/O operations)

from pathlib import Path
from typing import Any


# * Format error message for display (pure string formatting, no I/O)
def format_error_message(error_type: str, message: str) -> str:
    return f"[red]{error_type}:[/] {message}"


# * Base exception for Cadence application
class CadenceError(Exception):
    pass


# * Configuration errors
class ConfigurationError(CadenceError):
    pass


# * Settings value validation failed
class SettingsValidationError(ConfigurationError):
    def __init__(self, message: str, setting_name: str, value: Any):
        super().__init__(message)
        self.setting_name = setting_name
        self.value = value

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}({self.args[0]!r}, "
            f"setting_name={self.setting_name!r}, value={self.value!r})"
        )


# * JSON parsing errors
class JSONParsingError(CadenceError):
    pass


# * Base error for presentation plans
class PlanError(CadenceError):
    pass


# * Presentation mode requested for a plan w/out sections
class EmptyPlanError(PlanError):
    def __init__(self, message: str = "Plan has no sections; add at least one section before presenting"):
        super().__init__(message)


# * Plan document has an unexpected shape
class PlanFormatError(PlanError):
    def __init__(self, message: str, path: Path | str | None = None):
        super().__init__(message)
        self.path = Path(path) if isinstance(path, str) else path

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.args[0]!r}, path={self.path!r})"


# * Report could not be built from the given input
class ReportError(CadenceError):
    pass


# * Base error for file I/O operations
class FileOperationError(CadenceError):
    def __init__(self, message: str, path: Path | str):
        super().__init__(message)
        self.path = Path(path) if isinstance(path, str) else path

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.args[0]!r}, path={self.path!r})"


# * Failed to read file
class FileReadError(FileOperationError):
    pass


# * Failed to write file
class FileWriteError(FileOperationError):
    pass
