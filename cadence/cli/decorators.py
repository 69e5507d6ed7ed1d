# cadence/cli/decorators.py
# CLI decorator for turning Cadence errors into styled messages & exit codes

import functools
from typing import Callable, TypeVar, Any

from rich.markup import escape

from ..core.debug import debug_error
from ..core.exceptions import (
    CadenceError,
    ConfigurationError,
    JSONParsingError,
    PlanError,
    ReportError,
    FileOperationError,
    format_error_message,
)

F = TypeVar("F", bound=Callable[..., Any])

# most specific first; first isinstance match wins
_ERROR_LABELS: list[tuple[type[CadenceError], str]] = [
    (JSONParsingError, "JSON Parsing Error"),
    (PlanError, "Plan Error"),
    (ReportError, "Report Error"),
    (ConfigurationError, "Configuration Error"),
    (FileOperationError, "File Error"),
]


def _label_for(error: CadenceError) -> str:
    for error_type, label in _ERROR_LABELS:
        if isinstance(error, error_type):
            return label
    return "Error"


# * Decorator for handling Cadence errors in CLI commands w/ Rich output
def handle_cadence_error(func: F) -> F:
    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        # ! Lazy import to avoid circular dependencies
        from ..cadence_io.console import console

        try:
            return func(*args, **kwargs)
        except CadenceError as e:
            debug_error(e, func.__name__)
            console.print(format_error_message(_label_for(e), escape(str(e))))
            raise SystemExit(1)

    return wrapper  # type: ignore[return-value]
