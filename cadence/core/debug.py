# cadence/core/debug.py
# Debug-level error reporting routed through the registered output manager

from .output import get_output_manager


# * Log a caught exception w/ its type; only shown at DEBUG level (--verbose w/ dev_mode)
def debug_error(error: Exception, context: str = "") -> None:
    error_msg = f"{type(error).__name__}: {error}"
    if context:
        error_msg = f"{context}: {error_msg}"
    get_output_manager().debug(error_msg, "ERROR")
