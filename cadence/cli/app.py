# cadence/cli/app.py
# Root Typer application & command registration
#
# ! Command imports at bottom of file are deferred to avoid circular dependencies
# ! w/ the app object they register on.

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv

# load environment variables once at startup (e.g. CADENCE_PLAN)
load_dotenv()

from ..config.settings import settings_manager
from ..cadence_io.console import console


app = typer.Typer(
    rich_markup_mode="rich",
    add_completion=False,
    no_args_is_help=False,
    help="Keep a multi-section talk on schedule from the terminal.",
    context_settings={"help_option_names": ["--help", "-h"]},
)


# * Load settings, theme & logging before any subcommand runs
@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable verbose logging for debugging"
    ),
    log_file: Optional[Path] = typer.Option(
        None, "--log-file", help="Write verbose logs to file (enables verbose mode)"
    ),
) -> None:
    # respect injected ctx.obj from tests/embedding; only load if absent
    if getattr(ctx, "obj", None) is None:
        ctx.obj = settings_manager.load()

    from ..ui.theming.theme_engine import apply_console_theme

    apply_console_theme()

    # must be after settings load to check dev_mode
    from ..core.output import get_output_manager
    from ..core.verbose import cleanup_verbose, init_verbose, vlog_config

    # log_file implies verbose mode
    verbose_enabled = verbose or log_file is not None
    dev_mode = getattr(ctx.obj, "dev_mode", False)
    init_verbose(enabled=verbose_enabled, log_file=log_file, dev_mode=dev_mode)
    get_output_manager().start_session()
    # flush session footer & close the log file when the command exits
    ctx.call_on_close(cleanup_verbose)
    vlog_config("config_path", settings_manager.config_path)

    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())
        ctx.exit()


# ! import command modules here to avoid circular import w/ app object
from .commands import present as _present  # noqa: F401,E402
from .commands import plan as _plan  # noqa: F401,E402
from .commands import report as _report  # noqa: F401,E402
from .commands import init as _init  # noqa: F401,E402
from .commands import config as _config  # noqa: F401,E402
