# docstamp:header:start
#
#   project      : Docstamp
#   file         : main.py
#   file_relpath : src/docstamp/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# docstamp:header:end

"""Click entry point for Docstamp.

Group-level options (verbosity, color) are initialized once and placed into
``ctx.obj``; every subcommand reads its console and verbosity from there.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from docstamp.cli.commands.filetypes import filetypes_command
from docstamp.cli.commands.stamp import stamp_command
from docstamp.cli.commands.strip import strip_command
from docstamp.cli.commands.version import version_command
from docstamp.cli.console import ClickConsole
from docstamp.cli.options import (
    ColorMode,
    common_color_options,
    common_verbose_options,
    log_level_for_verbosity,
    resolve_color_mode,
    resolve_verbosity,
)
from docstamp.config.logging import get_logger, resolve_env_log_level, setup_logging

if TYPE_CHECKING:
    from docstamp.cli.console import ConsoleLike

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging & color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    verbosity: int = resolve_verbosity(verbose, quiet)
    ctx.obj["verbosity_level"] = verbosity

    # DOCSTAMP_LOG_LEVEL wins over -v; otherwise -v/-vv/-vvv raise the level
    level_env: int | None = resolve_env_log_level()
    level: int | None = level_env if level_env is not None else log_level_for_verbosity(verbosity)
    ctx.obj["log_level"] = level
    setup_logging(level=level)

    effective_color_mode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    enable_color: bool = resolve_color_mode(cli_mode=effective_color_mode, output_format=None)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="Docstamp: keep a license docstring block at the top of source files.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
) -> None:
    """Entry point for the Docstamp CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=ColorMode(color_mode) if color_mode else None,
        no_color=no_color,
    )
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'docstamp stamp -d DIR -f FILE' to add a docstring block.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(stamp_command)

cli.add_command(strip_command)

cli.add_command(filetypes_command)

if __name__ == "__main__":
    cli()
