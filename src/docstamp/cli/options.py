# docstamp:header:start
#
#   project      : Docstamp
#   file         : options.py
#   file_relpath : src/docstamp/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# docstamp:header:end

"""Common CLI option utilities for Docstamp.

This module centralizes reusable options (verbosity, color, config) and their
resolution logic, so commands and groups can stay thin. The helpers here are
Click-aware.
"""

import logging
import os
import sys
from enum import Enum
from typing import Callable, ParamSpec, TypeVar

import click

from docstamp.cli.errors import DocstampUsageError
from docstamp.config.logging import TRACE_LEVEL, get_logger
from docstamp.constants import FILE_NAME_SENTINEL

P = ParamSpec("P")
R = TypeVar("R")

logger = get_logger(__name__)


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve program-output verbosity from the -v / -q counts.

    Args:
        verbose_count: Number of times the verbose flag (-v) is passed.
        quiet_count: Number of times the quiet flag (-q) is passed.

    Returns:
        ``-1`` when quiet, ``0`` by default, otherwise the number of ``-v`` flags.

    Raises:
        DocstampUsageError: If both verbose and quiet flags are used simultaneously.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise DocstampUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    if quiet_count > 0:
        return -1
    return verbose_count


def log_level_for_verbosity(verbosity: int) -> int | None:
    """Map program-output verbosity to a logging level.

    ``-vvv`` enables TRACE, ``-vv`` DEBUG and ``-v`` INFO. Lower verbosity
    returns ``None`` (leave the level to the environment or the default).
    """
    if verbosity >= 3:
        return TRACE_LEVEL
    if verbosity == 2:
        return logging.DEBUG
    if verbosity == 1:
        return logging.INFO
    return None


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --verbose and --quiet options to a command.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function with verbosity options added.
    """
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify up to three times for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress non-error output.",
    )(f)
    return f


class ColorMode(str, Enum):
    """User intent for colorized terminal output."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    cli_mode: ColorMode | None,
    output_format: str | None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Args:
        cli_mode: Explicit color mode from CLI options (auto, always, never).
        output_format: Output format string, e.g. "json".
        stdout_isatty: Whether stdout is a TTY; if None, auto-detected.

    Returns:
        True if color output should be enabled, False otherwise.

    Behavior:
        Disables color for JSON output.
        Honors --color and --no-color CLI flags.
        Honors FORCE_COLOR and NO_COLOR environment variables.
        Defaults to enabling color if stdout is a TTY.
    """
    if output_format and output_format.lower() == "json":
        return False
    if cli_mode == ColorMode.ALWAYS:
        return True
    if cli_mode == ColorMode.NEVER:
        return False
    force_color = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False
    if stdout_isatty is None:
        try:
            stdout_isatty = sys.stdout.isatty()
        except (AttributeError, OSError, ValueError):
            stdout_isatty = False
    return bool(stdout_isatty)


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --color and --no-color options to a command.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function with color options added.
    """
    f = click.option(
        "--color",
        "color_mode",
        type=click.Choice([m.value for m in ColorMode]),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Apply common configuration options to a Click command.

    Adds ``--no-config`` and ``--config`` options.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function.
    """
    f = click.option(
        "--no-config",
        "no_config",
        is_flag=True,
        help="Ignore discovered project config files (only use defaults and --config).",
    )(f)
    f = click.option(
        "--config",
        "config_paths",
        multiple=True,
        metavar="FILE",
        type=click.Path(exists=True, file_okay=True, dir_okay=False, readable=True),
        help="Additional config file(s) to load and merge.",
    )(f)
    return f


def common_target_options(f: Callable[P, R]) -> Callable[P, R]:
    """Apply the target-selection options shared by ``stamp`` and ``strip``.

    Adds ``-d/--directory``, ``-f/--file``, ``-u/--update``, ``-e/--exclude``,
    ``--keep-going`` and ``--dry-run``.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function.
    """
    f = click.option(
        "--dry-run",
        "dry_run",
        is_flag=True,
        help="Report what would change without writing files.",
    )(f)
    f = click.option(
        "--keep-going",
        "keep_going",
        is_flag=True,
        help="In update mode, continue after a per-file error and report it at the end.",
    )(f)
    f = click.option(
        "-e",
        "--exclude",
        "exclude",
        multiple=True,
        metavar="PATTERN",
        help="Gitignore-style pattern (relative to DIRECTORY) to skip in update mode.",
    )(f)
    f = click.option(
        "-u",
        "--update",
        "update",
        is_flag=True,
        help="Recursively process every file under DIRECTORY with the extension of --file.",
    )(f)
    f = click.option(
        "-f",
        "--file",
        "file_name",
        default=FILE_NAME_SENTINEL,
        show_default=True,
        metavar="FILE",
        help=(
            "File name (single mode) or extension such as '*.py' (update mode). "
            f"Prompted for when left at '{FILE_NAME_SENTINEL}'."
        ),
    )(f)
    f = click.option(
        "-d",
        "--directory",
        "directory",
        default=None,
        metavar="DIR",
        help="Directory holding the file (single mode) or to walk (update mode).",
    )(f)
    return f
