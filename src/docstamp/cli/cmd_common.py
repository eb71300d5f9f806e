# docstamp:header:start
#
#   project      : Docstamp
#   file         : cmd_common.py
#   file_relpath : src/docstamp/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# docstamp:header:end

"""Helpers shared by the ``stamp`` and ``strip`` commands."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from docstamp.cli.console import get_console
from docstamp.cli.errors import DocstampBatchError, to_cli_error
from docstamp.cli.exit_codes import ExitCode
from docstamp.cli.utils import render_result, render_summary_counts
from docstamp.config import MutableConfig
from docstamp.config.logging import get_logger
from docstamp.constants import FILE_NAME_SENTINEL
from docstamp.errors import DocstampError

if TYPE_CHECKING:
    from docstamp.cli.console import ConsoleLike
    from docstamp.config import ArgsLike, Config
    from docstamp.config.logging import DocstampLogger
    from docstamp.engine import FileResult, RunSummary

logger: DocstampLogger = get_logger(__name__)


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity stored on the context (0 if unset)."""
    obj = ctx.obj if isinstance(ctx.obj, dict) else {}
    return int(obj.get("verbosity_level", 0))


def prompt_missing_target(
    directory: str | None,
    file_name: str | None,
    *,
    update: bool,
) -> tuple[str, str]:
    """Ask for the directory and file (or extension) when they were not given.

    A file name left at the ``*.*`` sentinel counts as not given.

    Returns:
        tuple[str, str]: The directory and the file name (single mode) or
            extension (update mode).
    """
    target_dir: str = directory or str(
        click.prompt("Directory to create/update the file in", type=str)
    )
    if not file_name or file_name == FILE_NAME_SENTINEL:
        label: str = "File extension to update (e.g. *.py)" if update else "File name"
        file_name = str(click.prompt(label, type=str))
    return target_dir.strip(), file_name.strip()


def resolve_config(
    *,
    directory: Path,
    no_config: bool,
    config_paths: tuple[str, ...] | list[str],
    overrides: ArgsLike,
) -> Config:
    """Merge discovered config files, ``--config`` files and CLI overrides.

    Discovery starts from ``directory`` when it exists, else from the CWD.

    Raises:
        DocstampConfigError: If a config file is malformed.
    """
    anchor: Path = directory if directory.is_dir() else Path.cwd()
    try:
        draft: MutableConfig = MutableConfig.load_merged(
            anchor=anchor,
            extra_config_files=[Path(p) for p in config_paths],
            no_config=no_config,
        )
    except DocstampError as e:
        raise to_cli_error(e) from e
    config: Config = draft.apply_cli_args(overrides).freeze()
    logger.debug("Effective config: %s", config)
    return config


def report_single(ctx: click.Context, result: FileResult, *, dry_run: bool) -> None:
    """Print a single-file result and exit with WOULD_CHANGE for a changing dry run."""
    console: ConsoleLike = get_console(ctx)
    if get_effective_verbosity(ctx) >= 0:
        render_result(console, result, dry_run=dry_run)
    if dry_run and result.outcome.changes_file:
        ctx.exit(ExitCode.WOULD_CHANGE)


def report_summary(ctx: click.Context, summary: RunSummary, *, dry_run: bool) -> None:
    """Print a batch summary and map it onto the exit code.

    Raises:
        DocstampBatchError: If any file failed (``--keep-going`` runs).
    """
    console: ConsoleLike = get_console(ctx)
    vlevel: int = get_effective_verbosity(ctx)
    if vlevel >= 0:
        for result in summary.results:
            if result.outcome.changes_file or vlevel > 0 or not result.ok:
                render_result(console, result, dry_run=dry_run)
        render_summary_counts(console, summary)
    if not summary.ok:
        raise DocstampBatchError(f"{len(summary.failures)} file(s) failed. See above for details.")
    if dry_run and summary.would_change:
        ctx.exit(ExitCode.WOULD_CHANGE)
