# docstamp:header:start
#
#   project      : Docstamp
#   file         : strip.py
#   file_relpath : src/docstamp/cli/commands/strip.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# docstamp:header:end

"""Docstamp ``strip`` command.

Removes the license docstring block (and its blank separator line) from one
file, or from every file with a given extension under a directory. Files
without a block are left untouched.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from docstamp.cli.cmd_common import (
    prompt_missing_target,
    report_single,
    report_summary,
    resolve_config,
)
from docstamp.cli.errors import to_cli_error
from docstamp.cli.options import common_config_options, common_target_options
from docstamp.config.logging import get_logger
from docstamp.engine import strip_file, strip_tree
from docstamp.errors import DocstampError
from docstamp.writer import select_sink

if TYPE_CHECKING:
    from docstamp.config import Config
    from docstamp.config.logging import DocstampLogger
    from docstamp.engine import FileResult, RunSummary
    from docstamp.writer import WriteSink

logger: DocstampLogger = get_logger(__name__)


@click.command(
    name="strip",
    help="Remove the license docstring block from files.",
    epilog="""\
Examples:

  # Preview removal from a single file
  docstamp strip -d src -f main.c --dry-run

  # Remove the block from every Go file below src
  docstamp strip -d src -u -f '*.go'
""",
)
@common_target_options
@common_config_options
def strip_command(
    *,
    directory: str | None,
    file_name: str | None,
    update: bool,
    exclude: tuple[str, ...],
    keep_going: bool,
    dry_run: bool,
    no_config: bool,
    config_paths: tuple[str, ...],
) -> None:
    """Remove the docstring block of one file or a directory tree.

    Exit Status:
      SUCCESS (0): Blocks removed, or no file held one.
      FAILURE (1): ``--keep-going`` run finished with per-file failures.
      WOULD_CHANGE (2): ``--dry-run`` found blocks that would be removed.
      ENCODING_ERROR (65): A file is not valid UTF-8.
      FILE_NOT_FOUND (66): Missing file/directory or unknown extension.
      IO_ERROR (74): A file could not be written.
      CONFIG_ERROR (78): A config file is malformed.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)

    directory, file_name = prompt_missing_target(directory, file_name, update=update)
    root = Path(directory)
    config: Config = resolve_config(
        directory=root,
        no_config=no_config,
        config_paths=config_paths,
        overrides={"keep_going": keep_going, "exclude": list(exclude)},
    )
    sink: WriteSink = select_sink(dry_run=dry_run)

    try:
        if update:
            summary: RunSummary = strip_tree(
                root,
                file_name,
                keep_going=config.keep_going,
                exclude=config.exclude_patterns,
                sink=sink,
            )
        else:
            result: FileResult = strip_file(root / file_name, sink=sink)
    except DocstampError as e:
        logger.error("%s", e)
        raise to_cli_error(e) from e

    if update:
        report_summary(ctx, summary, dry_run=dry_run)
    else:
        report_single(ctx, result, dry_run=dry_run)
