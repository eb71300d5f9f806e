# docstamp:header:start
#
#   project      : Docstamp
#   file         : stamp.py
#   file_relpath : src/docstamp/cli/commands/stamp.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# docstamp:header:end

"""Docstamp ``stamp`` command.

Adds or refreshes the license docstring block at the top of source files.

Modes:
  • **Single file (default)**: ``DIR/FILE`` is created (with every missing
    directory of ``DIR``) or gets its block refreshed or prepended.
  • **Update (``-u``)**: every file under ``DIR`` with the extension of
    ``--file`` gets its existing block refreshed, keeping its created date.

Examples:
  Create a new file with a header:

    $ docstamp stamp -d src/pkg -f module.py

  Refresh all Rust files, previewing first:

    $ docstamp stamp -d src -u -f '*.rs' --dry-run
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from docstamp.cli.cli_types import DateParam
from docstamp.cli.cmd_common import (
    get_effective_verbosity,
    prompt_missing_target,
    report_single,
    report_summary,
    resolve_config,
)
from docstamp.cli.console import get_console
from docstamp.cli.errors import DocstampUsageError, to_cli_error
from docstamp.cli.options import common_config_options, common_target_options
from docstamp.config.logging import get_logger
from docstamp.engine import read_license, stamp_file, update_tree
from docstamp.errors import DocstampError
from docstamp.utils.file import ensure_directory
from docstamp.writer import select_sink

if TYPE_CHECKING:
    from docstamp.cli.console import ConsoleLike
    from docstamp.config import Config
    from docstamp.config.logging import DocstampLogger
    from docstamp.engine import FileResult, RunSummary
    from docstamp.writer import WriteSink

logger: DocstampLogger = get_logger(__name__)


@click.command(
    name="stamp",
    help="Add or refresh the license docstring block of files.",
    epilog="""\
Examples:

  # Create src/pkg/module.py holding only the docstring block
  docstamp stamp -d src/pkg -f module.py

  # Refresh the block of every Python file below src
  docstamp stamp -d src -u -f '*.py'
""",
)
@common_target_options
@click.option(
    "-l",
    "--license",
    "license_path",
    default=None,
    metavar="FILE",
    help="License file whose text becomes the block body.  [default: LICENSE]",
)
@click.option(
    "--created",
    "created",
    type=DateParam(),
    default=None,
    help="Explicit 'File created' date (YYYY-MM-DD) for single-file mode.",
)
@common_config_options
def stamp_command(
    *,
    directory: str | None,
    file_name: str | None,
    update: bool,
    exclude: tuple[str, ...],
    keep_going: bool,
    dry_run: bool,
    license_path: str | None,
    created: str | None,
    no_config: bool,
    config_paths: tuple[str, ...],
) -> None:
    """Add or refresh the docstring block of one file or a directory tree.

    Args:
        directory (str | None): Directory holding the file, or tree root in update mode.
        file_name (str | None): File name, or extension in update mode.
        update (bool): Recursively refresh every matching file under ``directory``.
        exclude (tuple[str, ...]): Gitignore-style patterns skipped in update mode.
        keep_going (bool): Record per-file errors and continue (update mode).
        dry_run (bool): Report what would change without writing.
        license_path (str | None): License file; overrides the configured one.
        created (str | None): Explicit "File created" date (single-file mode).
        no_config (bool): Skip config file discovery.
        config_paths (tuple[str, ...]): Extra config files to merge.

    Raises:
        DocstampUsageError: If ``--created`` is combined with ``--update``.

    Exit Status:
      SUCCESS (0): All requested changes were written (or nothing to do).
      FAILURE (1): ``--keep-going`` run finished with per-file failures.
      WOULD_CHANGE (2): ``--dry-run`` found files that would change.
      ENCODING_ERROR (65): A file is not valid UTF-8.
      FILE_NOT_FOUND (66): Missing license/directory, unknown extension, or a
        file without a "File created" date in update mode.
      IO_ERROR (74): A file or directory could not be written.
      CONFIG_ERROR (78): A config file is malformed.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = get_console(ctx)

    if update and created is not None:
        raise DocstampUsageError("--created cannot be combined with --update.")

    directory, file_name = prompt_missing_target(directory, file_name, update=update)
    root = Path(directory)

    config: Config = resolve_config(
        directory=root,
        no_config=no_config,
        config_paths=config_paths,
        overrides={"license": license_path, "keep_going": keep_going, "exclude": list(exclude)},
    )
    sink: WriteSink = select_sink(dry_run=dry_run)

    try:
        license_text: str = read_license(config.license_path)
        if update:
            summary: RunSummary = update_tree(
                root,
                file_name,
                license_text,
                keep_going=config.keep_going,
                exclude=config.exclude_patterns,
                sink=sink,
            )
        else:
            if dry_run:
                if not root.is_dir():
                    console.print(f"Would create directory '{root}'")
            else:
                for made in ensure_directory(root):
                    if get_effective_verbosity(ctx) > 0:
                        console.print(f"Created directory '{made}'")
            result: FileResult = stamp_file(
                root / file_name, license_text, created=created, sink=sink
            )
    except DocstampError as e:
        logger.error("%s", e)
        raise to_cli_error(e) from e

    if update:
        report_summary(ctx, summary, dry_run=dry_run)
    else:
        report_single(ctx, result, dry_run=dry_run)
