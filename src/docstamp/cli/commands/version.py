# docstamp:header:start
#
#   project      : Docstamp
#   file         : version.py
#   file_relpath : src/docstamp/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# docstamp:header:end

"""Docstamp `version` command.

Prints the current Docstamp version as installed in the active Python environment.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from docstamp.cli.cli_types import EnumChoiceParam
from docstamp.cli.cmd_common import get_effective_verbosity
from docstamp.cli.console import get_console
from docstamp.cli.utils import OutputFormat
from docstamp.constants import DOCSTAMP_VERSION

if TYPE_CHECKING:
    from docstamp.cli.console import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of Docstamp.",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
def version_command(*, output_format: OutputFormat | None = None) -> None:
    """Show the current version of Docstamp.

    Args:
        output_format (OutputFormat | None): Optional output format.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = get_console(ctx)

    fmt: OutputFormat = output_format or OutputFormat.DEFAULT
    if fmt == OutputFormat.JSON:
        console.print(json.dumps({"version": DOCSTAMP_VERSION}))
    elif fmt == OutputFormat.MARKDOWN:
        console.print("# Docstamp Version\n")
        console.print(f"**Docstamp version: {DOCSTAMP_VERSION}**")
    elif get_effective_verbosity(ctx) > 0:
        console.print(console.styled("Docstamp version:\n", bold=True, underline=True))
        console.print(f"    {console.styled(DOCSTAMP_VERSION, bold=True)}")
    else:
        console.print(console.styled(DOCSTAMP_VERSION, bold=True))
