# docstamp:header:start
#
#   project      : Docstamp
#   file         : filetypes.py
#   file_relpath : src/docstamp/cli/commands/filetypes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# docstamp:header:end

"""Docstamp ``filetypes`` command.

Lists every supported file extension with its language and comment style.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import click

from docstamp.cli.cli_types import EnumChoiceParam
from docstamp.cli.cmd_common import get_effective_verbosity
from docstamp.cli.console import get_console
from docstamp.cli.utils import OutputFormat, render_markdown_table
from docstamp.constants import DOCSTAMP_VERSION
from docstamp.filetypes.registry import style_for, supported_extensions

if TYPE_CHECKING:
    from docstamp.cli.console import ConsoleLike
    from docstamp.filetypes.base import CommentStyle, Language


def _serialize(ext: str, language: Language) -> dict[str, Any]:
    style: CommentStyle = style_for(language)
    return {
        "extension": ext,
        "language": language.value,
        "start": style.start,
        "line_prefix": style.line_prefix,
        "end": style.end,
    }


@click.command(
    name="filetypes",
    help="List all supported file extensions.",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
def filetypes_command(*, output_format: OutputFormat | None = None) -> None:
    """List supported file extensions with their language and comment style.

    Args:
        output_format (OutputFormat | None): Output format to use
            (``default``, ``json``, or ``markdown``).
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = get_console(ctx)

    entries: list[tuple[str, Language]] = supported_extensions()
    fmt: OutputFormat = output_format or OutputFormat.DEFAULT

    if fmt == OutputFormat.JSON:
        console.print(json.dumps([_serialize(ext, lang) for ext, lang in entries], indent=2))
        return

    if fmt == OutputFormat.MARKDOWN:
        console.print("# Supported File Types\n")
        console.print(
            f"Docstamp version **{DOCSTAMP_VERSION}** supports the following extensions:\n"
        )
        rows: list[list[str]] = []
        for ext, lang in entries:
            style: CommentStyle = style_for(lang)
            rows.append(
                [
                    f"`.{ext}`",
                    lang.value,
                    f"`{style.start}`",
                    f"`{style.line_prefix}`",
                    f"`{style.end}`",
                ]
            )
        console.print(
            render_markdown_table(["Extension", "Language", "Start", "Prefix", "End"], rows)
        )
        return

    vlevel: int = get_effective_verbosity(ctx)
    if vlevel > 0:
        console.print(console.styled("Supported file extensions:\n", bold=True, underline=True))

    num_width: int = len(str(len(entries)))
    ext_width: int = max(len(ext) for ext, _lang in entries) + 1
    for idx, (ext, lang) in enumerate(entries, start=1):
        line: str = f"{idx:>{num_width}}. {'.' + ext:<{ext_width}} {lang.value}"
        if vlevel > 0:
            style = style_for(lang)
            line += " " + console.styled(
                f"({style.start} {style.line_prefix!r} {style.end})", dim=True
            )
        console.print(line)
