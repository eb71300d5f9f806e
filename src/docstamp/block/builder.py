# docstamp:header:start
#
#   project      : Docstamp
#   file         : builder.py
#   file_relpath : src/docstamp/block/builder.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# docstamp:header:end

"""Build the docstring block that is placed at the top of a file.

Layout for a C-family file and the license text ``"MIT"``::

    /*
    * MIT
    * File created: 2023-10-01
    * Last updated: 2023-10-02
    */
    <one blank line>

The license text is split on ``\\n`` (a trailing newline yields one final empty
line) and is not escaped: if it contains the style's end marker the block
boundaries become ambiguous.
"""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

from docstamp.config.logging import DocstampLogger, get_logger
from docstamp.constants import DATE_FORMAT, FILE_CREATED_LABEL, LAST_UPDATED_LABEL

if TYPE_CHECKING:
    from docstamp.filetypes.base import CommentStyle

logger: DocstampLogger = get_logger(__name__)


def today_stamp() -> str:
    """Return today's local date formatted as ``YYYY-MM-DD``."""
    return date.today().strftime(DATE_FORMAT)


def render_lines(
    license_text: str,
    style: CommentStyle,
    created_date: str,
    *,
    today: str | None = None,
) -> list[str]:
    """Render the block as text lines, each ending with ``\\n``.

    The last line is the blank separator that follows the end marker.

    Args:
        license_text (str): Raw license text.
        style (CommentStyle): Comment delimiters of the target language.
        created_date (str): Value of the "File created" stamp.
        today (str | None): Value of the "Last updated" stamp; defaults to
            [`today_stamp`][docstamp.block.builder.today_stamp].

    Returns:
        list[str]: The rendered lines.
    """
    updated: str = today if today is not None else today_stamp()
    prefix: str = style.line_prefix

    lines: list[str] = [style.start + "\n"]
    lines.extend(f"{prefix}{line}\n" for line in license_text.split("\n"))
    lines.append(f"{prefix}{FILE_CREATED_LABEL}{created_date}\n")
    lines.append(f"{prefix}{LAST_UPDATED_LABEL}{updated}\n")
    lines.append(style.end + "\n")
    # Exactly one blank line between the block and the original content
    lines.append("\n")
    return lines


def build(
    license_text: str,
    style: CommentStyle,
    created_date: str,
    *,
    today: str | None = None,
) -> bytes:
    """Build the UTF-8 encoded docstring block.

    Args:
        license_text (str): Raw license text.
        style (CommentStyle): Comment delimiters of the target language.
        created_date (str): Value of the "File created" stamp.
        today (str | None): Value of the "Last updated" stamp (defaults to today).

    Returns:
        bytes: The formatted block, including its trailing blank line.
    """
    lines: list[str] = render_lines(license_text, style, created_date, today=today)
    logger.debug("Rendered docstring block of %d lines", len(lines))
    return "".join(lines).encode("utf-8")
