# docstamp:header:start
#
#   project      : Docstamp
#   file         : locator.py
#   file_relpath : src/docstamp/block/locator.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# docstamp:header:end

"""Locate, inspect and remove an existing docstring block.

Block detection is a small line-based state machine:

    SEARCHING --(line starts with style.start)--------------------> IN_BLOCK
    IN_BLOCK  --(line starts with prefix + "Last updated: ")------> STAMPED
    STAMPED   --(line starts with style.end)----------------------> DONE

The end marker is only honored once the "Last updated" stamp has been seen.
Several styles use a line prefix that itself starts with the end marker
(``"# "`` for Elixir, ``"% "`` for Erlang, ``";;;; "`` for Lisp), so every inner
line would otherwise look like the end of the block.

Markers are matched with ``str.startswith`` so CRLF files are handled as well.
When no complete block is found the content is left untouched.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Final

from docstamp.config.logging import DocstampLogger, get_logger
from docstamp.constants import FILE_CREATED_LABEL, LAST_UPDATED_LABEL
from docstamp.errors import NotFoundError

if TYPE_CHECKING:
    from docstamp.filetypes.base import CommentStyle

logger: DocstampLogger = get_logger(__name__)

# YYYY-M-D with a 1-4 digit year and 1-2 digit month/day
DATE_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"\d{1,4}-(?:1[0-2]|0?[1-9])-(?:3[01]|[12]\d|0?[1-9])"
)


class ScanState(Enum):
    """States of the block scanner."""

    SEARCHING = "searching"
    IN_BLOCK = "in_block"
    STAMPED = "stamped"
    DONE = "done"


@dataclass(frozen=True)
class BlockSpan:
    """Character offsets of a located block (``content[start:end]``).

    ``end`` includes the end marker's newline and the single blank separator
    line, when present.
    """

    start: int
    end: int


def find_created_date(content: str) -> str:
    """Return the "File created" date of an existing block.

    The first line containing ``"File created: "`` is searched for a
    ``YYYY-M-D`` date and the first match is returned.

    Args:
        content (str): Decoded file content.

    Returns:
        str: The date as written in the file.

    Raises:
        NotFoundError: If no such line exists or it holds no date.
    """
    for line in content.split("\n"):
        if FILE_CREATED_LABEL not in line:
            continue
        match: re.Match[str] | None = DATE_PATTERN.search(line)
        if match is None:
            raise NotFoundError(f"could not parse date from line: {line.strip()!r}")
        return match.group(0)

    raise NotFoundError("could not find a created date")


def _separator_length(content: str, offset: int) -> int:
    """Length of the blank separator line starting at ``offset`` (0 if none)."""
    if content.startswith("\n", offset):
        return 1
    if content.startswith("\r\n", offset):
        return 2
    return 0


def locate_block(content: str, style: CommentStyle) -> BlockSpan | None:
    """Locate the first complete docstring block written in ``style``.

    Args:
        content (str): Decoded file content.
        style (CommentStyle): Comment delimiters of the file's language.

    Returns:
        BlockSpan | None: The block's span, or ``None`` when no block is found.
    """
    stamp: str = style.line_prefix + LAST_UPDATED_LABEL
    state: ScanState = ScanState.SEARCHING
    span_start: int = 0
    offset: int = 0

    for line in content.split("\n"):
        # Offset just past this line and the "\n" removed by the split
        line_end: int = min(offset + len(line) + 1, len(content))

        if state is ScanState.SEARCHING:
            if line.startswith(style.start):
                span_start = offset
                state = ScanState.IN_BLOCK
        elif state is ScanState.IN_BLOCK:
            if line.startswith(stamp):
                state = ScanState.STAMPED
        elif state is ScanState.STAMPED and line.startswith(style.end):
            state = ScanState.DONE
            span_end: int = line_end + _separator_length(content, line_end)
            logger.trace("Block located at [%d:%d]", span_start, span_end)
            return BlockSpan(start=span_start, end=span_end)

        offset = line_end

    logger.debug("No complete docstring block found (scanner stopped in state %s)", state.value)
    return None


def has_block(content: str, style: CommentStyle) -> bool:
    """Return True if ``content`` holds a complete docstring block."""
    return locate_block(content, style) is not None


def strip_block(content: str, style: CommentStyle) -> str:
    """Remove the first docstring block (and its blank separator line).

    Args:
        content (str): Decoded file content.
        style (CommentStyle): Comment delimiters of the file's language.

    Returns:
        str: The remaining content; ``content`` itself when no block is found.
    """
    span: BlockSpan | None = locate_block(content, style)
    if span is None:
        return content
    return content[: span.start] + content[span.end :]
