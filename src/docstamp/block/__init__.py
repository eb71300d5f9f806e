# docstamp:header:start
#
#   project      : Docstamp
#   file         : __init__.py
#   file_relpath : src/docstamp/block/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# docstamp:header:end

"""Docstring block text transformations (build, locate, strip)."""

from __future__ import annotations

from docstamp.block.builder import build, render_lines, today_stamp
from docstamp.block.locator import (
    BlockSpan,
    find_created_date,
    has_block,
    locate_block,
    strip_block,
)

__all__: list[str] = [
    "BlockSpan",
    "build",
    "find_created_date",
    "has_block",
    "locate_block",
    "render_lines",
    "strip_block",
    "today_stamp",
]
