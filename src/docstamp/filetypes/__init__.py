# docstamp:header:start
#
#   project      : Docstamp
#   file         : __init__.py
#   file_relpath : src/docstamp/filetypes/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# docstamp:header:end

"""Languages, comment styles and the extension tables that select them."""

from __future__ import annotations

from docstamp.filetypes.base import CommentStyle, Language
from docstamp.filetypes.registry import (
    resolve_language,
    resolve_style,
    style_for,
    supported_extensions,
)

__all__: list[str] = [
    "CommentStyle",
    "Language",
    "resolve_language",
    "resolve_style",
    "style_for",
    "supported_extensions",
]
