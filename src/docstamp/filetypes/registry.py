# docstamp:header:start
#
#   project      : Docstamp
#   file         : registry.py
#   file_relpath : src/docstamp/filetypes/registry.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# docstamp:header:end

"""Lookups from file names to languages and comment styles.

This is the public face of the static tables in
[`docstamp.filetypes.instances`][]: resolve a file name to its `Language`,
and a `Language` to its `CommentStyle`.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from docstamp.config.logging import DocstampLogger, get_logger
from docstamp.errors import NotFoundError
from docstamp.filetypes.instances import get_extension_registry, get_style_registry

if TYPE_CHECKING:
    from docstamp.filetypes.base import CommentStyle, Language

logger: DocstampLogger = get_logger(__name__)


def extension_of(filename: str | os.PathLike[str]) -> str:
    """Return the text after the last ``.`` of the file name.

    Only the final path component is considered, so dots in directory names
    are ignored.

    Args:
        filename (str | os.PathLike[str]): File name or path.

    Returns:
        str: The extension without its leading dot (case preserved).

    Raises:
        NotFoundError: If the name has no ``.`` or ends with one.
    """
    name: str = os.path.basename(os.fspath(filename))
    if "." not in name:
        raise NotFoundError(f"could not find a file ending in '{name}'")
    ext: str = name.rsplit(".", 1)[1]
    if not ext:
        raise NotFoundError(f"could not find a file ending in '{name}'")
    return ext


def resolve_language(filename: str | os.PathLike[str]) -> Language:
    """Resolve the language of a file from its extension (case-sensitive).

    Args:
        filename (str | os.PathLike[str]): File name or path.

    Returns:
        Language: The language registered for the extension.

    Raises:
        NotFoundError: If the file has no extension or the extension is unknown.
    """
    ext: str = extension_of(filename)
    language: Language | None = get_extension_registry().get(ext)
    if language is None:
        raise NotFoundError(f"no matching filetype for extension '.{ext}'")
    logger.trace("Resolved %s to %s", filename, language)
    return language


def style_for(language: Language) -> CommentStyle:
    """Return the comment style of a language (every language has one)."""
    return get_style_registry()[language]


def resolve_style(filename: str | os.PathLike[str]) -> CommentStyle:
    """Resolve a file name straight to its comment style.

    Raises:
        NotFoundError: If the file has no extension or the extension is unknown.
    """
    return style_for(resolve_language(filename))


def supported_extensions() -> list[tuple[str, Language]]:
    """Return ``(extension, language)`` pairs sorted by language name, then extension."""
    return sorted(
        get_extension_registry().items(),
        key=lambda item: (item[1].value.lower(), item[0]),
    )
