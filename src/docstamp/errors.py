# docstamp:header:start
#
#   project      : Docstamp
#   file         : errors.py
#   file_relpath : src/docstamp/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# docstamp:header:end

"""Error taxonomy for the Docstamp core.

The core modules raise these exceptions and never swallow them; the CLI maps
them to Click errors and exit codes (see [`docstamp.cli.errors`][]).

Exceptions:
    DocstampError: Base class for all core errors.
    NotFoundError: Something that must exist could not be found (unknown file
        extension, missing "File created" stamp, missing input file).
    DocstampIOError: A filesystem operation failed; wraps the ``OSError``.
    InvalidDataError: File content is not valid UTF-8 text.
    ConfigError: A configuration file could not be parsed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class DocstampError(Exception):
    """Base class for all Docstamp errors."""


class NotFoundError(DocstampError):
    """A required item (extension, stamp, date, input file) was not found."""


class DocstampIOError(DocstampError):
    """A filesystem operation failed.

    Attributes:
        path (Path | None): The path the failing operation was working on.
        os_error (OSError | None): The underlying OS error (also chained as ``__cause__``).
    """

    def __init__(
        self,
        message: str,
        *,
        path: Path | None = None,
        os_error: OSError | None = None,
    ) -> None:
        super().__init__(message)
        self.path = path
        self.os_error = os_error

    def __str__(self) -> str:
        """Return the message followed by the OS error detail, if any."""
        base: str = super().__str__()
        if self.os_error is not None:
            return f"{base}: {self.os_error}"
        return base


class InvalidDataError(DocstampError):
    """Content that should be UTF-8 text could not be decoded."""


class ConfigError(DocstampError):
    """A configuration file is malformed."""
