# docstamp:header:start
#
#   project      : Docstamp
#   file         : errors.py
#   file_relpath : src/docstamp/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# docstamp:header:end

"""Exceptions for the Docstamp CLI.

Usage:
    Commands translate core [`DocstampError`][docstamp.errors.DocstampError]
    exceptions with [`to_cli_error`][docstamp.cli.errors.to_cli_error] and raise
    the result; Click prints the message and exits with the mapped code.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from docstamp.cli.exit_codes import ExitCode
from docstamp.errors import (
    ConfigError,
    DocstampError,
    DocstampIOError,
    InvalidDataError,
    NotFoundError,
)


class DocstampCliError(click.ClickException):
    """Base class for all Docstamp CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (without Click's coloring)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx: click.Context | None = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(f"Error: {self.format_message()}")
                return
        super().show(file)


class DocstampUsageError(DocstampCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class DocstampConfigError(DocstampCliError):
    """Error for malformed configuration files."""

    exit_code = ExitCode.CONFIG_ERROR


class DocstampFileNotFoundError(DocstampCliError):
    """Error when a file, directory, extension or date stamp is not found."""

    exit_code = ExitCode.FILE_NOT_FOUND


class DocstampCliIOError(DocstampCliError):
    """Error for I/O errors reading/writing files."""

    exit_code = ExitCode.IO_ERROR


class DocstampEncodingError(DocstampCliError):
    """Error for text decoding errors (non-UTF-8 content)."""

    exit_code = ExitCode.ENCODING_ERROR


class DocstampBatchError(DocstampCliError):
    """Error for batch runs that completed with per-file failures."""

    exit_code = ExitCode.FAILURE


_ERROR_MAP: tuple[tuple[type[DocstampError], type[DocstampCliError]], ...] = (
    (NotFoundError, DocstampFileNotFoundError),
    (DocstampIOError, DocstampCliIOError),
    (InvalidDataError, DocstampEncodingError),
    (ConfigError, DocstampConfigError),
)


def to_cli_error(error: DocstampError) -> DocstampCliError:
    """Translate a core error into the CLI error carrying its exit code."""
    for core_cls, cli_cls in _ERROR_MAP:
        if isinstance(error, core_cls):
            return cli_cls(str(error))
    return DocstampCliError(str(error))
