# docstamp:header:start
#
#   project      : Docstamp
#   file         : test_cli_exit_codes.py
#   file_relpath : tests/cli/test_cli_exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# docstamp:header:end

"""Mapping of core errors onto CLI exit codes and messages."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from docstamp.cli.errors import (
    DocstampCliError,
    DocstampCliIOError,
    DocstampConfigError,
    DocstampEncodingError,
    DocstampFileNotFoundError,
    to_cli_error,
)
from docstamp.cli.exit_codes import ExitCode
from docstamp.errors import (
    ConfigError,
    DocstampError,
    DocstampIOError,
    InvalidDataError,
    NotFoundError,
)
from tests.cli.conftest import run_cli_in
from tests.conftest import write_text

if TYPE_CHECKING:
    from pathlib import Path

    from click.testing import Result


@pytest.mark.parametrize(
    ("error", "cli_cls", "code"),
    [
        (NotFoundError("x"), DocstampFileNotFoundError, ExitCode.FILE_NOT_FOUND),
        (DocstampIOError("x"), DocstampCliIOError, ExitCode.IO_ERROR),
        (InvalidDataError("x"), DocstampEncodingError, ExitCode.ENCODING_ERROR),
        (ConfigError("x"), DocstampConfigError, ExitCode.CONFIG_ERROR),
        (DocstampError("x"), DocstampCliError, ExitCode.FAILURE),
    ],
)
def test_to_cli_error(error: DocstampError, cli_cls: type[DocstampCliError], code: int) -> None:
    """Each core error maps onto its CLI error and exit code."""
    mapped: DocstampCliError = to_cli_error(error)
    assert type(mapped) is cli_cls
    assert mapped.exit_code == code
    assert mapped.message == "x"


def test_io_error_message_includes_os_error() -> None:
    """The OS error detail is appended to the message."""
    err = DocstampIOError("cannot write a.py", os_error=PermissionError(13, "Permission denied"))
    assert str(err) == "cannot write a.py: [Errno 13] Permission denied"


def test_missing_license(tmp_path: Path) -> None:
    """Without a license file the run fails with FILE_NOT_FOUND and writes nothing."""
    write_text(tmp_path / "docstamp.toml", "root = true\n")

    result: Result = run_cli_in(tmp_path, ["stamp", "-d", ".", "-f", "a.py"])

    assert result.exit_code == ExitCode.FILE_NOT_FOUND, result.output
    assert "LICENSE" in result.output
    assert not (tmp_path / "a.py").exists()


def test_unknown_extension(project: Path) -> None:
    """Unsupported extensions exit FILE_NOT_FOUND."""
    result: Result = run_cli_in(project, ["stamp", "-d", ".", "-f", "notes.docx"])
    assert result.exit_code == ExitCode.FILE_NOT_FOUND, result.output
    assert "no matching filetype for extension '.docx'" in result.output


def test_invalid_utf8(project: Path) -> None:
    """Files that are not UTF-8 exit ENCODING_ERROR and stay untouched."""
    (project / "bin.c").write_bytes(b"\xff\xfe\x00")
    result: Result = run_cli_in(project, ["stamp", "-d", ".", "-f", "bin.c"])
    assert result.exit_code == ExitCode.ENCODING_ERROR, result.output
    assert (project / "bin.c").read_bytes() == b"\xff\xfe\x00"


def test_file_in_the_way_of_directory(project: Path) -> None:
    """A file blocking directory creation exits IO_ERROR."""
    write_text(project / "blocker", "")
    result: Result = run_cli_in(project, ["stamp", "-d", "blocker/sub", "-f", "a.py"])
    assert result.exit_code == ExitCode.IO_ERROR, result.output
    assert "a file is in the way" in result.output


def test_malformed_config(project: Path) -> None:
    """A malformed config file exits CONFIG_ERROR."""
    write_text(project / "docstamp.toml", "root = true\nlicense = [\n")
    result: Result = run_cli_in(project, ["stamp", "-d", ".", "-f", "a.py"])
    assert result.exit_code == ExitCode.CONFIG_ERROR, result.output
    assert "invalid TOML" in result.output


def test_no_config_ignores_malformed_config(project: Path) -> None:
    """``--no-config`` skips discovery, so a broken file does not matter."""
    write_text(project / "docstamp.toml", "license = [\n")
    result: Result = run_cli_in(project, ["stamp", "-d", ".", "-f", "a.py", "--no-config"])
    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert (project / "a.py").exists()


def test_missing_update_directory(project: Path) -> None:
    """Update mode on a missing directory exits FILE_NOT_FOUND."""
    result: Result = run_cli_in(project, ["stamp", "-d", "nowhere", "-u", "-f", "py"])
    assert result.exit_code == ExitCode.FILE_NOT_FOUND, result.output
    assert "could not find directory" in result.output


def test_invalid_created_date(project: Path) -> None:
    """``--created`` must be a YYYY-MM-DD date."""
    result: Result = run_cli_in(
        project, ["stamp", "-d", ".", "-f", "a.py", "--created", "2023-02-30"]
    )
    assert result.exit_code != ExitCode.SUCCESS
    assert "Invalid date" in result.output
    assert not (project / "a.py").exists()


@pytest.mark.parametrize("command", ["stamp", "strip"])
@pytest.mark.parametrize("ext", ["*", "foo.", "."])
def test_update_mode_rejects_missing_extension(project: Path, command: str, ext: str) -> None:
    """An extension argument with nothing after the dot exits FILE_NOT_FOUND."""
    write_text(project / "a.py", "x = 1\n")
    result: Result = run_cli_in(project, [command, "-d", ".", "-u", "-f", ext])
    assert result.exit_code == ExitCode.FILE_NOT_FOUND, result.output
    assert result.exception is None or isinstance(result.exception, SystemExit)
    assert "could not find a file extension" in result.output
    assert (project / "a.py").read_text(encoding="utf-8") == "x = 1\n"
