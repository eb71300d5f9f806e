# docstamp:header:start
#
#   project      : Docstamp
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# docstamp:header:end

"""CLI test helpers for running Docstamp in a controlled working directory.

`run_cli_in()` changes the process working directory to the given `tmp_path`
before invoking the Click CLI, so relative ``-d`` directories and the default
``LICENSE`` path resolve against the temporary test directory.

Both helpers pass ``--no-color`` so assertions on `Result.output` do not depend
on `FORCE_COLOR` being set in the environment.
"""

from __future__ import annotations

import os
from typing import IO, TYPE_CHECKING, Any

import pytest
from click.testing import CliRunner, Result

from docstamp.cli.exit_codes import ExitCode
from docstamp.cli.main import cli
from docstamp.config.logging import TRACE_LEVEL, setup_logging

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence
    from pathlib import Path

NO_COLOR = "--no-color"
PROJECT_LICENSE = "MIT License\n"


def _argv(argv: str | Sequence[str] | None) -> list[str]:
    if argv is None:
        return [NO_COLOR]
    if isinstance(argv, str):
        return [NO_COLOR, *argv.split()]
    return [NO_COLOR, *argv]


def run_cli_in(
    tmp_path: Path,
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI with `tmp_path` as the working directory.

    Args:
        tmp_path (Path): Pytest-provided temporary directory used as the CWD for the
            command invocation.
        argv (str | Sequence[str] | None): CLI argument vector, e.g.
            ``["stamp", "-d", "src", "-f", "main.py"]``.
        input_text (str | bytes | IO[Any] | None): Optional standard input, used to
            answer interactive prompts.

    Returns:
        Result: The `click.testing.Result` produced by `CliRunner.invoke`.
    """
    runner = CliRunner()
    cwd: str = os.getcwd()
    try:
        os.chdir(tmp_path)
        return runner.invoke(cli, _argv(argv), input=input_text)
    finally:
        os.chdir(cwd)


def run_cli(
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI without changing the working directory.

    Use this helper when the test does **not** depend on files (e.g. ``version``
    or ``filetypes``) or when all provided paths are absolute.
    """
    runner = CliRunner()
    return runner.invoke(cli, _argv(argv), input=input_text)


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0)."""
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_WOULD_CHANGE(result: Result) -> None:
    """Assert that the command exited with WOULD_CHANGE (code 2)."""
    # WOULD_CHANGE is a *normal* outcome; do not assert on exception.
    assert result.exit_code == ExitCode.WOULD_CHANGE, result.output


def assert_USAGE_ERROR(result: Result) -> None:
    """Assert that the command exited with USAGE_ERROR (code 64)."""
    assert result.exit_code == ExitCode.USAGE_ERROR, result.output


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """Return a project root holding a ``LICENSE`` and a root ``docstamp.toml``.

    ``root = true`` keeps config discovery from walking above ``tmp_path``.
    """
    (tmp_path / "LICENSE").write_text(PROJECT_LICENSE, encoding="utf-8")
    (tmp_path / "docstamp.toml").write_text("root = true\n", encoding="utf-8")
    return tmp_path


@pytest.fixture(autouse=True)
def rebind_logging() -> Iterator[None]:
    """Point the log handler back at the real stdout after each CLI run.

    Every invocation reconfigures logging onto CliRunner's captured stream,
    which is closed once the run is over.
    """
    yield
    setup_logging(level=TRACE_LEVEL)
