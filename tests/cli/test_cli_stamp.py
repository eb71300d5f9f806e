# docstamp:header:start
#
#   project      : Docstamp
#   file         : test_cli_stamp.py
#   file_relpath : tests/cli/test_cli_stamp.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# docstamp:header:end

"""CLI ``stamp`` command: single-file and update modes, dry runs and prompts.

All tests run inside ``tmp_path`` through `run_cli_in`; the `project` fixture
provides the ``LICENSE`` file and a root ``docstamp.toml``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from docstamp.block.builder import today_stamp
from docstamp.cli.exit_codes import ExitCode
from tests.cli.conftest import (
    PROJECT_LICENSE,
    assert_SUCCESS,
    assert_USAGE_ERROR,
    assert_WOULD_CHANGE,
    run_cli_in,
)
from tests.conftest import CREATED, block_for, read_text, write_text

if TYPE_CHECKING:
    from pathlib import Path

    from click.testing import Result


def _expected(name: str, *, created: str | None = None) -> str:
    today: str = today_stamp()
    return block_for(name, license_text=PROJECT_LICENSE, created=created or today, today=today)


def _stamp_old(path: Path, body: str) -> Path:
    """Write a file stamped long ago (so an update changes it)."""
    path.parent.mkdir(parents=True, exist_ok=True)
    return write_text(
        path,
        block_for(path.name, license_text=PROJECT_LICENSE, created=CREATED, today=CREATED) + body,
    )


def test_stamp_creates_file_and_directories(project: Path) -> None:
    """A missing file is created with the block; missing directories are made."""
    result: Result = run_cli_in(project, ["stamp", "-d", "src/pkg", "-f", "mod.py"])

    assert_SUCCESS(result)
    target: Path = project / "src" / "pkg" / "mod.py"
    assert read_text(target) == _expected("mod.py")
    assert "Created 'src/pkg/mod.py'" in result.output


def test_stamp_verbose_reports_created_directories(project: Path) -> None:
    """With ``-v`` each created directory is listed."""
    result: Result = run_cli_in(project, ["-v", "stamp", "-d", "a/b", "-f", "x.rs"])

    assert_SUCCESS(result)
    assert "Created directory 'a'" in result.output
    assert "Created directory 'a/b'" in result.output


def test_stamp_prepends_to_existing_file(project: Path) -> None:
    """An existing file without a block gets one prepended."""
    write_text(project / "main.c", "int main(void) { return 0; }\n")

    result: Result = run_cli_in(project, ["stamp", "-d", ".", "-f", "main.c"])

    assert_SUCCESS(result)
    content: str = read_text(project / "main.c")
    assert content.startswith("/*\n* MIT License\n")
    assert content.endswith("*/\n\nint main(void) { return 0; }\n")
    assert "Added docstring to" in result.output


def test_stamp_existing_block_keeps_created(project: Path) -> None:
    """Re-stamping a stamped file keeps its created date."""
    _stamp_old(project / "lib.go", "package lib\n")

    result: Result = run_cli_in(project, ["stamp", "-d", ".", "-f", "lib.go"])

    assert_SUCCESS(result)
    assert read_text(project / "lib.go") == _expected("lib.go", created=CREATED) + "package lib\n"


def test_stamp_explicit_created(project: Path) -> None:
    """``--created`` sets the created date of a new file."""
    result: Result = run_cli_in(
        project, ["stamp", "-d", ".", "-f", "n.py", "--created", "2001-02-03"]
    )
    assert_SUCCESS(result)
    assert "File created: 2001-02-03" in read_text(project / "n.py")


def test_stamp_dry_run_single(project: Path) -> None:
    """A dry run exits WOULD_CHANGE and creates neither file nor directory."""
    result: Result = run_cli_in(project, ["stamp", "-d", "src/pkg", "-f", "mod.py", "--dry-run"])

    assert_WOULD_CHANGE(result)
    assert not (project / "src").exists()
    assert "Would create directory 'src/pkg'" in result.output
    assert "Would create 'src/pkg/mod.py'" in result.output


def test_stamp_update_mode(project: Path) -> None:
    """``-u`` refreshes every file with the extension below the directory."""
    a: Path = _stamp_old(project / "src" / "a.rs", "fn a() {}\n")
    b: Path = _stamp_old(project / "src" / "nested" / "b.rs", "fn b() {}\n")

    result: Result = run_cli_in(project, ["stamp", "-d", "src", "-u", "-f", "*.rs"])

    assert_SUCCESS(result)
    assert read_text(a) == _expected("a.rs", created=CREATED) + "fn a() {}\n"
    assert read_text(b) == _expected("b.rs", created=CREATED) + "fn b() {}\n"
    assert "Summary by outcome:" in result.output
    assert "refreshed" in result.output


def test_stamp_update_dry_run(project: Path) -> None:
    """An update dry run exits WOULD_CHANGE and leaves the files as they were."""
    a: Path = _stamp_old(project / "src" / "a.py", "x = 1\n")
    before: str = read_text(a)

    result: Result = run_cli_in(project, ["stamp", "-d", "src", "-u", "-f", "py", "--dry-run"])

    assert_WOULD_CHANGE(result)
    assert "Would update docstring in" in result.output
    assert read_text(a) == before


def test_stamp_update_exclude(project: Path) -> None:
    """``--exclude`` patterns are skipped in update mode."""
    kept: Path = _stamp_old(project / "src" / "a.py", "x = 1\n")
    skipped: Path = _stamp_old(project / "src" / "vendor" / "v.py", "y = 2\n")
    before: str = read_text(skipped)

    result: Result = run_cli_in(
        project, ["stamp", "-d", "src", "-u", "-f", "*.py", "-e", "vendor/"]
    )

    assert_SUCCESS(result)
    assert read_text(skipped) == before
    assert read_text(kept) == _expected("a.py", created=CREATED) + "x = 1\n"


def test_stamp_update_stops_on_file_without_date(project: Path) -> None:
    """A file without a created date aborts the update with FILE_NOT_FOUND."""
    write_text(project / "plain.py", "print('x')\n")

    result: Result = run_cli_in(project, ["stamp", "-d", ".", "-u", "-f", "*.py"])

    assert result.exit_code == ExitCode.FILE_NOT_FOUND, result.output
    assert "could not find a created date" in result.output


def test_stamp_update_keep_going(project: Path) -> None:
    """``--keep-going`` processes the other files and exits FAILURE."""
    good: Path = _stamp_old(project / "good.py", "x = 1\n")
    write_text(project / "plain.py", "print('x')\n")

    result: Result = run_cli_in(
        project, ["stamp", "-d", ".", "-u", "-f", "*.py", "--keep-going"]
    )

    assert result.exit_code == ExitCode.FAILURE, result.output
    assert read_text(good) == _expected("good.py", created=CREATED) + "x = 1\n"
    assert "Failed" in result.output
    assert "1 file(s) failed" in result.output


def test_stamp_prompts_for_missing_arguments(project: Path) -> None:
    """Missing directory and file name are asked for interactively."""
    result: Result = run_cli_in(project, ["stamp"], input_text="src\nmain.rs\n")

    assert_SUCCESS(result)
    assert "Directory to create/update the file in" in result.output
    assert "File name" in result.output
    assert read_text(project / "src" / "main.rs") == _expected("main.rs")


def test_stamp_update_prompts_for_sentinel_extension(project: Path) -> None:
    """In update mode an explicit ``*.*`` asks for the extension; the directory is kept."""
    a: Path = _stamp_old(project / "src" / "a.py", "x = 1\n")

    result: Result = run_cli_in(
        project, ["stamp", "-d", "src", "-u", "-f", "*.*"], input_text="  *.py \n"
    )

    assert_SUCCESS(result)
    assert "File extension to update" in result.output
    assert "Directory to create/update" not in result.output
    assert read_text(a) == _expected("a.py", created=CREATED) + "x = 1\n"


def test_stamp_created_with_update_is_usage_error(project: Path) -> None:
    """``--created`` only makes sense in single-file mode."""
    result: Result = run_cli_in(
        project, ["stamp", "-d", ".", "-u", "-f", "py", "--created", "2020-01-01"]
    )
    assert_USAGE_ERROR(result)


def test_stamp_license_option(project: Path) -> None:
    """``--license`` selects another license file."""
    write_text(project / "APACHE", "Apache-2.0")

    result: Result = run_cli_in(
        project, ["stamp", "-d", ".", "-f", "a.lua", "--license", "APACHE"]
    )

    assert_SUCCESS(result)
    assert read_text(project / "a.lua").startswith("--[[\n-- Apache-2.0\n-- File created: ")


def test_stamp_license_from_config(project: Path) -> None:
    """The license path may come from ``docstamp.toml``."""
    (project / "legal").mkdir()
    write_text(project / "legal" / "TEXT", "Custom")
    write_text(project / "docstamp.toml", 'root = true\nlicense = "legal/TEXT"\n')

    result: Result = run_cli_in(project, ["stamp", "-d", ".", "-f", "a.ex"])

    assert_SUCCESS(result)
    assert read_text(project / "a.ex").startswith("# \n# Custom\n")
