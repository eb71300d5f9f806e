# docstamp:header:start
#
#   project      : Docstamp
#   file         : test_file_utils.py
#   file_relpath : tests/unit/test_file_utils.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# docstamp:header:end

"""Directory creation, relative paths and file dates (`docstamp.utils.file`)."""

from __future__ import annotations

import os
import re
from pathlib import Path

import pytest

from docstamp.errors import DocstampIOError
from docstamp.utils.file import compute_relpath, ensure_directory, file_creation_date


def test_ensure_directory_creates_each_segment(tmp_path: Path) -> None:
    """Every missing component is created and reported, outermost first."""
    target: Path = tmp_path / "a" / "b" / "c"
    created: list[Path] = ensure_directory(target)
    assert created == [tmp_path / "a", tmp_path / "a" / "b", target]
    assert target.is_dir()


def test_ensure_directory_is_idempotent(tmp_path: Path) -> None:
    """A second call creates nothing."""
    target: Path = tmp_path / "x" / "y"
    ensure_directory(target)
    assert ensure_directory(target) == []


def test_ensure_directory_relative(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Relative paths are created below the current directory."""
    monkeypatch.chdir(tmp_path)
    created: list[Path] = ensure_directory(Path("src/pkg"))
    assert created == [Path("src"), Path("src/pkg")]
    assert (tmp_path / "src" / "pkg").is_dir()


def test_ensure_directory_file_in_the_way(tmp_path: Path) -> None:
    """A regular file occupying a path component is an I/O error."""
    (tmp_path / "blocker").write_text("", encoding="utf-8")
    with pytest.raises(DocstampIOError, match="a file is in the way"):
        ensure_directory(tmp_path / "blocker" / "sub")


def test_file_creation_date_format(tmp_path: Path) -> None:
    """The metadata date is formatted as YYYY-MM-DD."""
    f: Path = tmp_path / "a.py"
    f.write_text("", encoding="utf-8")
    assert re.fullmatch(r"\d{4}-\d{2}-\d{2}", file_creation_date(f))


def test_file_creation_date_falls_back_to_mtime(tmp_path: Path) -> None:
    """Without a birth time the modification time is used."""
    f: Path = tmp_path / "old.py"
    f.write_text("", encoding="utf-8")
    # 2001-09-09 (UTC); local time zones keep it within a day
    os.utime(f, (1_000_000_000, 1_000_000_000))
    if hasattr(f.stat(), "st_birthtime"):
        pytest.skip("platform records a birth time")
    assert file_creation_date(f) in {"2001-09-08", "2001-09-09"}


def test_file_creation_date_missing_file(tmp_path: Path) -> None:
    """Missing files cannot be dated."""
    with pytest.raises(DocstampIOError, match="cannot read metadata"):
        file_creation_date(tmp_path / "nope.py")


def test_compute_relpath(tmp_path: Path) -> None:
    """Paths below the root become relative; others use ``..`` segments."""
    assert compute_relpath(tmp_path / "a" / "b.py", tmp_path) == Path("a/b.py")
    assert compute_relpath(tmp_path / "x.py", tmp_path / "sub") == Path("../x.py")
