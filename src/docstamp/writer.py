# docstamp:header:start
#
#   project      : Docstamp
#   file         : writer.py
#   file_relpath : src/docstamp/writer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# docstamp:header:end

"""Commit new file content to a sink.

This module is the only place where Docstamp writes source files. A write
never modifies the target in place: the complete new content goes to a
randomly named temporary file next to the target, which is then renamed over
it. Either the old or the new content is observable, never a partial file.

Sinks
-----
- AtomicFileSink: writes through [`commit`][docstamp.writer.commit].
- NullSink: no-op (dry-run).
"""

from __future__ import annotations

import os
import stat
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from docstamp.config.logging import DocstampLogger, get_logger
from docstamp.errors import DocstampIOError

logger: DocstampLogger = get_logger(__name__)

TEMP_PREFIX: str = ".docstamp-"
TEMP_SUFFIX: str = ".tmp"
NEW_FILE_MODE: int = 0o666


@dataclass
class WriteResult:
    """Structured result of a write operation."""

    path: Path
    bytes_written: int = 0
    written: bool = False


class WriteSink(Protocol):
    """Protocol for sinks receiving the final content of a file."""

    def write(self, *, content: bytes, target: Path) -> WriteResult:
        """Write ``content`` as the complete new content of ``target``.

        Args:
            content (bytes): The new file content.
            target (Path): Destination file.

        Returns:
            WriteResult: Whether anything was written and how many bytes.
        """
        ...


def _current_umask() -> int:
    """Return the process umask (it can only be read by setting it)."""
    mask: int = os.umask(0)
    os.umask(mask)
    return mask


def _remove_quietly(path: str) -> None:
    """Remove a leftover temporary file, logging (not raising) on failure."""
    try:
        os.unlink(path)
    except FileNotFoundError:
        pass
    except OSError as e:
        logger.warning("Could not remove temporary file %s: %s", path, e)


def commit(new_content: bytes, target: Path) -> int:
    """Atomically replace (or create) ``target`` with ``new_content``.

    The content is written to a temporary file in the target's directory,
    flushed to disk, given the target's permission bits (or the umask-derived
    default for a new file) and renamed over the target with ``os.replace``.

    Args:
        new_content (bytes): The complete new file content.
        target (Path): File to create or replace. Its directory must exist.

    Returns:
        int: Number of bytes written.

    Raises:
        DocstampIOError: If any step fails. The temporary file is removed and
            the target keeps its previous content.
    """
    target = Path(target)
    directory: Path = target.parent

    try:
        fd, tmp_name = tempfile.mkstemp(prefix=TEMP_PREFIX, suffix=TEMP_SUFFIX, dir=directory)
    except OSError as e:
        raise DocstampIOError(
            f"cannot create temporary file next to {target}", path=target, os_error=e
        ) from e

    logger.trace("Writing %d bytes for %s via %s", len(new_content), target, tmp_name)
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(new_content)
            f.flush()
            os.fsync(f.fileno())
        try:
            mode: int = stat.S_IMODE(os.stat(target).st_mode)
        except FileNotFoundError:
            mode = NEW_FILE_MODE & ~_current_umask()
        os.chmod(tmp_name, mode)
        os.replace(tmp_name, target)
    except OSError as e:
        _remove_quietly(tmp_name)
        raise DocstampIOError(f"cannot write {target}", path=target, os_error=e) from e

    logger.debug("Committed %d bytes to %s", len(new_content), target)
    return len(new_content)


class AtomicFileSink:
    """Filesystem sink that replaces the target atomically."""

    def write(self, *, content: bytes, target: Path) -> WriteResult:
        """Commit ``content`` to ``target``.

        Raises:
            DocstampIOError: If the file cannot be written.
        """
        written: int = commit(content, target)
        return WriteResult(path=target, bytes_written=written, written=True)


class NullSink:
    """Dry-run sink: does not write anything."""

    def write(self, *, content: bytes, target: Path) -> WriteResult:
        """No-op write for dry-run mode."""
        logger.debug("NullSink: would write %d bytes to %s", len(content), target)
        return WriteResult(path=target, bytes_written=0, written=False)


def select_sink(*, dry_run: bool) -> WriteSink:
    """Return ``NullSink`` for a dry run, otherwise ``AtomicFileSink``."""
    if dry_run:
        logger.debug("Selected NULL sink (dry run)")
        return NullSink()
    logger.debug("Selected atomic file sink")
    return AtomicFileSink()
