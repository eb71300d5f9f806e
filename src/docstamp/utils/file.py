# docstamp:header:start
#
#   file         : file.py
#   file_relpath : src/docstamp/utils/file.py
#   project      : Docstamp
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# docstamp:header:end

"""Filesystem helpers for Docstamp."""

import os
from datetime import date
from pathlib import Path

from docstamp.config.logging import get_logger
from docstamp.constants import DATE_FORMAT
from docstamp.errors import DocstampIOError

logger = get_logger(__name__)


def compute_relpath(file_path: Path, root_path: Path) -> Path:
    """Compute the relative path from root_path to file_path.

    Args:
        file_path (Path): The file path to compute the relative path for.
        root_path (Path): The root path to compute the relative path from.

    Returns:
        Path: The relative path from root_path to file_path.
    """
    resolved_path = file_path.resolve()
    resolved_root = (root_path or Path.cwd()).resolve()

    try:
        return resolved_path.relative_to(resolved_root)
    except ValueError:
        # Not a subpath
        return Path(os.path.relpath(resolved_path, start=resolved_root))


def ensure_directory(path: Path) -> list[Path]:
    """Create every missing segment of ``path``.

    Segments are created one at a time from the outermost, so the returned
    list names exactly the directories this call created. Calling it again on
    the same path creates nothing.

    Args:
        path (Path): Directory path (relative or absolute).

    Returns:
        list[Path]: Directories created, outermost first.

    Raises:
        DocstampIOError: If a segment cannot be created, or exists as a file.
    """
    created: list[Path] = []
    current = Path(path.anchor) if path.is_absolute() else Path()
    for part in path.parts[1:] if path.is_absolute() else path.parts:
        current = current / part
        if current.is_dir():
            continue
        try:
            current.mkdir()
        except FileExistsError as e:
            raise DocstampIOError(
                f"cannot create directory {current}: a file is in the way",
                path=current,
                os_error=e,
            ) from e
        except OSError as e:
            raise DocstampIOError(
                f"cannot create directory {current}", path=current, os_error=e
            ) from e
        logger.info("Created directory %s", current)
        created.append(current)
    return created


def file_creation_date(path: Path) -> str:
    """Return the creation date of ``path`` as ``YYYY-MM-DD``.

    Uses the birth time where the platform records one, else the last
    modification time.

    Raises:
        DocstampIOError: If the file cannot be stat'ed.
    """
    try:
        st = path.stat()
    except OSError as e:
        raise DocstampIOError(f"cannot read metadata of {path}", path=path, os_error=e) from e
    timestamp: float = getattr(st, "st_birthtime", None) or st.st_mtime
    return date.fromtimestamp(timestamp).strftime(DATE_FORMAT)
