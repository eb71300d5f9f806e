# docstamp:header:start
#
#   project      : Docstamp
#   file         : walker.py
#   file_relpath : src/docstamp/walker.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# docstamp:header:end

"""Walk a directory tree for files with a given extension.

The walk is lazy: files are yielded as directories are listed, and the order
is not guaranteed. Exclusion patterns follow ``.gitignore`` semantics and are
evaluated relative to the walk root.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING

from pathspec import PathSpec
from pathspec.patterns.gitwildmatch import GitWildMatchPattern

from docstamp.config.logging import DocstampLogger, get_logger
from docstamp.errors import NotFoundError
from docstamp.utils.file import compute_relpath

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence

logger: DocstampLogger = get_logger(__name__)


def normalize_extension(extension_glob: str) -> str:
    """Reduce an extension argument to its bare extension.

    Accepts ``"*.py"``, ``".py"``, ``"py"`` and file names such as
    ``"main.py"`` (the text after the last dot is used).

    Args:
        extension_glob (str): Extension in any of the accepted forms.

    Returns:
        str: The extension without dot or wildcard.

    Raises:
        NotFoundError: If no extension remains.
    """
    ext: str = extension_glob.strip().rsplit(".", 1)[-1].lstrip("*")
    if not ext:
        raise NotFoundError(f"could not find a file extension in '{extension_glob}'")
    return ext


def build_exclude_spec(patterns: Sequence[str]) -> PathSpec | None:
    """Compile gitignore-style patterns, or return None when there are none."""
    cleaned: list[str] = [p.strip() for p in patterns if p.strip() and not p.startswith("#")]
    if not cleaned:
        return None
    return PathSpec.from_lines(GitWildMatchPattern, cleaned)


def for_each_file(
    root: Path,
    extension_glob: str,
    *,
    exclude: Sequence[str] = (),
) -> Iterator[Path]:
    """Yield every file under ``root`` whose name ends with the extension.

    Args:
        root (Path): Directory to walk recursively.
        extension_glob (str): Extension filter (see
            [`normalize_extension`][docstamp.walker.normalize_extension]).
        exclude (Sequence[str]): Gitignore-style patterns relative to ``root``;
            matching files and directories are skipped.

    Yields:
        Path: Matching regular files.
    """
    suffix: str = "." + normalize_extension(extension_glob)
    spec: PathSpec | None = build_exclude_spec(exclude)
    logger.debug("Walking %s for '*%s' (exclude=%s)", root, suffix, list(exclude))

    for dirpath, dirnames, filenames in os.walk(root):
        current = Path(dirpath)
        if spec is not None:
            # Prune excluded directories so they are never listed
            dirnames[:] = [
                d
                for d in dirnames
                if not spec.match_file(compute_relpath(current / d, root).as_posix() + "/")
            ]
        for name in filenames:
            if not name.endswith(suffix):
                continue
            path: Path = current / name
            if spec is not None and spec.match_file(compute_relpath(path, root).as_posix()):
                logger.trace("Excluded %s", path)
                continue
            if not path.is_file():
                continue
            yield path
