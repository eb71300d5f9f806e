# docstamp:header:start
#
#   project      : Docstamp
#   file         : engine.py
#   file_relpath : src/docstamp/engine.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# docstamp:header:end

"""Per-file and batch operations of Docstamp.

Each operation reads a file, computes its new content from the pure helpers in
[`docstamp.block`][] and hands the result to a write sink. The outcome of every
file is reported as a [`FileResult`][docstamp.engine.FileResult]; batch runs
collect them in a [`RunSummary`][docstamp.engine.RunSummary].

Operations:
    stamp_file: Create a file holding only the block, refresh an existing
        block, or prepend a new block (single-file mode).
    update_file: Refresh the block of a file that already has one.
    strip_file: Remove the block of a file.
    update_tree / strip_tree: Apply ``update_file`` / ``strip_file`` to every
        matching file below a directory.

Errors are raised as [`DocstampError`][docstamp.errors.DocstampError]
subclasses. Batch runs stop at the first error unless ``keep_going`` is set,
in which case the error is recorded in the file's result.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Callable

from docstamp.block.builder import build, today_stamp
from docstamp.block.locator import find_created_date, locate_block, strip_block
from docstamp.config.logging import DocstampLogger, get_logger
from docstamp.errors import DocstampError, DocstampIOError, InvalidDataError, NotFoundError
from docstamp.filetypes.registry import resolve_style
from docstamp.utils.file import ensure_directory, file_creation_date
from docstamp.walker import for_each_file
from docstamp.writer import AtomicFileSink

if TYPE_CHECKING:
    from collections.abc import Sequence

    from docstamp.block.locator import BlockSpan
    from docstamp.filetypes.base import CommentStyle
    from docstamp.writer import WriteResult, WriteSink

logger: DocstampLogger = get_logger(__name__)

__all__: list[str] = [
    "FileResult",
    "Outcome",
    "RunSummary",
    "ensure_directory",
    "read_license",
    "stamp_file",
    "strip_file",
    "strip_tree",
    "update_file",
    "update_tree",
]


class Outcome(Enum):
    """What happened (or, in a dry run, would happen) to a file."""

    CREATED = "created"
    INSERTED = "inserted"
    REFRESHED = "refreshed"
    STRIPPED = "stripped"
    UNCHANGED = "unchanged"
    FAILED = "failed"

    @property
    def changes_file(self) -> bool:
        """True for outcomes that alter the file on disk."""
        return self in _CHANGING_OUTCOMES


_CHANGING_OUTCOMES: frozenset[Outcome] = frozenset(
    {Outcome.CREATED, Outcome.INSERTED, Outcome.REFRESHED, Outcome.STRIPPED}
)


@dataclass
class FileResult:
    """Outcome of processing a single file.

    Attributes:
        path (Path): The processed file.
        outcome (Outcome): What happened to the file.
        created (str | None): "File created" date written into the block.
        bytes_written (int): Bytes committed to disk (0 in a dry run).
        error (DocstampError | None): The error, when ``outcome`` is FAILED.
    """

    path: Path
    outcome: Outcome
    created: str | None = None
    bytes_written: int = 0
    error: DocstampError | None = None

    @property
    def ok(self) -> bool:
        """True when the file was processed without error."""
        return self.error is None


@dataclass
class RunSummary:
    """Accumulated results of a batch run."""

    results: list[FileResult] = field(default_factory=lambda: [])

    def add(self, result: FileResult) -> None:
        """Record the result of one file."""
        self.results.append(result)

    def counts(self) -> dict[Outcome, int]:
        """Return the number of files per outcome (outcomes with zero files omitted)."""
        return dict(Counter(r.outcome for r in self.results))

    @property
    def failures(self) -> list[FileResult]:
        """Results of files that failed."""
        return [r for r in self.results if not r.ok]

    @property
    def ok(self) -> bool:
        """True when no file failed."""
        return not self.failures

    @property
    def would_change(self) -> bool:
        """True when at least one file was (or would be) changed."""
        return any(r.outcome.changes_file for r in self.results)

    def __len__(self) -> int:
        return len(self.results)


def _read_bytes(path: Path) -> bytes:
    """Read a file, mapping OS errors onto the Docstamp taxonomy."""
    try:
        return path.read_bytes()
    except FileNotFoundError as e:
        raise NotFoundError(f"could not find file '{path}'") from e
    except OSError as e:
        raise DocstampIOError(f"cannot read {path}", path=path, os_error=e) from e


def _decode(data: bytes, path: Path) -> str:
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise InvalidDataError(f"{path} is not valid UTF-8: {e.reason} at byte {e.start}") from e


def _read_text(path: Path) -> str:
    return _decode(_read_bytes(path), path)


def _default_sink(sink: WriteSink | None) -> WriteSink:
    return sink if sink is not None else AtomicFileSink()


def read_license(path: Path) -> str:
    """Read the license text used as the body of every block.

    Args:
        path (Path): License file.

    Returns:
        str: The license text, decoded as UTF-8.

    Raises:
        NotFoundError: If the file does not exist.
        DocstampIOError: If the file cannot be read.
        InvalidDataError: If the file is not valid UTF-8.
    """
    text: str = _read_text(Path(path))
    logger.debug("Read license text from %s (%d chars)", path, len(text))
    return text


def stamp_file(
    target: Path,
    license_text: str,
    *,
    created: str | None = None,
    today: str | None = None,
    sink: WriteSink | None = None,
) -> FileResult:
    """Stamp a single file (single-file mode).

    - A missing ``target`` is created and holds only the block (CREATED).
    - A file that already holds a block keeps that block's "File created"
      date; the old block is replaced with a fresh one (REFRESHED).
    - Any other file gets a new block prepended, dated from the file's
      metadata (INSERTED).

    Args:
        target (Path): File to stamp. Its directory must exist (see
            [`ensure_directory`][docstamp.utils.file.ensure_directory]).
        license_text (str): License text for the block body.
        created (str | None): Explicit "File created" date; overrides any
            date found in the file or its metadata.
        today (str | None): Explicit "Last updated" date (defaults to today).
        sink (WriteSink | None): Destination of the new content
            (defaults to [`AtomicFileSink`][docstamp.writer.AtomicFileSink]).

    Returns:
        FileResult: The outcome for ``target``.

    Raises:
        NotFoundError: If the file extension is not supported.
        InvalidDataError: If the existing file is not valid UTF-8.
        DocstampIOError: If the file cannot be read or written.
    """
    target = Path(target)
    style: CommentStyle = resolve_style(target)
    out: WriteSink = _default_sink(sink)

    if not target.exists():
        created_date: str = created or _today(today)
        block: bytes = build(license_text, style, created_date, today=today)
        result: WriteResult = out.write(content=block, target=target)
        logger.info("Created %s with a new docstring block", target)
        return FileResult(
            path=target,
            outcome=Outcome.CREATED,
            created=created_date,
            bytes_written=result.bytes_written,
        )

    content: str = _read_text(target)
    span: BlockSpan | None = locate_block(content, style)

    if span is not None:
        if created is None:
            try:
                created = find_created_date(content)
            except NotFoundError:
                logger.warning("%s has a block without a created date; using file metadata", target)
                created = file_creation_date(target)
        body: str = content[: span.start] + content[span.end :]
        outcome: Outcome = Outcome.REFRESHED
    else:
        if created is None:
            created = file_creation_date(target)
        body = content
        outcome = Outcome.INSERTED

    return _commit(target, body, license_text, style, created, outcome, today, out, content)


def update_file(
    path: Path,
    license_text: str,
    *,
    today: str | None = None,
    sink: WriteSink | None = None,
) -> FileResult:
    """Refresh the block of a file that already has one (update mode).

    The "File created" date of the existing block is kept, the old block is
    removed and a fresh block is prepended.

    Args:
        path (Path): File to update.
        license_text (str): License text for the block body.
        today (str | None): Explicit "Last updated" date (defaults to today).
        sink (WriteSink | None): Destination of the new content.

    Returns:
        FileResult: REFRESHED, or UNCHANGED when the new content is identical.

    Raises:
        NotFoundError: If the extension is unsupported or the file has no
            "File created" date.
        InvalidDataError: If the file is not valid UTF-8.
        DocstampIOError: If the file cannot be read or written.
    """
    path = Path(path)
    style: CommentStyle = resolve_style(path)
    content: str = _read_text(path)
    try:
        created: str = find_created_date(content)
    except NotFoundError as e:
        raise NotFoundError(f"{path}: {e}") from e
    body: str = strip_block(content, style)
    return _commit(
        path,
        body,
        license_text,
        style,
        created,
        Outcome.REFRESHED,
        today,
        _default_sink(sink),
        content,
    )


def strip_file(path: Path, *, sink: WriteSink | None = None) -> FileResult:
    """Remove the docstring block of a file, if it has one.

    Args:
        path (Path): File to strip.
        sink (WriteSink | None): Destination of the new content.

    Returns:
        FileResult: STRIPPED, or UNCHANGED when the file holds no block.

    Raises:
        NotFoundError: If the file or its extension is not found.
        InvalidDataError: If the file is not valid UTF-8.
        DocstampIOError: If the file cannot be read or written.
    """
    path = Path(path)
    style: CommentStyle = resolve_style(path)
    content: str = _read_text(path)
    stripped: str = strip_block(content, style)
    if stripped == content:
        logger.info("%s holds no docstring block", path)
        return FileResult(path=path, outcome=Outcome.UNCHANGED)

    result: WriteResult = _default_sink(sink).write(content=stripped.encode("utf-8"), target=path)
    logger.info("Stripped docstring block from %s", path)
    return FileResult(path=path, outcome=Outcome.STRIPPED, bytes_written=result.bytes_written)


def update_tree(
    root: Path,
    extension_glob: str,
    license_text: str,
    *,
    keep_going: bool = False,
    exclude: Sequence[str] = (),
    today: str | None = None,
    sink: WriteSink | None = None,
) -> RunSummary:
    """Refresh the block of every matching file below ``root``.

    Args:
        root (Path): Directory to walk recursively.
        extension_glob (str): Extension filter (``"*.py"``, ``".py"``, ``"py"``...).
        license_text (str): License text for the block body.
        keep_going (bool): Record per-file errors and continue instead of
            stopping at the first one.
        exclude (Sequence[str]): Gitignore-style patterns relative to ``root``.
        today (str | None): Explicit "Last updated" date (defaults to today).
        sink (WriteSink | None): Destination of the new content.

    Returns:
        RunSummary: The result of every visited file.

    Raises:
        DocstampError: The first per-file error, unless ``keep_going`` is set.
    """
    out: WriteSink = _default_sink(sink)
    return _run_tree(
        root,
        extension_glob,
        lambda p: update_file(p, license_text, today=today, sink=out),
        keep_going=keep_going,
        exclude=exclude,
    )


def strip_tree(
    root: Path,
    extension_glob: str,
    *,
    keep_going: bool = False,
    exclude: Sequence[str] = (),
    sink: WriteSink | None = None,
) -> RunSummary:
    """Remove the block of every matching file below ``root``.

    Raises:
        DocstampError: The first per-file error, unless ``keep_going`` is set.
    """
    out: WriteSink = _default_sink(sink)
    return _run_tree(
        root,
        extension_glob,
        lambda p: strip_file(p, sink=out),
        keep_going=keep_going,
        exclude=exclude,
    )


def _run_tree(
    root: Path,
    extension_glob: str,
    operation: Callable[[Path], FileResult],
    *,
    keep_going: bool,
    exclude: Sequence[str],
) -> RunSummary:
    root = Path(root)
    if not root.is_dir():
        raise NotFoundError(f"could not find directory '{root}'")

    summary = RunSummary()
    for path in for_each_file(root, extension_glob, exclude=exclude):
        try:
            summary.add(operation(path))
        except DocstampError as e:
            if not keep_going:
                raise
            logger.error("%s: %s", path, e)
            summary.add(FileResult(path=path, outcome=Outcome.FAILED, error=e))

    logger.info(
        "Processed %d file(s) under %s: %s",
        len(summary),
        root,
        {k.value: v for k, v in summary.counts().items()},
    )
    return summary


def _today(today: str | None) -> str:
    return today if today is not None else today_stamp()


def _commit(
    path: Path,
    body: str,
    license_text: str,
    style: CommentStyle,
    created: str,
    outcome: Outcome,
    today: str | None,
    sink: WriteSink,
    original: str,
) -> FileResult:
    """Prepend a fresh block to ``body`` and write it unless nothing changed."""
    new_content: bytes = build(license_text, style, created, today=today) + body.encode("utf-8")
    if new_content == original.encode("utf-8"):
        logger.info("%s is already up to date", path)
        return FileResult(path=path, outcome=Outcome.UNCHANGED, created=created)

    result: WriteResult = sink.write(content=new_content, target=path)
    logger.info("%s %s (created %s)", outcome.value.capitalize(), path, created)
    return FileResult(
        path=path,
        outcome=outcome,
        created=created,
        bytes_written=result.bytes_written,
    )
