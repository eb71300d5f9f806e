# docstamp:header:start
#
#   project      : Docstamp
#   file         : utils.py
#   file_relpath : src/docstamp/cli/utils.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# docstamp:header:end

"""CLI rendering helpers for Docstamp.

Human output for per-file results and run summaries, plus the Markdown table
renderer used by the ``--format markdown`` listings. All printing goes through
a `ConsoleLike` instance.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from docstamp.config.logging import get_logger
from docstamp.engine import Outcome

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from docstamp.cli.console import ConsoleLike
    from docstamp.config.logging import DocstampLogger
    from docstamp.engine import FileResult, RunSummary

logger: DocstampLogger = get_logger(__name__)


class OutputFormat(str, Enum):
    """Output format for CLI listings.

    Members:
      DEFAULT: Human-friendly text output; may include ANSI color if enabled.
      JSON: A single JSON document (machine-readable, never colored).
      MARKDOWN: A GitHub-flavoured Markdown document.
    """

    DEFAULT = "default"
    JSON = "json"
    MARKDOWN = "markdown"


# Past-tense label and click color per outcome; dry runs use the "would" form
_OUTCOME_LABELS: dict[Outcome, tuple[str, str, str]] = {
    Outcome.CREATED: ("Created", "Would create", "green"),
    Outcome.INSERTED: ("Added docstring to", "Would add docstring to", "green"),
    Outcome.REFRESHED: ("Updated docstring in", "Would update docstring in", "green"),
    Outcome.STRIPPED: ("Removed docstring from", "Would remove docstring from", "green"),
    Outcome.UNCHANGED: ("Unchanged", "Unchanged", "bright_black"),
    Outcome.FAILED: ("Failed", "Failed", "bright_red"),
}


def describe_result(result: FileResult, *, dry_run: bool) -> str:
    """Return the one-line human description of a file result."""
    done, would, _color = _OUTCOME_LABELS[result.outcome]
    text: str = f"{would if dry_run else done} '{result.path}'"
    if result.error is not None:
        text += f": {result.error}"
    return text


def render_result(console: ConsoleLike, result: FileResult, *, dry_run: bool) -> None:
    """Print one result line, colored by outcome."""
    _done, _would, color = _OUTCOME_LABELS[result.outcome]
    console.print(console.styled(describe_result(result, dry_run=dry_run), fg=color))


def render_summary_counts(console: ConsoleLike, summary: RunSummary) -> None:
    """Print the human summary (aligned counts by outcome)."""
    counts: dict[Outcome, int] = summary.counts()
    console.print()
    console.print(console.styled("Summary by outcome:", bold=True, underline=True))
    if not counts:
        console.print("  no matching files")
        return
    label_width: int = max(len(o.value) for o in counts) + 1
    num_width: int = len(str(len(summary)))
    for outcome in Outcome:
        n: int | None = counts.get(outcome)
        if n is None:
            continue
        color: str = _OUTCOME_LABELS[outcome][2]
        line: str = f"  {outcome.value:<{label_width}}: {n:>{num_width}}"
        console.print(console.styled(line, fg=color))


def render_markdown_table(
    headers: Sequence[str],
    rows: Sequence[Sequence[str]],
    *,
    align: Mapping[int, str] | None = None,
) -> str:
    """Render a GitHub-flavoured Markdown table with padded columns.

    Args:
        headers: Column headers.
        rows: A sequence of row sequences (each row same length as ``headers``).
        align: Optional mapping of column index to alignment:
            ``"left"`` (default), ``"right"``, or ``"center"``.

    Returns:
        The Markdown table as a single string (ending with a newline).

    Raises:
        ValueError: If any row length differs from the number of headers.
    """
    if not headers:
        return ""
    ncols: int = len(headers)
    for r in rows:
        if len(r) != ncols:
            raise ValueError("All rows must have the same number of columns as headers")

    widths: list[int] = [len(str(h)) for h in headers]
    for r in rows:
        for i, cell in enumerate(r):
            widths[i] = max(widths[i], len(str(cell)))

    def _pad(text: str, w: int) -> str:
        return f"{text:<{w}}"

    def _sep_for(i: int) -> str:
        style: str = (align or {}).get(i, "left").lower()
        w: int = max(1, widths[i])
        if style == "right":
            return "-" * (w - 1) + ":" if w > 1 else ":"
        if style == "center":
            return ":" + ("-" * (w - 2) if w > 2 else "-") + ":"
        return "-" * w

    header_line: str = " | ".join(_pad(str(headers[i]), widths[i]) for i in range(ncols))
    sep_line: str = " | ".join(_sep_for(i) for i in range(ncols))
    data_lines: list[str] = [
        " | ".join(_pad(str(r[i]), widths[i]) for i in range(ncols)) for r in rows
    ]

    return (
        "| "
        + header_line
        + " |\n"
        + "| "
        + sep_line
        + " |\n"
        + "".join("| " + line + " |\n" for line in data_lines)
    )
