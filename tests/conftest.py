# docstamp:header:start
#
#   project      : Docstamp
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# docstamp:header:end

"""Pytest configuration for the Docstamp test suite.

This file sets up global fixtures and customizes the logging configuration for
test runs, and provides small builders shared by the unit tests.

Notes:
    All dates in tests are explicit (``today=`` / ``created=``) so results do
    not depend on the day the suite runs.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from docstamp.block.builder import build
from docstamp.config import logging
from docstamp.filetypes.registry import resolve_style

if TYPE_CHECKING:
    from pathlib import Path

    from docstamp.filetypes.base import CommentStyle

F = TypeVar("F", bound=Callable[..., object])

# This defines the type for the decorator function itself:
# It takes a Callable (F) and returns the same Callable (F).
DecoratorType = Callable[[F], F]

LICENSE_TEXT = "MIT License\nCopyright (c) 2023 Example"
CREATED = "2023-10-01"
TODAY = "2023-10-02"


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.integration`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_integration: DecoratorType[Any] = as_typed_mark(pytest.mark.integration)
mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.hookimpl`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.hookimpl`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_docstamp_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure Docstamp's runtime log level is not forced via env during tests.

    This avoids accidental DEBUG/TRACE noise when the developer has exported
    DOCSTAMP_LOG_LEVEL in their shell.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv("DOCSTAMP_LOG_LEVEL", raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE for all tests.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


def block_for(
    filename: str,
    *,
    license_text: str = LICENSE_TEXT,
    created: str = CREATED,
    today: str = TODAY,
) -> str:
    """Return the decoded block Docstamp writes for ``filename``."""
    style: CommentStyle = resolve_style(filename)
    return build(license_text, style, created, today=today).decode("utf-8")


def write_text(path: Path, text: str) -> Path:
    """Write ``text`` to ``path`` byte for byte (no newline translation)."""
    path.write_bytes(text.encode("utf-8"))
    return path


def read_text(path: Path) -> str:
    """Read ``path`` byte for byte (no newline translation)."""
    return path.read_bytes().decode("utf-8")
