# docstamp:header:start
#
#   project      : Docstamp
#   file         : test_logging_setup.py
#   file_relpath : tests/config/test_logging_setup.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# docstamp:header:end

"""TRACE level, env-driven log level and colored formatting."""

from __future__ import annotations

import logging as std_logging
from typing import TYPE_CHECKING

import pytest

from docstamp.config.logging import (
    TRACE_LEVEL,
    ChalkFormatter,
    DocstampLogger,
    get_logger,
    resolve_env_log_level,
    setup_logging,
)

if TYPE_CHECKING:
    from collections.abc import Iterator


@pytest.fixture
def restore_trace_logging() -> Iterator[None]:
    """Put the session-wide TRACE configuration back after the test."""
    yield
    setup_logging(level=TRACE_LEVEL)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("TRACE", TRACE_LEVEL),
        ("debug", std_logging.DEBUG),
        (" Info ", std_logging.INFO),
        ("WARN", std_logging.WARNING),
        ("15", 15),
        ("nonsense", None),
        ("", None),
    ],
)
def test_resolve_env_log_level(
    monkeypatch: pytest.MonkeyPatch, raw: str, expected: int | None
) -> None:
    """Names are case-insensitive, numbers pass through, unknown names are ignored."""
    monkeypatch.setenv("DOCSTAMP_LOG_LEVEL", raw)
    assert resolve_env_log_level() == expected


@pytest.mark.usefixtures("restore_trace_logging")
def test_setup_logging_defaults_to_critical() -> None:
    """Without a level or env var the root logger only lets CRITICAL through."""
    setup_logging()
    root: std_logging.Logger = std_logging.getLogger()
    assert root.level == std_logging.CRITICAL
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0].formatter, ChalkFormatter)


@pytest.mark.usefixtures("restore_trace_logging")
def test_setup_logging_reads_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """``DOCSTAMP_LOG_LEVEL`` supplies the level when none is passed."""
    monkeypatch.setenv("DOCSTAMP_LOG_LEVEL", "info")
    setup_logging()
    assert std_logging.getLogger().level == std_logging.INFO


def test_trace_is_emitted_below_debug(caplog: pytest.LogCaptureFixture) -> None:
    """``trace()`` records at TRACE and is filtered out at DEBUG."""
    log: DocstampLogger = get_logger("docstamp.tests.trace")
    assert isinstance(log, DocstampLogger)

    with caplog.at_level(TRACE_LEVEL, logger="docstamp.tests.trace"):
        log.trace("walking %s", "src")
    assert [(r.levelname, r.getMessage()) for r in caplog.records] == [("TRACE", "walking src")]

    caplog.clear()
    with caplog.at_level(std_logging.DEBUG, logger="docstamp.tests.trace"):
        log.trace("hidden")
    assert caplog.records == []


@pytest.mark.parametrize("level", [TRACE_LEVEL, std_logging.DEBUG, std_logging.ERROR, 1])
def test_formatter_keeps_message_text(level: int) -> None:
    """Coloring wraps the formatted text without altering it."""
    record = std_logging.LogRecord("docstamp", level, __file__, 1, "stamped %s", ("a.py",), None)
    out: str = ChalkFormatter("%(message)s").format(record)
    assert "stamped a.py" in out
