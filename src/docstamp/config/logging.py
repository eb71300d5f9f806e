# docstamp:header:start
#
#   project      : Docstamp
#   file         : logging.py
#   file_relpath : src/docstamp/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# docstamp:header:end

"""Docstamp logging with a TRACE level and colored output.

This module extends the standard logging module with a custom TRACE level
(below DEBUG), a logger class exposing ``trace()``, and a formatter that
colors records by severity with yachalk.
"""


from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Callable, Final, cast

from yachalk import chalk

from docstamp.constants import LOG_LEVEL_ENV_VAR

if TYPE_CHECKING:
    from collections.abc import Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5
logging.addLevelName(TRACE_LEVEL, "TRACE")


class DocstampLogger(logging.Logger):
    """Logger with an extra ``trace()`` method for the TRACE level."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log ``msg % args`` at TRACE level (finer than DEBUG).

        Args:
            msg (object): The message format string.
            *args (object): Arguments merged into ``msg``.
            extra (Mapping[str, object] | None): Extra attributes for the record.
        """
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(TRACE_LEVEL, msg, args, extra=extra, stacklevel=2)


logging.setLoggerClass(DocstampLogger)

LOG_FORMAT: Final[str] = "[%(levelname)s] %(message)s"
VERBOSE_LOG_FORMAT: Final[str] = "[%(levelname)s] [%(name)s:%(lineno)d] %(message)s"

# Highest threshold first; a record takes the first style whose level it reaches.
_LEVEL_STYLES: Final[tuple[tuple[int, Callable[[str], str]], ...]] = (
    (logging.CRITICAL, chalk.red_bright),
    (logging.ERROR, chalk.red),
    (logging.WARNING, chalk.yellow),
    (logging.INFO, chalk.green),
    (logging.DEBUG, chalk.gray),
    (TRACE_LEVEL, chalk.blue),
)


class ChalkFormatter(logging.Formatter):
    """Formatter that colors each record with yachalk according to its level."""

    def format(self, record: logging.LogRecord) -> str:
        """Format ``record`` and wrap it in the color of its level."""
        message: str = super().format(record)
        for threshold, paint in _LEVEL_STYLES:
            if record.levelno >= threshold:
                return paint(message)
        return chalk.dim(message)


def resolve_env_log_level() -> int | None:
    """Return the level named by ``DOCSTAMP_LOG_LEVEL``, or None.

    Accepts level names (``TRACE``, ``debug``, ``WARN``...) and numbers.
    Unknown names are ignored.
    """
    raw: str | None = os.environ.get(LOG_LEVEL_ENV_VAR)
    if not raw or not raw.strip():
        return None
    value: str = raw.strip().upper()
    if value.isdigit():
        return int(value)
    level: object = logging.getLevelName(value)
    return level if isinstance(level, int) else None


def setup_logging(level: int | None = None) -> None:
    """Route all records to stdout through a `ChalkFormatter`.

    ``level`` falls back to the environment (see `resolve_env_log_level`) and
    then to CRITICAL, which keeps the CLI silent. Below INFO the records also
    show the logger name and line number.
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL

    root_logger: logging.Logger = logging.getLogger()
    root_logger.setLevel(level)
    for old in root_logger.handlers[:]:
        root_logger.removeHandler(old)

    handler = logging.StreamHandler(sys.stdout)
    fmt: str = LOG_FORMAT if level >= logging.INFO else VERBOSE_LOG_FORMAT
    handler.setFormatter(ChalkFormatter(fmt))
    root_logger.addHandler(handler)


def get_logger(name: str) -> DocstampLogger:
    """Return the `DocstampLogger` called ``name``."""
    return cast("DocstampLogger", logging.getLogger(name))
