# docstamp:header:start
#
#   project      : Docstamp
#   file         : __init__.py
#   file_relpath : src/docstamp/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# docstamp:header:end

"""Docstamp CLI package.

This package groups all Click command definitions and supporting utilities
for the Docstamp command-line interface.

Typical usage:
    The console script entry point is defined in ``pyproject.toml`` as::

        [project.scripts]
        docstamp = "docstamp.cli.main:cli"

All subcommands live in ``docstamp.cli.commands``.
"""

from __future__ import annotations

__all__: list[str] = []
# Do NOT import .main or commands at module import time
