# docstamp:header:start
#
#   project      : Docstamp
#   file         : __init__.py
#   file_relpath : src/docstamp/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# docstamp:header:end

"""Configuration handling for Docstamp.

Settings are read from ``docstamp.toml`` or the ``[tool.docstamp]`` table of
``pyproject.toml``, discovered upward from the working directory, and merged
with CLI overrides into an immutable `Config`.
"""

from __future__ import annotations

from docstamp.config.model import ArgsLike, Config, MutableConfig

__all__: list[str] = [
    "ArgsLike",
    "Config",
    "MutableConfig",
]
