# docstamp:header:start
#
#   project      : Docstamp
#   file         : constants.py
#   file_relpath : src/docstamp/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# docstamp:header:end

"""Docstamp Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

DOCSTAMP_VERSION: str = get_version("docstamp")

# Labels written into every docstring block
FILE_CREATED_LABEL: str = "File created: "
LAST_UPDATED_LABEL: str = "Last updated: "

# strftime format of the created/updated stamps
DATE_FORMAT: str = "%Y-%m-%d"

DEFAULT_LICENSE_PATH: str = "LICENSE"

# Legacy "no file given" sentinel for --file; triggers an interactive prompt
FILE_NAME_SENTINEL: str = "*.*"

# Config file discovery
DOCSTAMP_TOML_NAME: str = "docstamp.toml"
PYPROJECT_TOML_NAME: str = "pyproject.toml"
PYPROJECT_TOOL_SECTION: str = "docstamp"

LOG_LEVEL_ENV_VAR: str = "DOCSTAMP_LOG_LEVEL"
