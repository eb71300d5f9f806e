# docstamp:header:start
#
#   project      : Docstamp
#   file         : io.py
#   file_relpath : src/docstamp/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# docstamp:header:end

"""Load TOML configuration files and read typed values from them.

Parsing is done with `tomlkit` and returned as plain `dict` structures.

The getters are forgiving: a value of the wrong type is logged and replaced by
the default, so a typo in a config file never aborts a run. A file that is not
valid TOML, on the other hand, raises
[`ConfigError`][docstamp.errors.ConfigError].
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeGuard, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from docstamp.config.logging import DocstampLogger, get_logger
from docstamp.constants import PYPROJECT_TOML_NAME, PYPROJECT_TOOL_SECTION
from docstamp.errors import ConfigError

if TYPE_CHECKING:
    from pathlib import Path

logger: DocstampLogger = get_logger(__name__)

TomlTable = dict[str, Any]


def is_toml_table(obj: object) -> TypeGuard[TomlTable]:
    """Type guard for a TOML table-like mapping."""
    return isinstance(obj, dict)


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document (``docstamp.toml`` or ``pyproject.toml``).

    Returns:
        TomlTable: The parsed TOML content as plain Python values.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        raise ConfigError(f"cannot read config file {path}: {e}") from e
    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        raise ConfigError(f"invalid TOML in {path}: {e}") from e
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if is_toml_table(data_any) else {}


def extract_docstamp_table(data: TomlTable, path: Path) -> TomlTable | None:
    """Return the Docstamp settings of a parsed config file.

    For ``pyproject.toml`` this is the ``[tool.docstamp]`` table (``None`` when
    absent); any other file is a Docstamp file and is returned whole.
    """
    if path.name != PYPROJECT_TOML_NAME:
        return data
    tool: Any = data.get("tool", {})
    section: Any = tool.get(PYPROJECT_TOOL_SECTION) if is_toml_table(tool) else None
    if not is_toml_table(section):
        logger.debug("[tool.%s] section missing in %s", PYPROJECT_TOOL_SECTION, path)
        return None
    return section


def get_string_value_or_none(table: TomlTable, key: str) -> str | None:
    """Extract an optional string value from a TOML table.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.

    Returns:
        str | None: The string value, or ``None`` when absent or not a string.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, str):
        return value
    logger.warning("Expected a string for key '%s', got %r; ignoring it", key, value)
    return None


def get_bool_value_or_none(table: TomlTable, key: str) -> bool | None:
    """Extract an optional boolean value from a TOML table.

    Integers are coerced with ``bool(value)``.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.

    Returns:
        bool | None: The boolean value, or ``None`` when absent or not coercible.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return bool(value)
    logger.warning("Expected a boolean for key '%s', got %r; ignoring it", key, value)
    return None


def get_string_list_value(table: TomlTable, key: str) -> list[str]:
    """Extract a list of strings from a TOML table.

    Non-string items are dropped with a warning; a missing key or a value that
    is not a list yields ``[]``.
    """
    value: Any | None = table.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        logger.warning("Expected a list for key '%s', got %r; ignoring it", key, value)
        return []
    items: list[str] = []
    for item in cast("list[Any]", value):
        if isinstance(item, str):
            items.append(item)
        else:
            logger.warning("Ignoring non-string item %r in '%s'", item, key)
    return items
