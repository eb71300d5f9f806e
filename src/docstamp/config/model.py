# docstamp:header:start
#
#   project      : Docstamp
#   file         : model.py
#   file_relpath : src/docstamp/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# docstamp:header:end

"""Configuration model and merge policy.

This module defines:
    - `Config`: an immutable, runtime snapshot used by the commands.
    - `MutableConfig`: a mutable builder used during discovery/merge; it
      can be frozen into `Config`.

Merge order (lowest → highest precedence):
    1) Built-in defaults
    2) Project configs discovered upward **root → current**; within a directory
       `pyproject.toml` is merged first, then `docstamp.toml`
    3) Extra config files passed explicitly via ``--config`` (in the order provided)
    4) CLI overrides

Path semantics:
    - ``license`` declared in a config file is resolved against that file's
      directory.
    - ``--license`` given on the command line is used as given (relative to
      the invocation CWD).
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from docstamp.config.io import (
    extract_docstamp_table,
    get_bool_value_or_none,
    get_string_list_value,
    get_string_value_or_none,
    load_toml_dict,
)
from docstamp.config.logging import get_logger
from docstamp.constants import DEFAULT_LICENSE_PATH, DOCSTAMP_TOML_NAME, PYPROJECT_TOML_NAME

if TYPE_CHECKING:
    from collections.abc import Iterable

    from docstamp.config.io import TomlTable
    from docstamp.config.logging import DocstampLogger

# ArgsLike: generic mapping accepted by config loaders (works for CLI namespaces and API dicts).
ArgsLike = Mapping[str, Any]

logger: DocstampLogger = get_logger(__name__)

# TOML keys
KEY_LICENSE = "license"
KEY_EXCLUDE = "exclude"
KEY_KEEP_GOING = "keep_going"
KEY_ROOT = "root"

CLI_OVERRIDE_STR = "<CLI overrides>"


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration for Docstamp.

    Attributes:
        license_path (Path): License file whose text becomes the block body.
        exclude_patterns (tuple[str, ...]): Gitignore-style patterns skipped in
            update mode.
        keep_going (bool): Continue a batch run after a per-file error.
        config_files (tuple[Path | str, ...]): Provenance of the merged values.
    """

    license_path: Path
    exclude_patterns: tuple[str, ...]
    keep_going: bool
    config_files: tuple[Path | str, ...]


# -------------------------- Mutable builder --------------------------
@dataclass
class MutableConfig:
    """Mutable configuration used during discovery and merging.

    ``None`` means "not set by this layer"; such fields do not override
    lower layers when merged.
    """

    license_path: Path | None = None
    exclude_patterns: list[str] = field(default_factory=lambda: [])
    keep_going: bool | None = None
    root: bool | None = None
    config_files: list[Path | str] = field(default_factory=lambda: [])

    def freeze(self) -> Config:
        """Freeze this mutable builder into an immutable Config."""
        return Config(
            license_path=self.license_path or Path(DEFAULT_LICENSE_PATH),
            exclude_patterns=tuple(self.exclude_patterns),
            keep_going=bool(self.keep_going),
            config_files=tuple(self.config_files),
        )

    # --------------------------- Loaders/parsers --------------------------
    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return the built-in defaults."""
        return cls(license_path=Path(DEFAULT_LICENSE_PATH), keep_going=False)

    @classmethod
    def from_toml_dict(cls, data: TomlTable, *, config_file: Path | None = None) -> MutableConfig:
        """Build a draft from a Docstamp settings table.

        Args:
            data (TomlTable): The ``[tool.docstamp]`` table or a whole ``docstamp.toml``.
            config_file (Path | None): File the table was read from; relative
                paths are resolved against its directory.

        Returns:
            MutableConfig: The parsed draft.
        """
        draft = cls()
        license_raw: str | None = get_string_value_or_none(data, KEY_LICENSE)
        if license_raw is not None:
            license_path = Path(license_raw)
            if config_file is not None and not license_path.is_absolute():
                license_path = config_file.parent / license_path
            draft.license_path = license_path
        draft.exclude_patterns = get_string_list_value(data, KEY_EXCLUDE)
        draft.keep_going = get_bool_value_or_none(data, KEY_KEEP_GOING)
        draft.root = get_bool_value_or_none(data, KEY_ROOT)

        known: set[str] = {KEY_LICENSE, KEY_EXCLUDE, KEY_KEEP_GOING, KEY_ROOT}
        for key in data:
            if key not in known:
                logger.warning("Unknown config key '%s' in %s", key, config_file or "<dict>")
        return draft

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig | None:
        """Load configuration from a single TOML file.

        Supports both ``docstamp.toml`` and ``pyproject.toml`` files, extracting
        the ``[tool.docstamp]`` section from the latter.

        Args:
            path (Path): Path to the TOML file.

        Returns:
            MutableConfig | None: The parsed draft; ``None`` for a ``pyproject.toml``
                without a ``[tool.docstamp]`` section.

        Raises:
            ConfigError: If the file cannot be read or parsed.
        """
        logger.debug("Creating MutableConfig from TOML config: %s", path)
        table: TomlTable | None = extract_docstamp_table(load_toml_dict(path), path)
        if table is None:
            return None
        draft: MutableConfig = cls.from_toml_dict(table, config_file=path)
        draft.config_files = [path]
        return draft

    @classmethod
    def discover_local_config_files(cls, start: Path) -> list[Path]:
        """Return config files discovered by walking upward from ``start``.

        In each directory both ``pyproject.toml`` (with ``[tool.docstamp]``) and
        ``docstamp.toml`` are considered, in that order. A file that sets
        ``root = true`` stops the walk after its directory.

        Args:
            start (Path): The directory (or file) where discovery starts.

        Returns:
            list[Path]: Discovered config files, root-most first and nearest last.

        Raises:
            ConfigError: If a discovered file is not valid TOML.
        """
        per_dir: list[list[Path]] = []
        cur: Path = start.resolve()
        if cur.is_file():
            cur = cur.parent

        while True:
            root_stop_here = False
            dir_entries: list[Path] = []
            for name in (PYPROJECT_TOML_NAME, DOCSTAMP_TOML_NAME):
                p: Path = cur / name
                if not p.is_file():
                    continue
                table: TomlTable | None = extract_docstamp_table(load_toml_dict(p), p)
                if table is None:
                    continue
                dir_entries.append(p)
                logger.debug("Discovered config file: %s", p)
                if get_bool_value_or_none(table, KEY_ROOT):
                    root_stop_here = True

            if dir_entries:
                per_dir.append(dir_entries)

            parent: Path = cur.parent
            if parent == cur:
                break
            if root_stop_here:
                logger.debug("Stopping upward config discovery at %s due to root=true", cur)
                break
            cur = parent

        ordered: list[Path] = []
        for dir_list in reversed(per_dir):
            ordered.extend(dir_list)
        return ordered

    @classmethod
    def load_merged(
        cls,
        *,
        anchor: Path | None = None,
        extra_config_files: Iterable[Path] | None = None,
        no_config: bool = False,
    ) -> MutableConfig:
        """Discover and merge configuration layers into a draft `MutableConfig`.

        Args:
            anchor (Path | None): Directory where upward discovery starts (CWD if None).
            extra_config_files (Iterable[Path] | None): Explicit config files merged
                **after** discovery, in their given order.
            no_config (bool): If True, skip discovery (explicit files still apply).

        Returns:
            MutableConfig: The merged draft.

        Raises:
            ConfigError: If any config file is malformed.
        """
        draft: MutableConfig = cls.from_defaults()

        if not no_config:
            for cfg_path in cls.discover_local_config_files(anchor or Path.cwd()):
                mc: MutableConfig | None = cls.from_toml_file(cfg_path)
                if mc is not None:
                    draft = draft.merge_with(mc)

        for extra in extra_config_files or ():
            mc = cls.from_toml_file(Path(extra))
            if mc is not None:
                draft = draft.merge_with(mc)

        return draft

    # ------------------------------- Merging -------------------------------
    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new draft where values set in ``other`` override this draft.

        Args:
            other (MutableConfig): The config whose values override those of this draft.

        Returns:
            MutableConfig: A new mutable configuration representing the merged result.
        """
        return MutableConfig(
            license_path=other.license_path
            if other.license_path is not None
            else self.license_path,
            exclude_patterns=other.exclude_patterns or self.exclude_patterns,
            keep_going=other.keep_going if other.keep_going is not None else self.keep_going,
            root=other.root if other.root is not None else self.root,
            config_files=self.config_files + other.config_files,
        )

    def apply_cli_args(self, args: ArgsLike) -> MutableConfig:
        """Update fields from an arguments mapping (CLI or API).

        Only keys present with a non-``None`` value override the draft.
        Exclude patterns given on the command line extend those from config.

        Args:
            args (ArgsLike): Parsed arguments mapping.

        Returns:
            MutableConfig: This draft, updated in place.
        """
        logger.debug("Applying CLI arguments to MutableConfig: %s", args)
        self.config_files.append(CLI_OVERRIDE_STR)

        if args.get("license") is not None:
            self.license_path = Path(args["license"])
        if args.get("keep_going"):
            self.keep_going = True
        if args.get("exclude"):
            self.exclude_patterns = [*self.exclude_patterns, *args["exclude"]]
        return self
