# docstamp:header:start
#
#   project      : Docstamp
#   file         : instances.py
#   file_relpath : src/docstamp/filetypes/instances.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# docstamp:header:end

"""Built-in extension and comment-style tables.

Two static tables drive comment syntax selection:

* ``extension -> Language`` (many-to-one, case-sensitive, no leading dot), and
* ``Language -> CommentStyle`` (total over `Language`).

Both registries are constructed lazily on first access and cached thereafter.

Notes:
    * The returned mappings are read-only ``MappingProxyType`` views.
    * Building the tables validates them: duplicate extensions and languages
      without a comment style are programming errors and raise immediately.
"""

from __future__ import annotations

from functools import lru_cache
from types import MappingProxyType
from typing import TYPE_CHECKING, Final

from docstamp.config.logging import DocstampLogger, get_logger

from .base import CommentStyle, Language

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

logger: DocstampLogger = get_logger(__name__)

_C_BLOCK: Final[tuple[str, str, str]] = ("/*", "* ", "*/")
_TRIPLE_QUOTE: Final[tuple[str, str, str]] = ('"""', "", '"""')

BUILTIN_EXTENSIONS: Final[tuple[tuple[Language, tuple[str, ...]], ...]] = (
    (Language.C, ("c",)),
    (Language.CPP, ("cc", "cpp", "cxx")),
    (Language.CSHARP, ("cs",)),
    (Language.CYTHON, ("pyx",)),
    (Language.ELIXIR, ("ex", "exs")),
    (Language.ERLANG, ("erl", "hrl")),
    (Language.FSHARP, ("fs", "fsi", "fsx", "fsscript")),
    (Language.GO, ("go",)),
    (Language.HASKELL, ("hs", "lhs")),
    # RIP Terry A. Davis
    (Language.HOLYC, ("HC",)),
    (Language.JAVA, ("java",)),
    (Language.JAVASCRIPT, ("js",)),
    (Language.JULIA, ("jl",)),
    (Language.KOTLIN, ("kt", "kts")),
    (Language.LISP, ("lisp", "lsp", "l", "cl", "fasl")),
    (Language.LUA, ("lua",)),
    (Language.PERL, ("plx", "pm", "xs", "t", "pod", "cgi")),
    (Language.PHP, ("php", "phar", "phtml", "pht", "phps")),
    (Language.POWERSHELL, ("ps1", "psc1", "pssc")),
    (Language.PROLOG, ("pl", "pro", "P")),
    (Language.PYTHON, ("py", "pyi", "pyc", "pyd", "pyw", "pyz")),
    (Language.QSHARP, ("qs",)),
    (Language.R, ("r", "rdata", "rds")),
    (Language.RUBY, ("rb",)),
    (Language.RUST, ("rs",)),
    (Language.SCALA, ("scala", "sc")),
    (Language.SWIFT, ("swift", "SWIFT")),
    (Language.TYPESCRIPT, ("ts", "tsx", "mts", "cts")),
    (Language.VIM, ("vim",)),
    (Language.ZIG, ("zig", "zir")),
)

BUILTIN_STYLES: Final[tuple[tuple[Language, tuple[str, str, str]], ...]] = (
    (Language.C, _C_BLOCK),
    (Language.CPP, _C_BLOCK),
    (Language.CSHARP, _C_BLOCK),
    (Language.CYTHON, _TRIPLE_QUOTE),
    (Language.ELIXIR, ("# ", "# ", "# ")),
    (Language.ERLANG, ("%", "% ", "%")),
    (Language.FSHARP, ("(*", "* ", "*)")),
    (Language.GO, _C_BLOCK),
    (Language.HASKELL, ("{-", "- ", "-}")),
    (Language.HOLYC, _C_BLOCK),
    (Language.JAVA, _C_BLOCK),
    (Language.JAVASCRIPT, _C_BLOCK),
    (Language.JULIA, ("#=", "= ", "=#")),
    (Language.KOTLIN, _C_BLOCK),
    (Language.LISP, (";;;;", ";;;; ", ";;;;")),
    (Language.LUA, ("--[[", "-- ", "--]]")),
    (Language.PERL, ("=", "", "=cut")),
    (Language.PHP, _C_BLOCK),
    (Language.POWERSHELL, ("<#", "# ", "#>")),
    (Language.PROLOG, _C_BLOCK),
    (Language.PYTHON, _TRIPLE_QUOTE),
    (Language.QSHARP, ("///", "///", "///")),
    (Language.R, ("#", "# ", "#")),
    (Language.RUBY, ("=begin", "", "=end")),
    (Language.RUST, _C_BLOCK),
    (Language.SCALA, _C_BLOCK),
    (Language.SWIFT, _C_BLOCK),
    (Language.TYPESCRIPT, _C_BLOCK),
    (Language.VIM, ("'\"'", "'\"'", "'\"'")),
    (Language.ZIG, _C_BLOCK),
)


def _generate_extension_registry(
    entries: Iterable[tuple[Language, tuple[str, ...]]],
) -> dict[str, Language]:
    """Generate a mapping of extensions (without dot) to languages."""
    registry: dict[str, Language] = {}
    for language, extensions in entries:
        for ext in extensions:
            if ext in registry:
                raise ValueError(
                    f"Duplicate extension '{ext}' for {language} (already {registry[ext]})"
                )
            registry[ext] = language
    return registry


def _generate_style_registry(
    entries: Iterable[tuple[Language, tuple[str, str, str]]],
) -> dict[Language, CommentStyle]:
    """Generate a mapping of languages to comment styles, checking totality."""
    registry: dict[Language, CommentStyle] = {}
    for language, (start, prefix, end) in entries:
        if language in registry:
            raise ValueError(f"Duplicate comment style for {language}")
        registry[language] = CommentStyle(start=start, line_prefix=prefix, end=end)

    missing: list[Language] = [lang for lang in Language if lang not in registry]
    if missing:
        raise RuntimeError(
            "Languages without a comment style: " + ", ".join(lang.name for lang in missing)
        )
    return registry


@lru_cache(maxsize=1)
def get_extension_registry() -> Mapping[str, Language]:
    """Return (and cache) the read-only ``extension -> Language`` table."""
    registry: dict[str, Language] = _generate_extension_registry(BUILTIN_EXTENSIONS)
    logger.debug("Loaded %d file extensions", len(registry))
    return MappingProxyType(registry)


@lru_cache(maxsize=1)
def get_style_registry() -> Mapping[Language, CommentStyle]:
    """Return (and cache) the read-only ``Language -> CommentStyle`` table."""
    registry: dict[Language, CommentStyle] = _generate_style_registry(BUILTIN_STYLES)
    logger.debug("Loaded %d comment styles", len(registry))
    return MappingProxyType(registry)
