# docstamp:header:start
#
#   project      : Docstamp
#   file         : base.py
#   file_relpath : src/docstamp/filetypes/base.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# docstamp:header:end

"""Value types describing languages and their comment syntax.

Defines the `Language` enumeration (one member per supported source language)
and the `CommentStyle` triple used to wrap a docstring block. Both are plain,
immutable values; the lookup tables binding extensions to languages and
languages to styles live in [`docstamp.filetypes.instances`][].
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Language(Enum):
    """Source language tag, derived from a file extension.

    The member value is the human-readable display name of the language.
    """

    C = "C"
    CPP = "C++"
    CSHARP = "C#"
    CYTHON = "Cython"
    ELIXIR = "Elixir"
    ERLANG = "Erlang"
    FSHARP = "FSharp"
    GO = "Go"
    HASKELL = "Haskell"
    HOLYC = "HolyC"
    JAVA = "Java"
    JAVASCRIPT = "JavaScript"
    JULIA = "Julia"
    KOTLIN = "Kotlin"
    LISP = "Lisp"
    LUA = "Lua"
    PERL = "Perl"
    PHP = "PHP"
    POWERSHELL = "PowerShell"
    PROLOG = "Prolog"
    PYTHON = "Python"
    QSHARP = "QSharp"
    R = "R"
    RUBY = "Ruby"
    RUST = "Rust"
    SCALA = "Scala"
    SWIFT = "Swift"
    TYPESCRIPT = "TypeScript"
    VIM = "Vim"
    ZIG = "Zig"

    def __str__(self) -> str:
        """Return the display name of the language."""
        return self.value


@dataclass(frozen=True)
class CommentStyle:
    """Comment delimiters used to wrap a docstring block.

    Attributes:
        start (str): Marker written on the line that opens the block
            (e.g. ``"/*"``).
        line_prefix (str): Prefix written before every inner line
            (e.g. ``"* "``); may be empty.
        end (str): Marker written on the line that closes the block
            (e.g. ``"*/"``).

    Notes:
        Several languages use the same marker to open and close a block
        (``\"\"\"`` for Python, ``;;;;`` for Lisp), so ``start == end`` is valid.
        Both markers must be non-empty.
    """

    start: str
    line_prefix: str
    end: str

    def __post_init__(self) -> None:
        if not self.start or not self.end:
            raise ValueError(f"Comment style needs non-empty start and end markers: {self!r}")
