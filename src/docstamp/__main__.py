# docstamp:header:start
#
#   project      : Docstamp
#   file         : __main__.py
#   file_relpath : src/docstamp/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# docstamp:header:end

"""Module entry point for running Docstamp via ``python -m docstamp``.

Delegates to :func:`docstamp.cli.main.cli`, the same entry point used by the
``docstamp`` console script.

Examples:
    Stamp a new file in ``src``::

        python -m docstamp stamp -d src -f main.rs
"""

from __future__ import annotations

from docstamp.cli.main import cli

if __name__ == "__main__":
    # We call the Click group directly
    cli()
