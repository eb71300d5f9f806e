# docstamp:header:start
#
#   project      : Docstamp
#   file         : __init__.py
#   file_relpath : src/docstamp/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# docstamp:header:end

"""Docstamp package.

Docstamp keeps a license-derived comment block ("docstring block") at the top
of source files. It picks the comment syntax from the file extension, inserts
or refreshes the block with its created/updated dates, and can re-stamp a whole
directory tree in one run.
"""

from __future__ import annotations
