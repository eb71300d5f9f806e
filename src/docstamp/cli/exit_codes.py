# docstamp:header:start
#
#   file         : exit_codes.py
#   file_relpath : src/docstamp/cli/exit_codes.py
#   project      : Docstamp
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# docstamp:header:end

"""Defines standardized exit codes used by the Docstamp CLI application.

Codes above 2 follow the BSD ``sysexits.h`` conventions so scripts can tell
a usage mistake from a missing file or a failed write.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the Docstamp CLI.

    Attributes:
        SUCCESS (int): The command completed without errors.
        FAILURE (int): A batch run finished with per-file failures (``--keep-going``).
        WOULD_CHANGE (int): A dry run found files that would change.
        USAGE_ERROR (int): Invalid command-line usage.
        ENCODING_ERROR (int): A file is not valid UTF-8.
        FILE_NOT_FOUND (int): A file, directory, extension or stamp was not found.
        IO_ERROR (int): A filesystem read or write failed.
        CONFIG_ERROR (int): A configuration file is malformed.
        UNEXPECTED_ERROR (int): An unhandled error occurred.

    Usage:
        ```python
        import subprocess
        from docstamp.cli.exit_codes import ExitCode

        result = subprocess.run(["docstamp", "stamp", "-d", "src", "-u", "-f", "py", "--dry-run"])
        if result.returncode == ExitCode.WOULD_CHANGE:
            print("Some headers are out of date.")
        ```
    """

    SUCCESS = 0
    FAILURE = 1
    WOULD_CHANGE = 2
    USAGE_ERROR = 64
    ENCODING_ERROR = 65
    FILE_NOT_FOUND = 66
    IO_ERROR = 74
    CONFIG_ERROR = 78
    UNEXPECTED_ERROR = 255
