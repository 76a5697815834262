# topmark:header:start
#
#   file         : exit_codes.py
#   file_relpath : src/filefinch/cli/exit_codes.py
#   project      : FileFinch
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the FileFinch CLI.

FileFinch aligns with the BSD `sysexits` convention where practical. The one
project-specific value is `UNKNOWN_FORMAT=2`, returned by ``detect --strict``
when at least one input was not recognized. Click reports its own usage errors
(bad option, missing argument) with 2 as well.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the FileFinch CLI.

    Attributes:
        SUCCESS: All inputs were read (and, with ``--strict``, recognized).
        FAILURE: Generic failure.
        UNKNOWN_FORMAT: ``--strict`` and at least one input detected as Unknown.
        USAGE_ERROR: Invalid invocation. Mirrors BSD ``EX_USAGE (64)``.
        IO_ERROR: At least one input could not be read. Mirrors BSD ``EX_IOERR (74)``.
        CONFIG_ERROR: Invalid or malformed configuration. Mirrors BSD ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1
    UNKNOWN_FORMAT = 2

    USAGE_ERROR = 64  # EX_USAGE
    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG
