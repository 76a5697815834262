# topmark:header:start
#
#   project      : FileFinch
#   file         : errors.py
#   file_relpath : src/filefinch/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by FileFinch.

Content that no rule recognizes is **not** an error: detection returns
`FileType.UNKNOWN`. Exceptions are reserved for sources that cannot be read
and for invalid configuration.
"""

from __future__ import annotations


class FileFinchError(Exception):
    """Base class for all FileFinch errors."""


class SourceReadError(FileFinchError):
    """The byte source could not be opened or read.

    Raised with the underlying ``OSError`` chained as ``__cause__``. No verdict is
    derived from bytes obtained before the failure.

    Attributes:
        source (str): Human-readable description of the source (path or object repr).
    """

    def __init__(self, source: str, reason: str) -> None:
        super().__init__(f"cannot read {source}: {reason}")
        self.source: str = source


class ConfigError(FileFinchError, ValueError):
    """Invalid FileFinch configuration (bad value, unknown key, malformed TOML)."""
