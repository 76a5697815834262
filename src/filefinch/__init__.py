# topmark:header:start
#
#   project      : FileFinch
#   file         : __init__.py
#   file_relpath : src/filefinch/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FileFinch package.

FileFinch identifies the format of a file from its content (magic bytes,
structural markers, container signatures) rather than its extension.

Example:
    ```python
    import filefinch

    filefinch.detect(b"\\x89PNG\\r\\n\\x1a\\n")  # FileType.PNG
    filefinch.detect("data/roads.gpkg")  # FileType.GEOPACKAGE
    filefinch.detect(b"")  # FileType.UNKNOWN
    ```
"""

from __future__ import annotations

from filefinch.config.settings import SnifferConfig
from filefinch.errors import ConfigError, FileFinchError, SourceReadError
from filefinch.filetypes.base import ByteWindow
from filefinch.filetypes.types import FileType
from filefinch.sniffer.engine import Detection, detect, detect_path, sniff, sniff_path
from filefinch.sniffer.sources import ByteSource

__all__ = [
    "ByteSource",
    "ByteWindow",
    "ConfigError",
    "Detection",
    "FileFinchError",
    "FileType",
    "SnifferConfig",
    "SourceReadError",
    "detect",
    "detect_path",
    "sniff",
    "sniff_path",
]
