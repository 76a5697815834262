# topmark:header:start
#
#   project      : FileFinch
#   file         : archive.py
#   file_relpath : src/filefinch/filetypes/detectors/archive.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Detectors for ZIP-based containers (XLSX, zipped Shapefiles).

A ZIP archive alone identifies nothing; the member names do. Names are
collected from two places so that both small and large archives are covered:

- local file headers (``PK\\x03\\x04``) visible in the head window;
- central directory headers (``PK\\x01\\x02``) visible in the tail window,
  since the central directory sits at the end of the archive.

Only the headers are decoded; member data is never decompressed.
"""

from __future__ import annotations

import struct
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from collections.abc import Iterator

    from filefinch.filetypes.base import ByteWindow

ZIP_LOCAL_MAGIC: Final[bytes] = b"PK\x03\x04"
ZIP_CENTRAL_MAGIC: Final[bytes] = b"PK\x01\x02"

# (signature, offset of the u16 name length, offset of the name) per header kind
_LOCAL_LAYOUT: Final[tuple[bytes, int, int]] = (ZIP_LOCAL_MAGIC, 26, 30)
_CENTRAL_LAYOUT: Final[tuple[bytes, int, int]] = (ZIP_CENTRAL_MAGIC, 28, 46)

EXCEL_ENTRY_PREFIX: Final[str] = "xl/"
SHAPEFILE_ENTRY_SUFFIX: Final[str] = ".shp"


def _iter_names(buf: bytes, layout: tuple[bytes, int, int]) -> Iterator[str]:
    signature, len_offset, name_offset = layout
    pos: int = buf.find(signature)
    while pos != -1:
        if pos + name_offset <= len(buf):
            (name_len,) = struct.unpack_from("<H", buf, pos + len_offset)
            start: int = pos + name_offset
            raw: bytes = buf[start : start + name_len]
            # Truncated names at the window edge are skipped
            if len(raw) == name_len and name_len > 0:
                yield raw.decode("utf-8", errors="replace")
        pos = buf.find(signature, pos + len(signature))


def zip_entry_names(window: ByteWindow) -> list[str]:
    """Return the archive member names visible in ``window``.

    Args:
        window (ByteWindow): Window over a ZIP archive.

    Returns:
        list[str]: Member names in the order found (duplicates removed).
    """
    names: dict[str, None] = {}
    for name in _iter_names(window.head, _LOCAL_LAYOUT):
        names.setdefault(name, None)
    for name in _iter_names(window.tail, _CENTRAL_LAYOUT):
        names.setdefault(name, None)
    return list(names)


def is_zip(window: ByteWindow) -> bool:
    """ZIP local file header at offset 0."""
    return window.startswith(ZIP_LOCAL_MAGIC)


def _has_excel_entry(names: list[str]) -> bool:
    return any(n.startswith(EXCEL_ENTRY_PREFIX) for n in names)


def is_xlsx(window: ByteWindow) -> bool:
    """XLSX: a ZIP archive holding ``xl/`` workbook parts."""
    return is_zip(window) and _has_excel_entry(zip_entry_names(window))


def is_zipped_shapefile(window: ByteWindow) -> bool:
    """A ZIP archive bundling a ``.shp`` member (and no workbook parts)."""
    if not is_zip(window):
        return False
    names: list[str] = zip_entry_names(window)
    if _has_excel_entry(names):
        return False
    return any(n.lower().endswith(SHAPEFILE_ENTRY_SUFFIX) for n in names)
