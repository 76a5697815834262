# topmark:header:start
#
#   project      : FileFinch
#   file         : magic.py
#   file_relpath : src/filefinch/filetypes/detectors/magic.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Fixed-signature detectors for binary formats.

Each detector checks magic bytes at a known offset in the head window and/or a
trailing signature in the tail window. They confirm format *identity* only;
nothing beyond the signature bytes is validated.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from filefinch.filetypes.base import ByteWindow

PNG_MAGIC: Final[bytes] = b"\x89PNG\r\n\x1a\n"

ARROW_MAGIC: Final[bytes] = b"ARROW1"
# Smallest Arrow IPC file: leading magic, 2 padding bytes, trailing magic
# (a real file also carries a footer and its length in between).
ARROW_FILE_MIN_SIZE: Final[int] = 12
ARROW_CONTINUATION: Final[bytes] = b"\xff\xff\xff\xff"
# Upper bound for a plausible IPC stream metadata length.
ARROW_MAX_METADATA: Final[int] = 16 * 1024 * 1024

PARQUET_MAGIC: Final[bytes] = b"PAR1"

SQLITE_MAGIC: Final[bytes] = b"SQLite format 3\x00"
# SQLite stores the application id (PRAGMA application_id) big-endian at offset 68.
SQLITE_APPLICATION_ID_OFFSET: Final[int] = 68
GEOPACKAGE_APPLICATION_IDS: Final[frozenset[bytes]] = frozenset({b"GPKG", b"GP10", b"GP11"})

# Shapefile main file: big-endian int32 file code at offset 0.
SHAPEFILE_FILE_CODE: Final[int] = 9994

OLE2_MAGIC: Final[bytes] = b"\xd0\xcf\x11\xe0\xa1\xb1\x1a\xe1"


def is_png(window: ByteWindow) -> bool:
    """PNG: fixed 8-byte signature."""
    return window.startswith(PNG_MAGIC)


def is_arrow_file(window: ByteWindow) -> bool:
    """Arrow IPC file format: ``ARROW1`` at both the start and the end of the file."""
    return (
        window.available >= ARROW_FILE_MIN_SIZE
        and window.startswith(ARROW_MAGIC)
        and window.endswith(ARROW_MAGIC)
    )


def is_arrow_stream(window: ByteWindow) -> bool:
    """Arrow IPC stream format.

    A stream opens with an encapsulated message: the continuation marker
    ``0xFFFFFFFF`` followed by a little-endian int32 metadata length.
    """
    if not window.startswith(ARROW_CONTINUATION):
        return False
    length: int | None = window.i32_le(4)
    return length is not None and 0 < length < ARROW_MAX_METADATA


def is_parquet(window: ByteWindow) -> bool:
    """Parquet: ``PAR1`` footer, regardless of what the file starts with."""
    return window.endswith(PARQUET_MAGIC)


def is_geopackage(window: ByteWindow) -> bool:
    """GeoPackage: a SQLite database whose application id identifies GeoPackage.

    A plain SQLite database has application id 0 and does not match.
    """
    if not window.startswith(SQLITE_MAGIC):
        return False
    start: int = SQLITE_APPLICATION_ID_OFFSET
    return window.head[start : start + 4] in GEOPACKAGE_APPLICATION_IDS


def is_shapefile(window: ByteWindow) -> bool:
    """Shapefile main file (``.shp``): file code 9994 at offset 0."""
    return window.u32_be(0) == SHAPEFILE_FILE_CODE


def is_ole2_workbook(window: ByteWindow) -> bool:
    """Legacy Excel (XLS): OLE2 compound binary file signature."""
    return window.startswith(OLE2_MAGIC)
