# topmark:header:start
#
#   project      : FileFinch
#   file         : types.py
#   file_relpath : src/filefinch/filetypes/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The `FileType` verdict returned by every detection call.

`FileType` is a closed enumeration: its members are singletons, so callers can
only *compare* against a verdict, never manufacture one. The member values are
stable identifiers and part of the public contract (they appear in CLI JSON
output); renaming or removing a member is a breaking change.

Adding a format is a one-place change: add the member (plus its label) here and
a rule in `filefinch.filetypes.instances`.
"""

from __future__ import annotations

from enum import Enum
from typing import Final


class FileType(str, Enum):
    """Detected file format.

    Attributes:
        GEOPACKAGE: OGC GeoPackage (SQLite container with a GeoPackage application id).
        SHAPEFILE: ESRI Shapefile (``.shp`` main file, or a ZIP bundling one).
        GEOJSON: GeoJSON text.
        EXCEL: Excel workbook (legacy XLS compound file, or XLSX).
        CSV: Comma-separated values text.
        PARQUET: Apache Parquet.
        ARROW: Apache Arrow IPC (file or stream format).
        PNG: PNG image.
        UNKNOWN: No rule matched. A normal verdict, not an error.
    """

    GEOPACKAGE = "geopackage"
    SHAPEFILE = "shapefile"
    GEOJSON = "geojson"
    EXCEL = "excel"
    CSV = "csv"
    PARQUET = "parquet"
    ARROW = "arrow"
    PNG = "png"
    UNKNOWN = "unknown"

    @property
    def label(self) -> str:
        """Human-readable display name (e.g. ``"GeoJSON"``)."""
        return _LABELS[self]

    @property
    def is_known(self) -> bool:
        """False only for `FileType.UNKNOWN`."""
        return self is not FileType.UNKNOWN

    def __str__(self) -> str:
        return self.label


_LABELS: Final[dict[FileType, str]] = {
    FileType.GEOPACKAGE: "GeoPackage",
    FileType.SHAPEFILE: "Shapefile",
    FileType.GEOJSON: "GeoJSON",
    FileType.EXCEL: "Excel",
    FileType.CSV: "CSV",
    FileType.PARQUET: "Parquet",
    FileType.ARROW: "Arrow",
    FileType.PNG: "PNG",
    FileType.UNKNOWN: "Unknown",
}
