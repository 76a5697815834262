# topmark:header:start
#
#   project      : FileFinch
#   file         : test_types.py
#   file_relpath : tests/filetypes/test_types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the `FileType` enumeration."""

from __future__ import annotations

import pytest

from filefinch.filetypes.types import FileType


def test_members_are_the_closed_set() -> None:
    """The enumeration holds exactly the supported formats plus UNKNOWN."""
    assert [ft.value for ft in FileType] == [
        "geopackage",
        "shapefile",
        "geojson",
        "excel",
        "csv",
        "parquet",
        "arrow",
        "png",
        "unknown",
    ]


@pytest.mark.parametrize(
    "file_type,label",
    [
        (FileType.GEOPACKAGE, "GeoPackage"),
        (FileType.GEOJSON, "GeoJSON"),
        (FileType.CSV, "CSV"),
        (FileType.PNG, "PNG"),
        (FileType.UNKNOWN, "Unknown"),
    ],
)
def test_label_and_str(file_type: FileType, label: str) -> None:
    """`str()` renders the display label."""
    assert file_type.label == label
    assert str(file_type) == label


def test_is_known() -> None:
    """Only UNKNOWN reports itself as not known."""
    assert not FileType.UNKNOWN.is_known
    assert all(ft.is_known for ft in FileType if ft is not FileType.UNKNOWN)


def test_lookup_by_value() -> None:
    """Stable identifiers round through the value constructor."""
    assert FileType("parquet") is FileType.PARQUET
    with pytest.raises(ValueError):
        FileType("zip")
