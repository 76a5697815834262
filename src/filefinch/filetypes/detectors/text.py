# topmark:header:start
#
#   project      : FileFinch
#   file         : text.py
#   file_relpath : src/filefinch/filetypes/detectors/text.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Heuristic detectors for text formats (GeoJSON, CSV).

These are the most permissive rules in the registry and are evaluated last.
They work on the head window only, which may cut a document mid-line or even
mid-character; the helpers below account for that:

- a multi-byte UTF-8 sequence split at the window edge is dropped rather than
  treated as a decoding error;
- the last line of a truncated window is ignored by the CSV heuristic, unless
  it is the only line the window holds (very wide header rows).
"""

from __future__ import annotations

import csv
import re
import unicodedata
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from filefinch.filetypes.base import ByteWindow

UTF8_BOM: Final[bytes] = b"\xef\xbb\xbf"

# Longest UTF-8 sequence minus one: how far from the end a split character can start.
_MAX_SPLIT: Final[int] = 3

GEOJSON_TYPES: Final[tuple[str, ...]] = (
    "FeatureCollection",
    "Feature",
    "Point",
    "MultiPoint",
    "LineString",
    "MultiLineString",
    "Polygon",
    "MultiPolygon",
    "GeometryCollection",
)

_GEOJSON_TYPE_RE: Final[re.Pattern[str]] = re.compile(
    r'"type"\s*:\s*"(?:' + "|".join(GEOJSON_TYPES) + r')"'
)
_GEOJSON_KEY_RE: Final[re.Pattern[str]] = re.compile(r'"(?:features|geometry|coordinates)"\s*:')
_GEOJSON_LOOSE_MARKERS: Final[tuple[str, ...]] = ('"featurecollection"', '"feature"', '"geometry"')

CSV_DELIMITER: Final[str] = ","
CSV_MAX_LINES: Final[int] = 10


def decode_text(window: ByteWindow) -> str | None:
    """Decode the head window as UTF-8 text.

    Args:
        window (ByteWindow): The window to decode.

    Returns:
        str | None: The decoded text (BOM removed), or None if the bytes are not
            text (NUL bytes or invalid UTF-8).
    """
    data: bytes = window.head
    if data.startswith(UTF8_BOM):
        data = data[len(UTF8_BOM) :]
    if b"\x00" in data:
        return None
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        split_at_edge: bool = (
            not window.is_complete
            and exc.reason == "unexpected end of data"
            and exc.start >= len(data) - _MAX_SPLIT
        )
        if not split_at_edge:
            return None
        return data[: exc.start].decode("utf-8")


def _is_printable(text: str) -> bool:
    # Only control characters disqualify; no-break spaces and the like are text
    return all(unicodedata.category(ch) != "Cc" or ch in "\t\r\n" for ch in text)


def has_geojson_markers(window: ByteWindow) -> bool:
    """Looser, case-insensitive GeoJSON check used for `.json`/`.geojson` files.

    The text must open a JSON object and mention a ``"type"`` key together with
    one of ``"featurecollection"``, ``"feature"`` or ``"geometry"`` in any case.
    """
    text: str | None = decode_text(window)
    if text is None:
        return False
    lowered: str = text.lstrip().lower()
    return (
        lowered.startswith("{")
        and '"type"' in lowered
        and any(marker in lowered for marker in _GEOJSON_LOOSE_MARKERS)
    )


def is_geojson(window: ByteWindow) -> bool:
    """GeoJSON: a JSON document carrying a GeoJSON ``"type"`` member.

    The document is not parsed (the window may truncate it). It must open with
    ``{`` or ``[`` and either name a GeoJSON type (``"type": "Feature"``, ...) or
    carry a ``"type"`` key next to one of ``features``/``geometry``/``coordinates``.
    """
    text: str | None = decode_text(window)
    if text is None or text.lstrip()[:1] not in ("{", "["):
        return False
    if _GEOJSON_TYPE_RE.search(text):
        return True
    return '"type"' in text and _GEOJSON_KEY_RE.search(text) is not None


def is_csv(window: ByteWindow) -> bool:
    """CSV: printable text whose sampled lines share the same comma-separated field count.

    JSON documents are rejected up front (a one-line JSON object contains
    commas too). Quoted fields are honored via the stdlib ``csv`` parser.
    """
    text: str | None = decode_text(window)
    if text is None or not text.strip():
        return False
    if text.lstrip()[:1] in ("{", "["):
        return False
    if not _is_printable(text):
        return False

    lines: list[str] = [line for line in text.splitlines() if line.strip()]
    truncated: bool = not window.is_complete and not text.endswith(("\n", "\r"))
    if truncated and len(lines) > 1:
        # Partial last line
        lines = lines[:-1]
    sample: list[str] = lines[:CSV_MAX_LINES]
    if not sample:
        return False

    try:
        counts: set[int] = {
            len(row) for row in csv.reader(sample, delimiter=CSV_DELIMITER, strict=True)
        }
    except csv.Error:
        return False
    return len(counts) == 1 and counts.pop() > 1
