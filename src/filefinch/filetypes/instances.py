# topmark:header:start
#
#   project      : FileFinch
#   file         : instances.py
#   file_relpath : src/filefinch/filetypes/instances.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The FileFinch format registry.

Holds the canonical, **ordered** sequence of `DetectionRule` objects. Order is
priority: the engine returns the first rule that matches, so narrow fixed
signatures come first and permissive text heuristics (GeoJSON, then CSV) come
last. A container's magic bytes would otherwise risk being claimed by a loose
text rule.

Notes:
    * The registry is a tuple built once at import time and never mutated; it
      is safe to share between threads.
    * There is deliberately no "generic ZIP" or "generic SQLite" rule. Such files
      resolve to `FileType.UNKNOWN`.
"""

from __future__ import annotations

from functools import lru_cache
from typing import TYPE_CHECKING, Final

from filefinch.config.logging import FinchLogger, get_logger
from filefinch.filetypes.base import DetectionRule
from filefinch.filetypes.detectors import archive, magic, text
from filefinch.filetypes.types import FileType

if TYPE_CHECKING:
    from collections.abc import Iterable

logger: FinchLogger = get_logger(__name__)

_RULES: Final[tuple[DetectionRule, ...]] = (
    DetectionRule(
        name="png",
        file_type=FileType.PNG,
        description="PNG signature 89 50 4E 47 0D 0A 1A 0A",
        matcher=magic.is_png,
        head_bytes=len(magic.PNG_MAGIC),
        min_size=len(magic.PNG_MAGIC),
    ),
    DetectionRule(
        name="arrow-file",
        file_type=FileType.ARROW,
        description="Arrow IPC file: ARROW1 at start and end",
        matcher=magic.is_arrow_file,
        head_bytes=len(magic.ARROW_MAGIC),
        tail_bytes=len(magic.ARROW_MAGIC),
        min_size=magic.ARROW_FILE_MIN_SIZE,
    ),
    DetectionRule(
        name="arrow-stream",
        file_type=FileType.ARROW,
        description="Arrow IPC stream: continuation marker and metadata length",
        matcher=magic.is_arrow_stream,
        head_bytes=8,
        min_size=8,
    ),
    DetectionRule(
        name="parquet",
        file_type=FileType.PARQUET,
        description="Parquet footer magic PAR1",
        matcher=magic.is_parquet,
        tail_bytes=len(magic.PARQUET_MAGIC),
        min_size=len(magic.PARQUET_MAGIC),
    ),
    DetectionRule(
        name="geopackage",
        file_type=FileType.GEOPACKAGE,
        description="SQLite header with GeoPackage application id",
        matcher=magic.is_geopackage,
        head_bytes=magic.SQLITE_APPLICATION_ID_OFFSET + 4,
        min_size=magic.SQLITE_APPLICATION_ID_OFFSET + 4,
    ),
    DetectionRule(
        name="xls",
        file_type=FileType.EXCEL,
        description="OLE2 compound file signature (legacy XLS)",
        matcher=magic.is_ole2_workbook,
        head_bytes=len(magic.OLE2_MAGIC),
        min_size=len(magic.OLE2_MAGIC),
    ),
    DetectionRule(
        name="xlsx",
        file_type=FileType.EXCEL,
        description="ZIP archive with xl/ workbook parts",
        matcher=archive.is_xlsx,
        head_bytes=1024,
        tail_bytes=1024,
        min_size=len(archive.ZIP_LOCAL_MAGIC),
    ),
    DetectionRule(
        name="shapefile",
        file_type=FileType.SHAPEFILE,
        description="Shapefile file code 9994 (big-endian)",
        matcher=magic.is_shapefile,
        head_bytes=4,
        min_size=4,
    ),
    DetectionRule(
        name="shapefile-zip",
        file_type=FileType.SHAPEFILE,
        description="ZIP archive with a .shp member",
        matcher=archive.is_zipped_shapefile,
        head_bytes=1024,
        tail_bytes=1024,
        min_size=len(archive.ZIP_LOCAL_MAGIC),
    ),
    DetectionRule(
        name="geojson",
        file_type=FileType.GEOJSON,
        description="JSON document with a GeoJSON type member",
        matcher=text.is_geojson,
        head_bytes=1024,
        min_size=16,
    ),
    DetectionRule(
        name="csv",
        file_type=FileType.CSV,
        description="Text with a consistent comma-separated field count",
        matcher=text.is_csv,
        head_bytes=1024,
        min_size=3,
    ),
)


def _validate(rules: Iterable[DetectionRule]) -> tuple[DetectionRule, ...]:
    """Reject duplicate rule names and rules producing `FileType.UNKNOWN`."""
    seen: set[str] = set()
    acc: list[DetectionRule] = []
    for rule in rules:
        if rule.name in seen:
            raise ValueError(f"Duplicate detection rule name: {rule.name}")
        if rule.file_type is FileType.UNKNOWN:
            raise ValueError(f"Rule {rule.name} must not produce {FileType.UNKNOWN.value!r}")
        seen.add(rule.name)
        acc.append(rule)
    return tuple(acc)


@lru_cache(maxsize=1)
def get_detection_rules() -> tuple[DetectionRule, ...]:
    """Return the ordered detection rules (highest priority first)."""
    rules: tuple[DetectionRule, ...] = _validate(_RULES)
    logger.debug("Loaded %d detection rules", len(rules))
    return rules


def get_rule(name: str) -> DetectionRule:
    """Return the rule called ``name``.

    Raises:
        KeyError: If no rule has that name.
    """
    for rule in get_detection_rules():
        if rule.name == name:
            return rule
    raise KeyError(name)


def required_head_bytes(rules: Iterable[DetectionRule]) -> int:
    """Largest prefix any of ``rules`` needs."""
    return max((r.head_bytes for r in rules), default=0)


def required_tail_bytes(rules: Iterable[DetectionRule]) -> int:
    """Largest footer any of ``rules`` needs."""
    return max((r.tail_bytes for r in rules), default=0)
