# topmark:header:start
#
#   project      : FileFinch
#   file         : engine.py
#   file_relpath : src/filefinch/sniffer/engine.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The FileFinch sniffer engine.

One pass per call:

1. size the head/tail windows from the registry (widened by `SnifferConfig`);
2. read those windows from the source (bounded reads only);
3. evaluate the rules in registry order and return the first match;
4. return `FileType.UNKNOWN` when nothing matches.

Ties are resolved purely by registry order; there is no scoring.

Two outcomes are kept strictly apart: unrecognized content is the normal
verdict `FileType.UNKNOWN`, while a source that cannot be read raises
`SourceReadError`. A read failure never yields a guess from partial data.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from filefinch.config.logging import FinchLogger, get_logger
from filefinch.config.settings import SnifferConfig
from filefinch.errors import SourceReadError
from filefinch.filetypes.base import ByteWindow
from filefinch.filetypes.detectors import text
from filefinch.filetypes.instances import (
    get_detection_rules,
    required_head_bytes,
    required_tail_bytes,
)
from filefinch.filetypes.types import FileType
from filefinch.sniffer.sources import describe_source, open_source, read_window

if TYPE_CHECKING:
    import os

    from filefinch.filetypes.base import DetectionRule

logger: FinchLogger = get_logger(__name__)

_DEFAULT_CONFIG = SnifferConfig()


@dataclass(frozen=True)
class Detection:
    """Outcome of `sniff`: the verdict plus the rule that produced it.

    Attributes:
        file_type (FileType): The detected format.
        rule (str | None): Name of the winning rule; None for `FileType.UNKNOWN`
            or when the verdict came from the extension fallback.
        by_extension (bool): True if `detect_path` fell back to the filename extension.
    """

    file_type: FileType
    rule: str | None = None
    by_extension: bool = False


def window_sizes(config: SnifferConfig | None = None) -> tuple[int, int]:
    """Return the ``(head, tail)`` byte counts the engine reads.

    Args:
        config (SnifferConfig | None): Settings; defaults apply when None.

    Returns:
        tuple[int, int]: Head and tail window sizes.
    """
    cfg: SnifferConfig = config or _DEFAULT_CONFIG
    rules: tuple[DetectionRule, ...] = get_detection_rules()
    return (
        max(required_head_bytes(rules), cfg.head_window),
        max(required_tail_bytes(rules), cfg.tail_window),
    )


def classify(window: ByteWindow) -> Detection:
    """Run the ordered rules against an already captured window.

    Args:
        window (ByteWindow): The bytes to classify.

    Returns:
        Detection: First matching rule's verdict, or `FileType.UNKNOWN`.
    """
    for rule in get_detection_rules():
        matched: bool = rule.matches(window)
        logger.trace("Rule %-14s -> %s", rule.name, matched)
        if matched:
            return Detection(file_type=rule.file_type, rule=rule.name)
    return Detection(file_type=FileType.UNKNOWN)


def capture(source: object, *, config: SnifferConfig | None = None) -> ByteWindow:
    """Read the detection windows from ``source``.

    Args:
        source (object): Bytes, a path, a binary file object, or a `ByteSource`.
        config (SnifferConfig | None): Window settings.

    Returns:
        ByteWindow: The snapshot.

    Raises:
        SourceReadError: If the source cannot be opened or read.
        TypeError: If ``source`` is not a supported input.
    """
    head_limit, tail_limit = window_sizes(config)
    try:
        with open_source(source) as src:
            return read_window(src, head_limit, tail_limit)
    except OSError as exc:
        name: str = describe_source(source)
        logger.debug("Cannot read %s: %s", name, exc)
        raise SourceReadError(name, exc.strerror or str(exc)) from exc


def sniff(source: object, *, config: SnifferConfig | None = None) -> Detection:
    """Detect the format of ``source`` and report the winning rule.

    Args:
        source (object): Bytes, a path, a binary file object, or a `ByteSource`.
        config (SnifferConfig | None): Window settings.

    Returns:
        Detection: The verdict and the name of the rule that produced it.

    Raises:
        SourceReadError: If the source cannot be opened or read.
        TypeError: If ``source`` is not a supported input.
    """
    window: ByteWindow = capture(source, config=config)
    result: Detection = classify(window)
    logger.debug(
        "Detected %s as %s (rule=%s, head=%d, tail=%d)",
        describe_source(source),
        result.file_type.value,
        result.rule,
        len(window.head),
        len(window.tail),
    )
    return result


def detect(source: object, *, config: SnifferConfig | None = None) -> FileType:
    """Detect the format of ``source`` from its content.

    Args:
        source (object): Bytes, a path, a binary file object, or a `ByteSource`.
        config (SnifferConfig | None): Window settings.

    Returns:
        FileType: Exactly one verdict; `FileType.UNKNOWN` if nothing matched.

    Raises:
        SourceReadError: If the source cannot be opened or read.
        TypeError: If ``source`` is not a supported input.
    """
    return sniff(source, config=config).file_type


def _fallback_by_extension(path: Path, window: ByteWindow) -> FileType:
    """Map a few extensions to a verdict when content detection is inconclusive."""
    suffix: str = path.suffix.lower()
    decoded: str | None = text.decode_text(window)
    if suffix == ".csv" and decoded and decoded.strip():
        # e.g. single-column CSV, which has no delimiter to sniff
        return FileType.CSV
    if suffix in (".json", ".geojson") and text.has_geojson_markers(window):
        return FileType.GEOJSON
    return FileType.UNKNOWN


def sniff_path(
    path: str | os.PathLike[str], *, config: SnifferConfig | None = None
) -> Detection:
    """Like `sniff` for a filesystem path, with an optional extension fallback.

    Content always wins. Only when content yields `FileType.UNKNOWN` and
    ``config.extension_fallback`` is enabled is the extension consulted:
    ``.csv`` for any text content, ``.json``/``.geojson`` for a JSON object
    carrying GeoJSON markers in any letter case.

    Args:
        path (str | os.PathLike[str]): The file to inspect.
        config (SnifferConfig | None): Settings.

    Returns:
        Detection: The verdict.

    Raises:
        SourceReadError: If the file cannot be opened or read.
    """
    cfg: SnifferConfig = config or _DEFAULT_CONFIG
    p = Path(path)
    window: ByteWindow = capture(p, config=cfg)
    result: Detection = classify(window)
    if result.file_type is FileType.UNKNOWN and cfg.extension_fallback:
        fallback: FileType = _fallback_by_extension(p, window)
        if fallback is not FileType.UNKNOWN:
            logger.debug("Extension fallback: %s -> %s", p, fallback.value)
            return Detection(file_type=fallback, by_extension=True)
    return result


def detect_path(path: str | os.PathLike[str], *, config: SnifferConfig | None = None) -> FileType:
    """Detect the format of the file at ``path`` (content first, then extension).

    Args:
        path (str | os.PathLike[str]): The file to inspect.
        config (SnifferConfig | None): Settings.

    Returns:
        FileType: The verdict.

    Raises:
        SourceReadError: If the file cannot be opened or read.
    """
    return sniff_path(path, config=config).file_type
