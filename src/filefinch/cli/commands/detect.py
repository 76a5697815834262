# topmark:header:start
#
#   project      : FileFinch
#   file         : detect.py
#   file_relpath : src/filefinch/cli/commands/detect.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FileFinch `detect` command.

Prints the detected format of each input. ``-`` reads standard input.

Exit status:
    * `ExitCode.IO_ERROR` if any input could not be read (the others are still
      reported);
    * `ExitCode.UNKNOWN_FORMAT` with ``--strict`` if any input was not recognized;
    * `ExitCode.SUCCESS` otherwise.
"""

from __future__ import annotations

import json
from dataclasses import replace
from pathlib import Path
from typing import Any

import click

from filefinch.cli.errors import FileFinchConfigError
from filefinch.cli.exit_codes import ExitCode
from filefinch.cli.options import OutputFormat, output_format_option
from filefinch.config.logging import get_logger
from filefinch.config.settings import SnifferConfig, resolve_config
from filefinch.errors import ConfigError, SourceReadError
from filefinch.filetypes.types import FileType
from filefinch.sniffer.engine import Detection, sniff, sniff_path

logger = get_logger(__name__)

STDIN_MARKER = "-"


def _record(name: str, detection: Detection) -> dict[str, Any]:
    return {
        "path": name,
        "file_type": detection.file_type.value,
        "label": detection.file_type.label,
        "rule": detection.rule,
        "by_extension": detection.by_extension,
    }


def _error_record(name: str, exc: SourceReadError) -> dict[str, Any]:
    return {"path": name, "error": str(exc)}


def _detect_one(name: str, config: SnifferConfig) -> Detection:
    if name == STDIN_MARKER:
        return sniff(click.get_binary_stream("stdin"), config=config)
    return sniff_path(Path(name), config=config)


@click.command(
    name="detect",
    help="Detect the format of files from their content.",
)
@click.argument("paths", nargs=-1, required=True, type=click.Path(dir_okay=False))
@output_format_option
@click.option(
    "--strict",
    is_flag=True,
    default=False,
    help=f"Exit with status {int(ExitCode.UNKNOWN_FORMAT)} if any input is Unknown.",
)
@click.option(
    "--no-fallback",
    is_flag=True,
    default=False,
    help="Never fall back to the filename extension.",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Config file (filefinch.toml or pyproject.toml). Discovered from CWD if omitted.",
)
def detect_command(
    *,
    paths: tuple[str, ...],
    output_format: OutputFormat,
    strict: bool,
    no_fallback: bool,
    config_path: Path | None,
) -> None:
    """Detect and print the format of each input.

    Args:
        paths (tuple[str, ...]): Files to inspect; ``-`` for standard input.
        output_format (OutputFormat): Rendering of the results.
        strict (bool): Fail when an input is not recognized.
        no_fallback (bool): Disable the filename-extension fallback.
        config_path (Path | None): Explicit config file.

    Raises:
        FileFinchConfigError: If the configuration is invalid.
    """
    ctx = click.get_current_context()
    try:
        config: SnifferConfig = resolve_config(config_path)
    except ConfigError as exc:
        raise FileFinchConfigError(str(exc)) from exc
    if no_fallback:
        config = replace(config, extension_fallback=False)

    records: list[dict[str, Any]] = []
    read_failed = False
    unknown_seen = False
    for name in paths:
        try:
            detection: Detection = _detect_one(name, config)
        except SourceReadError as exc:
            logger.error("%s", exc)
            read_failed = True
            records.append(_error_record(name, exc))
            continue
        unknown_seen = unknown_seen or detection.file_type is FileType.UNKNOWN
        records.append(_record(name, detection))

    if output_format is OutputFormat.JSON:
        click.echo(json.dumps(records, indent=2))
    elif output_format is OutputFormat.NDJSON:
        for rec in records:
            click.echo(json.dumps(rec))
    else:
        for rec in records:
            if "error" in rec:
                click.echo(f"{rec['path']}: error: {rec['error']}", err=True)
            else:
                suffix: str = " (by extension)" if rec["by_extension"] else ""
                click.echo(f"{rec['path']}: {rec['label']}{suffix}")

    if read_failed:
        ctx.exit(ExitCode.IO_ERROR)
    if strict and unknown_seen:
        ctx.exit(ExitCode.UNKNOWN_FORMAT)
