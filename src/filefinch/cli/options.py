# topmark:header:start
#
#   project      : FileFinch
#   file         : options.py
#   file_relpath : src/filefinch/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI options and their resolution logic.

Centralizes the reusable ``--verbose``/``--quiet`` and ``--format`` options so
commands stay thin.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, ParamSpec, TypeVar

import click

from filefinch.cli.errors import FileFinchUsageError
from filefinch.config.logging import TRACE_LEVEL

P = ParamSpec("P")
R = TypeVar("R")


class OutputFormat(str, Enum):
    """Output format for CLI rendering.

    Members:
      TEXT: Human-friendly text output.
      JSON: A single JSON array of per-item objects.
      NDJSON: One JSON object per line.
    """

    TEXT = "text"
    JSON = "json"
    NDJSON = "ndjson"


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the logging level from ``-v``/``-q`` counts.

    Three or more ``-v`` select TRACE, two DEBUG, one INFO; any ``-q`` selects
    ERROR. The default is WARNING.

    Args:
        verbose_count (int): Number of ``-v`` flags.
        quiet_count (int): Number of ``-q`` flags.

    Returns:
        int: The logging level.

    Raises:
        FileFinchUsageError: If both flags are used.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise FileFinchUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    if verbose_count >= 3:
        return TRACE_LEVEL
    if verbose_count == 2:
        return logging.DEBUG
    if verbose_count == 1:
        return logging.INFO
    if quiet_count > 0:
        return logging.ERROR
    return logging.WARNING


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add counting ``-v/--verbose`` and ``-q/--quiet`` options to a command."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify up to three times for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Only log errors.",
    )(f)
    return f


def output_format_option(f: Callable[P, R]) -> Callable[P, R]:
    """Add a ``--format`` option parsed into `OutputFormat`."""
    return click.option(
        "--format",
        "output_format",
        type=click.Choice([v.value for v in OutputFormat]),
        default=OutputFormat.TEXT.value,
        show_default=True,
        callback=lambda _ctx, _param, value: OutputFormat(value),
        help="Output format.",
    )(f)
