# topmark:header:start
#
#   project      : FileFinch
#   file         : errors.py
#   file_relpath : src/filefinch/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the FileFinch CLI.

Raise these in commands to exit with a standardized message and `ExitCode`.
"""

from __future__ import annotations

import click

from filefinch.cli.exit_codes import ExitCode


class FileFinchCliError(click.ClickException):
    """Base class for all FileFinch CLI errors."""

    exit_code = ExitCode.FAILURE


class FileFinchUsageError(FileFinchCliError):
    """Invalid command-line invocation (conflicting flags, missing inputs)."""

    exit_code = ExitCode.USAGE_ERROR


class FileFinchConfigError(FileFinchCliError):
    """Missing, invalid or malformed configuration."""

    exit_code = ExitCode.CONFIG_ERROR
