# topmark:header:start
#
#   project      : FileFinch
#   file         : version.py
#   file_relpath : src/filefinch/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FileFinch `version` command."""

from __future__ import annotations

import click

from filefinch.constants import FILEFINCH_VERSION


@click.command(
    name="version",
    help="Show the current version of FileFinch.",
)
def version_command() -> None:
    """Print the FileFinch version installed in the active environment."""
    click.echo(FILEFINCH_VERSION)
