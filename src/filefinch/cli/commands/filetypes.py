# topmark:header:start
#
#   project      : FileFinch
#   file         : filetypes.py
#   file_relpath : src/filefinch/cli/commands/filetypes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FileFinch `filetypes` command.

Lists the detection rules in priority order (the order in which the engine
evaluates them), with the file type each rule produces.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import click

from filefinch.cli.options import OutputFormat, output_format_option
from filefinch.filetypes.instances import get_detection_rules

if TYPE_CHECKING:
    from filefinch.filetypes.base import DetectionRule


def _serialize(priority: int, rule: DetectionRule) -> dict[str, Any]:
    return {
        "priority": priority,
        "rule": rule.name,
        "file_type": rule.file_type.value,
        "description": rule.description,
        "head_bytes": rule.head_bytes,
        "tail_bytes": rule.tail_bytes,
    }


@click.command(
    name="filetypes",
    help="List detection rules in priority order.",
)
@output_format_option
def filetypes_command(*, output_format: OutputFormat) -> None:
    """List the registered detection rules.

    Args:
        output_format (OutputFormat): Rendering of the listing.
    """
    payload: list[dict[str, Any]] = [
        _serialize(i, rule) for i, rule in enumerate(get_detection_rules(), start=1)
    ]

    if output_format is OutputFormat.JSON:
        click.echo(json.dumps(payload, indent=2))
        return
    if output_format is OutputFormat.NDJSON:
        for item in payload:
            click.echo(json.dumps(item))
        return

    click.echo("Supported file types (first match wins):")
    for item in payload:
        click.echo(
            f"{item['priority']:>3}. {item['rule']:<14} {item['file_type']:<11} "
            f"{item['description']}"
        )
