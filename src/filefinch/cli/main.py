# topmark:header:start
#
#   project      : FileFinch
#   file         : main.py
#   file_relpath : src/filefinch/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FileFinch Click CLI.

Group-level options (verbosity) are resolved once and turned into logging
configuration; subcommands only deal with their own arguments.
"""

from __future__ import annotations

import click

from filefinch.cli.commands.detect import detect_command
from filefinch.cli.commands.filetypes import filetypes_command
from filefinch.cli.commands.version import version_command
from filefinch.cli.options import common_verbose_options, resolve_verbosity
from filefinch.config.logging import get_logger, resolve_env_log_level, setup_logging

logger = get_logger(__name__)


def init_common_state(ctx: click.Context, *, verbose: int, quiet: int) -> None:
    """Initialize shared state on the Click context and configure logging.

    ``FILEFINCH_LOG_LEVEL`` takes precedence over ``-v``/``-q``.

    Args:
        ctx (click.Context): Current Click context; ``obj`` will be set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
    """
    ctx.obj = ctx.obj or {}
    level_cli: int = resolve_verbosity(verbose, quiet)
    level_env: int | None = resolve_env_log_level()
    level: int = level_env if level_env is not None else level_cli
    ctx.obj["log_level"] = level
    setup_logging(level=level)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="FileFinch: identify file formats from their content.",
)
@common_verbose_options
@click.pass_context
def cli(ctx: click.Context, verbose: int, quiet: int) -> None:
    """Entry point for the FileFinch CLI."""
    init_common_state(ctx, verbose=verbose, quiet=quiet)

    if ctx.invoked_subcommand is None:
        click.echo("Hint: use 'filefinch detect [PATHS...]' to identify files.")
        click.echo()
        click.echo(ctx.get_help())


cli.add_command(detect_command)

cli.add_command(filetypes_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
