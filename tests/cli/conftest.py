# topmark:header:start
#
#   project      : FileFinch
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running FileFinch in a controlled working directory.

`run_cli_in()` changes the process working directory to the given directory
before invoking the Click CLI, so relative input paths resolve against it and
config discovery only sees files the test created.
"""

from __future__ import annotations

import os
from typing import IO, TYPE_CHECKING, Any, Sequence

from click.testing import CliRunner, Result

from filefinch.cli.exit_codes import ExitCode
from filefinch.cli.main import cli

if TYPE_CHECKING:
    from pathlib import Path


def run_cli_in(
    cwd: Path,
    argv: str | Sequence[str] | None,
    *,
    input_bytes: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI with ``cwd`` as the working directory.

    Args:
        cwd (Path): Directory used as the CWD for the command invocation.
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["detect", "a.csv"]``.
        input_bytes (str | bytes | IO[Any] | None): Optional standard input, read by ``-``.

    Returns:
        Result: The `click.testing.Result` produced by
            `click.testing.CliRunner.invoke`.
    """
    runner = CliRunner()
    previous: str = os.getcwd()
    try:
        os.chdir(cwd)
        return runner.invoke(cli, argv, input=input_bytes)
    finally:
        os.chdir(previous)


def run_cli(argv: str | Sequence[str] | None) -> Result:
    """Invoke the CLI without changing the working directory.

    Use this helper for commands that touch no files (``filetypes``, ``version``).

    Args:
        argv (str | Sequence[str] | None): CLI argument vector.

    Returns:
        Result: The `click.testing.Result` produced by
            `click.testing.CliRunner.invoke`.
    """
    return CliRunner().invoke(cli, argv)


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0).

    Args:
        result (Result): The Result object returned by `run_cli` or `run_cli_in`.
    """
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_UNKNOWN_FORMAT(result: Result) -> None:
    """Assert that ``detect --strict`` reported an unrecognized input (code 2).

    Args:
        result (Result): The Result object returned by `run_cli` or `run_cli_in`.
    """
    assert result.exit_code == ExitCode.UNKNOWN_FORMAT, result.output
    # Click usage errors also exit with 2; they print a usage banner.
    assert "Usage:" not in result.output


def assert_IO_ERROR(result: Result) -> None:
    """Assert that at least one input could not be read (code 74).

    Args:
        result (Result): The Result object returned by `run_cli` or `run_cli_in`.
    """
    assert result.exit_code == ExitCode.IO_ERROR, result.output


def assert_CONFIG_ERROR(result: Result) -> None:
    """Assert that the configuration was rejected (code 78).

    Args:
        result (Result): The Result object returned by `run_cli` or `run_cli_in`.
    """
    assert result.exit_code == ExitCode.CONFIG_ERROR, result.output


def assert_USAGE_ERROR(result: Result) -> None:
    """Assert that the command exited with USAGE_ERROR (code 64).

    Args:
        result (Result): The Result object returned by `run_cli` or `run_cli_in`.
    """
    assert result.exit_code == ExitCode.USAGE_ERROR, result.output
