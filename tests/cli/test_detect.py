# topmark:header:start
#
#   project      : FileFinch
#   file         : test_detect.py
#   file_relpath : tests/cli/test_detect.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests for `filefinch detect`: output formats and exit codes."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import pytest

from tests import samples
from tests.cli.conftest import (
    assert_CONFIG_ERROR,
    assert_IO_ERROR,
    assert_SUCCESS,
    assert_UNKNOWN_FORMAT,
    run_cli_in,
)

if TYPE_CHECKING:
    from pathlib import Path

    from click.testing import Result

pytestmark: pytest.MarkDecorator = pytest.mark.cli


@pytest.fixture
def workdir(isolation: Path) -> Path:
    """An isolated directory holding one sample of several formats."""
    (isolation / "logo.png").write_bytes(samples.png())
    (isolation / "table.parquet").write_bytes(samples.parquet())
    (isolation / "people.csv").write_bytes(samples.csv())
    (isolation / "names.csv").write_text("name\nalice\nbob\n", encoding="utf-8")
    (isolation / "blob.bin").write_bytes(b"\x00\x01\x02\x03\x04\x05")
    return isolation


def test_detect_text_output(workdir: Path) -> None:
    """Text output prints one ``path: Label`` line per input."""
    result: Result = run_cli_in(workdir, ["detect", "logo.png", "table.parquet", "people.csv"])
    assert_SUCCESS(result)
    assert result.output.splitlines() == [
        "logo.png: PNG",
        "table.parquet: Parquet",
        "people.csv: CSV",
    ]


def test_detect_marks_extension_fallback(workdir: Path) -> None:
    """Verdicts from the extension fallback are flagged."""
    result: Result = run_cli_in(workdir, ["detect", "names.csv"])
    assert_SUCCESS(result)
    assert result.output.strip() == "names.csv: CSV (by extension)"


def test_detect_no_fallback(workdir: Path) -> None:
    """``--no-fallback`` leaves content-less verdicts as Unknown."""
    result: Result = run_cli_in(workdir, ["detect", "--no-fallback", "names.csv"])
    assert_SUCCESS(result)
    assert result.output.strip() == "names.csv: Unknown"


def test_detect_json_output(workdir: Path) -> None:
    """JSON output is an array of records."""
    result: Result = run_cli_in(workdir, ["detect", "--format", "json", "logo.png", "blob.bin"])
    assert_SUCCESS(result)
    records: list[dict[str, Any]] = json.loads(result.output)
    assert records == [
        {
            "path": "logo.png",
            "file_type": "png",
            "label": "PNG",
            "rule": "png",
            "by_extension": False,
        },
        {
            "path": "blob.bin",
            "file_type": "unknown",
            "label": "Unknown",
            "rule": None,
            "by_extension": False,
        },
    ]


def test_detect_ndjson_output(workdir: Path) -> None:
    """NDJSON output is one object per line."""
    result: Result = run_cli_in(
        workdir, ["detect", "--format", "ndjson", "table.parquet", "people.csv"]
    )
    assert_SUCCESS(result)
    lines: list[str] = result.output.splitlines()
    assert [json.loads(line)["file_type"] for line in lines] == ["parquet", "csv"]


def test_detect_strict_unknown(workdir: Path) -> None:
    """``--strict`` fails when an input is not recognized."""
    result: Result = run_cli_in(workdir, ["detect", "--strict", "logo.png", "blob.bin"])
    assert_UNKNOWN_FORMAT(result)
    assert "blob.bin: Unknown" in result.output


def test_detect_strict_all_known(workdir: Path) -> None:
    """``--strict`` succeeds when every input is recognized."""
    result: Result = run_cli_in(workdir, ["detect", "--strict", "logo.png"])
    assert_SUCCESS(result)


def test_detect_unreadable_input(workdir: Path) -> None:
    """A missing file is an I/O error; other inputs are still reported."""
    result: Result = run_cli_in(workdir, ["detect", "missing.bin", "logo.png"])
    assert_IO_ERROR(result)
    assert "logo.png: PNG" in result.output
    assert "missing.bin" in result.output


def test_detect_unreadable_beats_strict(workdir: Path) -> None:
    """Read failures take precedence over unrecognized inputs."""
    result: Result = run_cli_in(workdir, ["detect", "--strict", "missing.bin", "blob.bin"])
    assert_IO_ERROR(result)


def test_detect_stdin(workdir: Path) -> None:
    """``-`` reads the input from standard input."""
    result: Result = run_cli_in(workdir, ["detect", "-"], input_bytes=samples.xlsx())
    assert_SUCCESS(result)
    assert result.output.strip() == "-: Excel"


def test_detect_requires_paths(workdir: Path) -> None:
    """At least one input is required."""
    result: Result = run_cli_in(workdir, ["detect"])
    assert result.exit_code != 0
    assert "Usage:" in result.output


def test_detect_uses_discovered_config(workdir: Path) -> None:
    """A filefinch.toml in the working directory is honored."""
    (workdir / "filefinch.toml").write_text("extension_fallback = false\n", encoding="utf-8")
    result: Result = run_cli_in(workdir, ["detect", "names.csv"])
    assert_SUCCESS(result)
    assert result.output.strip() == "names.csv: Unknown"


def test_detect_explicit_config(workdir: Path) -> None:
    """``--config`` points at a specific file."""
    cfg: Path = workdir / "strict.toml"
    cfg.write_text("extension_fallback = false\n", encoding="utf-8")
    result: Result = run_cli_in(workdir, ["detect", "--config", str(cfg), "names.csv"])
    assert_SUCCESS(result)
    assert "Unknown" in result.output


def test_detect_invalid_config(workdir: Path) -> None:
    """An invalid config file exits with CONFIG_ERROR."""
    (workdir / "filefinch.toml").write_text("head_window = -3\n", encoding="utf-8")
    result: Result = run_cli_in(workdir, ["detect", "logo.png"])
    assert_CONFIG_ERROR(result)
    assert "head_window" in result.output


def test_detect_invalid_env_window(workdir: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """A malformed window variable exits with CONFIG_ERROR."""
    monkeypatch.setenv("FILEFINCH_HEAD_WINDOW", "lots")
    result: Result = run_cli_in(workdir, ["detect", "logo.png"])
    assert_CONFIG_ERROR(result)
