# topmark:header:start
#
#   project      : FileFinch
#   file         : test_logging.py
#   file_relpath : tests/config/test_logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the TRACE level and environment-driven log level."""

from __future__ import annotations

import logging as stdlib_logging

import pytest

from filefinch.config import logging


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("TRACE", logging.TRACE_LEVEL),
        ("debug", stdlib_logging.DEBUG),
        (" warn ", stdlib_logging.WARNING),
        ("20", 20),
        ("bogus", None),
        ("", None),
    ],
)
def test_resolve_env_log_level(
    raw: str, expected: int | None, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Level names (any case) and numbers are accepted; junk is ignored."""
    monkeypatch.setenv(logging.LOG_LEVEL_ENV, raw)
    assert logging.resolve_env_log_level() == expected


def test_unset_env_log_level() -> None:
    """No variable, no level."""
    assert logging.resolve_env_log_level() is None


def test_trace_level_name() -> None:
    """TRACE sits below DEBUG and has a level name."""
    assert logging.TRACE_LEVEL < stdlib_logging.DEBUG
    assert stdlib_logging.getLevelName(logging.TRACE_LEVEL) == "TRACE"


def test_get_logger_supports_trace(caplog: pytest.LogCaptureFixture) -> None:
    """Package loggers expose `trace`."""
    log: logging.FinchLogger = logging.get_logger("filefinch.tests.trace")
    with caplog.at_level(logging.TRACE_LEVEL, logger="filefinch.tests.trace"):
        log.trace("rule %s evaluated", "png")
    assert "rule png evaluated" in caplog.text


def test_chalk_formatter_keeps_message() -> None:
    """Colored output still contains the formatted message."""
    formatter = logging.ChalkFormatter(logging.LOG_FORMAT)
    record = stdlib_logging.LogRecord(
        "filefinch", stdlib_logging.WARNING, __file__, 1, "careful %s", ("now",), None
    )
    assert "[WARNING] careful now" in formatter.format(record)
