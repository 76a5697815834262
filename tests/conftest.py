# topmark:header:start
#
#   project      : FileFinch
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the FileFinch test suite.

Sets up TRACE-level logging for the run (so per-rule evaluation is visible on
failure) and shields tests from the developer's environment.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from filefinch.config import logging
from filefinch.constants import ENV_HEAD_WINDOW, ENV_TAIL_WINDOW


@pytest.fixture(autouse=True)
def isolate_filefinch_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure FileFinch settings are not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv(logging.LOG_LEVEL_ENV, raising=False)
    monkeypatch.delenv(ENV_HEAD_WINDOW, raising=False)
    monkeypatch.delenv(ENV_TAIL_WINDOW, raising=False)


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE for all tests.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def isolation(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run a test from an empty directory so no stray config file is discovered.

    Args:
        tmp_path (Path): The pytest-provided temporary directory for the test.
        monkeypatch (pytest.MonkeyPatch): Fixture to change the working directory.

    Returns:
        Path: The isolated working directory.
    """
    cwd: Path = tmp_path / "work"
    cwd.mkdir()
    monkeypatch.chdir(cwd)
    return cwd
