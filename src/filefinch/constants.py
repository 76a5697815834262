# topmark:header:start
#
#   project      : FileFinch
#   file         : constants.py
#   file_relpath : src/filefinch/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FileFinch Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version

try:
    FILEFINCH_VERSION: str = get_version("filefinch")
except PackageNotFoundError:  # running from a source checkout
    FILEFINCH_VERSION = "0.0.0"

# Config discovery: a dedicated file, or the [tool.filefinch] table in pyproject.toml
FILEFINCH_TOML_NAME: str = "filefinch.toml"
PYPROJECT_TOML_NAME: str = "pyproject.toml"
PYPROJECT_TOOL_SECTION: str = "filefinch"

ENV_HEAD_WINDOW: str = "FILEFINCH_HEAD_WINDOW"
ENV_TAIL_WINDOW: str = "FILEFINCH_TAIL_WINDOW"

DEFAULT_HEAD_WINDOW: int = 4096
DEFAULT_TAIL_WINDOW: int = 4096
# Upper bound for either window; detection must stay O(1) in memory.
MAX_WINDOW: int = 1024 * 1024

# Chunk size used to skim non-seekable streams for their last bytes.
STREAM_CHUNK_SIZE: int = 64 * 1024
