# topmark:header:start
#
#   project      : FileFinch
#   file         : __init__.py
#   file_relpath : src/filefinch/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration and logging for FileFinch.

- `filefinch.config.settings`: `SnifferConfig` and its TOML/env loaders.
- `filefinch.config.logging`: TRACE-aware logger and colored formatter.
"""

from __future__ import annotations

from filefinch.config.settings import (
    SnifferConfig,
    discover_config_file,
    load_config,
    resolve_config,
)

__all__ = [
    "SnifferConfig",
    "discover_config_file",
    "load_config",
    "resolve_config",
]
