# topmark:header:start
#
#   project      : FileFinch
#   file         : settings.py
#   file_relpath : src/filefinch/config/settings.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Sniffer configuration: window sizes and path-level fallbacks.

Configuration is layered, lowest to highest precedence:

1. built-in defaults (`SnifferConfig()`);
2. a TOML file: either ``filefinch.toml`` (top-level table) or the
   ``[tool.filefinch]`` table of ``pyproject.toml``;
3. environment variables ``FILEFINCH_HEAD_WINDOW`` / ``FILEFINCH_TAIL_WINDOW``.

TOML is parsed with `tomlkit`. All validation errors are reported as
`filefinch.errors.ConfigError`.

Example ``filefinch.toml``:

```toml
head_window = 8192
tail_window = 65536
extension_fallback = false
```
"""

from __future__ import annotations

import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import TYPE_CHECKING, Any

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from filefinch.config.logging import FinchLogger, get_logger
from filefinch.constants import (
    DEFAULT_HEAD_WINDOW,
    DEFAULT_TAIL_WINDOW,
    ENV_HEAD_WINDOW,
    ENV_TAIL_WINDOW,
    FILEFINCH_TOML_NAME,
    MAX_WINDOW,
    PYPROJECT_TOML_NAME,
    PYPROJECT_TOOL_SECTION,
)
from filefinch.errors import ConfigError

if TYPE_CHECKING:
    from collections.abc import Mapping

logger: FinchLogger = get_logger(__name__)


@dataclass(frozen=True)
class SnifferConfig:
    """Immutable sniffer settings.

    Windows smaller than what the registry needs are widened by the engine, so
    these values can only *add* context (e.g. a larger tail to reach the ZIP
    central directory of archives with long comments).

    Attributes:
        head_window (int): Bytes read from the start of the source.
        tail_window (int): Bytes read from the end of the source.
        extension_fallback (bool): Whether `detect_path` may consult the filename
            extension when content detection yields `FileType.UNKNOWN`.
    """

    head_window: int = DEFAULT_HEAD_WINDOW
    tail_window: int = DEFAULT_TAIL_WINDOW
    extension_fallback: bool = True

    def __post_init__(self) -> None:
        for name in ("head_window", "tail_window"):
            value: object = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigError(f"{name} must be an integer, got {value!r}")
            if not 0 <= value <= MAX_WINDOW:
                raise ConfigError(f"{name} must be between 0 and {MAX_WINDOW}, got {value}")
        if not isinstance(self.extension_fallback, bool):
            raise ConfigError(
                f"extension_fallback must be a boolean, got {self.extension_fallback!r}"
            )

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> SnifferConfig:
        """Build a config from a plain mapping (e.g. a parsed TOML table).

        Args:
            data (Mapping[str, Any]): Keys must be `SnifferConfig` field names.

        Returns:
            SnifferConfig: The validated configuration.

        Raises:
            ConfigError: On unknown keys or invalid values.
        """
        known: set[str] = {f.name for f in fields(cls)}
        unknown: list[str] = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown configuration key(s): {', '.join(unknown)}")
        return cls(**dict(data))

    def with_env_overrides(self, environ: Mapping[str, str] | None = None) -> SnifferConfig:
        """Return a copy with window sizes overridden from the environment.

        Args:
            environ (Mapping[str, str] | None): Environment to read (defaults to ``os.environ``).

        Returns:
            SnifferConfig: The updated configuration.

        Raises:
            ConfigError: If a variable is set to a non-integer value.
        """
        env: Mapping[str, str] = os.environ if environ is None else environ
        overrides: dict[str, int] = {}
        for var, name in ((ENV_HEAD_WINDOW, "head_window"), (ENV_TAIL_WINDOW, "tail_window")):
            raw: str | None = env.get(var)
            if raw is None or not raw.strip():
                continue
            try:
                overrides[name] = int(raw.strip())
            except ValueError as exc:
                raise ConfigError(f"{var} must be an integer, got {raw!r}") from exc
        if not overrides:
            return self
        logger.debug("Environment overrides: %s", overrides)
        return replace(self, **overrides)


def _read_toml(path: Path) -> dict[str, Any]:
    try:
        text: str = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Cannot read config file {path}: {exc}") from exc
    try:
        return tomlkit.parse(text).unwrap()
    except TomlkitParseError as exc:
        raise ConfigError(f"Malformed TOML in {path}: {exc}") from exc


def load_config(path: Path | str) -> SnifferConfig:
    """Load a config file (``filefinch.toml`` or ``pyproject.toml``).

    For ``pyproject.toml`` only the ``[tool.filefinch]`` table is used; a missing
    table yields the defaults.

    Args:
        path (Path | str): Path of the TOML file.

    Returns:
        SnifferConfig: The configuration (without environment overrides).

    Raises:
        ConfigError: If the file cannot be read or holds invalid settings.
    """
    p = Path(path)
    doc: dict[str, Any] = _read_toml(p)
    if p.name == PYPROJECT_TOML_NAME:
        tool: Any = doc.get("tool", {})
        table: Any = tool.get(PYPROJECT_TOOL_SECTION, {}) if isinstance(tool, dict) else {}
    else:
        table = doc
    if not isinstance(table, dict):
        raise ConfigError(f"Expected a table of settings in {p}")
    logger.debug("Loaded config from %s: %s", p, table)
    return SnifferConfig.from_mapping(table)


def discover_config_file(start: Path | str | None = None) -> Path | None:
    """Find the nearest config file, walking up from ``start`` (default: CWD).

    In each directory ``filefinch.toml`` wins over ``pyproject.toml``; a
    ``pyproject.toml`` only counts if it has a ``[tool.filefinch]`` table.

    Args:
        start (Path | str | None): Directory to start from.

    Returns:
        Path | None: The config file, or None if none was found.
    """
    current: Path = Path(start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate: Path = directory / FILEFINCH_TOML_NAME
        if candidate.is_file():
            return candidate
        pyproject: Path = directory / PYPROJECT_TOML_NAME
        if pyproject.is_file():
            try:
                doc: dict[str, Any] = _read_toml(pyproject)
            except ConfigError:
                logger.warning("Ignoring unreadable %s", pyproject)
                continue
            tool: Any = doc.get("tool")
            if isinstance(tool, dict) and PYPROJECT_TOOL_SECTION in tool:
                return pyproject
    return None


def resolve_config(path: Path | str | None = None) -> SnifferConfig:
    """Resolve the effective configuration: defaults, then file, then environment.

    Args:
        path (Path | str | None): Explicit config file. If None, the nearest one is
            discovered from the current directory.

    Returns:
        SnifferConfig: The effective configuration.
    """
    config_path: Path | None = Path(path) if path is not None else discover_config_file()
    config: SnifferConfig = load_config(config_path) if config_path else SnifferConfig()
    return config.with_env_overrides()
