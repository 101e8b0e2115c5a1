"""Central configuration and constants for ``lcovsum``."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, fields, replace
from enum import StrEnum
from pathlib import Path
from typing import Any

from lcovsum._meta import logger
from lcovsum.errors import ConfigError

# Default logging format used by the CLI entry point.
LOG_FORMAT = "%(levelname)s: %(message)s"

# Table read from pyproject.toml.
TOOL_TABLE = "lcovsum"


class Format(StrEnum):
    """Supported output formats."""

    TEXT = "text"
    TABLE = "table"
    JSON = "json"


@dataclass(frozen=True, slots=True)
class Settings:
    """Effective options after merging pyproject.toml and CLI flags."""

    format: Format = Format.TEXT
    strict: bool = False
    fail_under_lines: float | None = None
    fail_under_functions: float | None = None
    fail_under_branches: float | None = None

    def merged(self, **overrides: Any) -> Settings:
        """Return a copy with every non-``None`` override applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})


_THRESHOLD_KEYS = ("fail_under_lines", "fail_under_functions", "fail_under_branches")


def _coerce(table: dict[str, Any], source: Path) -> Settings:
    known = {f.name for f in fields(Settings)}
    unknown = sorted(set(table) - known)
    if unknown:
        msg = f"{source}: unknown [tool.{TOOL_TABLE}] key(s): {', '.join(unknown)}"
        raise ConfigError(msg)

    values: dict[str, Any] = {}
    if "format" in table:
        try:
            values["format"] = Format(str(table["format"]).lower())
        except ValueError:
            choices = ", ".join(f.value for f in Format)
            msg = f"{source}: format must be one of {choices}, got {table['format']!r}"
            raise ConfigError(msg) from None
    if "strict" in table:
        if not isinstance(table["strict"], bool):
            msg = f"{source}: strict must be a boolean"
            raise ConfigError(msg)
        values["strict"] = table["strict"]
    for key in _THRESHOLD_KEYS:
        if key not in table:
            continue
        raw = table[key]
        if isinstance(raw, bool) or not isinstance(raw, int | float):
            msg = f"{source}: {key} must be a number"
            raise ConfigError(msg)
        values[key] = float(raw)
    return Settings(**values)


def load_settings(pyproject: Path | None = None) -> Settings:
    """Read ``[tool.lcovsum]`` from *pyproject* (default ``./pyproject.toml``).

    A missing or unreadable file yields the defaults; a readable table with
    bad values raises :class:`ConfigError`.
    """
    path = pyproject if pyproject is not None else Path("pyproject.toml")
    if not path.is_file():
        return Settings()
    try:
        with path.open("rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning("Failed to parse %s: %s", path, e)
        return Settings()

    table = data.get("tool", {}).get(TOOL_TABLE)
    if table is None:
        return Settings()
    if not isinstance(table, dict):
        msg = f"{path}: [tool.{TOOL_TABLE}] must be a table"
        raise ConfigError(msg)
    logger.debug("using settings from %s", path)
    return _coerce(table, path)


__all__ = ["LOG_FORMAT", "TOOL_TABLE", "Format", "Settings", "load_settings"]
