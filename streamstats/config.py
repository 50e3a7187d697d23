"""Read the optional streamstats log level from pyproject.toml or .streamstats.toml.

Nothing here changes the report: stdout and the stderr diagnostic are the
same for every configuration.
"""

from __future__ import annotations

import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class StreamStatsConfig:
    """Runtime configuration for streamstats."""

    # structlog level name; log lines always go to stderr
    log_level: str = "WARNING"


def _toml_table(path: Path, *keys: str) -> dict:
    """Return the table at *keys* inside a TOML file.

    A missing or unparseable file, or a missing or non-table key, gives {}.
    """
    try:
        with open(path, "rb") as f:
            table: Any = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError, UnicodeDecodeError):
        return {}
    for key in keys:
        table = table.get(key, {})
        if not isinstance(table, dict):
            return {}
    return table


def _level_or(value: Any, fallback: str) -> str:
    """Return *value* as an upper-case level name, or *fallback* if it isn't one."""
    if isinstance(value, str) and value.upper() in _LEVELS:
        return value.upper()
    return fallback


def load_config(project_root: Optional[Path] = None) -> StreamStatsConfig:
    """Load [tool.streamstats] from pyproject.toml, then .streamstats.toml on top."""
    if project_root is None:
        project_root = Path.cwd()
    cfg = StreamStatsConfig()
    for table in (
        _toml_table(project_root / "pyproject.toml", "tool", "streamstats"),
        _toml_table(project_root / ".streamstats.toml"),
    ):
        cfg.log_level = _level_or(table.get("log_level"), cfg.log_level)
    return cfg
