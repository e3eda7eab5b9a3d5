"""Configuration for the history log."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from webkit_extras.exceptions import ConfigError

DEFAULT_HISTORY_PATH = Path.home() / ".webkit-extras" / "history.csv"
DEFAULT_HEADER_LINE = "day,time,title,url"
DEFAULT_SEPARATOR_LINE = "__________,__________,__________,__________"
DEFAULT_RETENTION_DAYS = 30
DEFAULT_SEARCH_ENGINE = "duckduckgo.com"


@dataclass(frozen=True)
class HistoryConfig:
    """Settings shared by the history log and the search launcher."""

    history_file_path: Path = field(default_factory=lambda: DEFAULT_HISTORY_PATH)
    header_line: str = DEFAULT_HEADER_LINE
    session_separator_line: str = DEFAULT_SEPARATOR_LINE
    retention_days: int = DEFAULT_RETENTION_DAYS
    default_search_engine: str = DEFAULT_SEARCH_ENGINE
    day_format: str = "%m %d %Y"
    time_format: str = "%H:%M:%S"

    def __post_init__(self) -> None:
        # Accept plain strings for the path.
        object.__setattr__(self, "history_file_path", Path(self.history_file_path).expanduser())
        if self.retention_days < 0:
            raise ConfigError(f"retention_days must be >= 0, got {self.retention_days}")
        for name in ("header_line", "session_separator_line"):
            value = getattr(self, name)
            if not value or "\n" in value:
                raise ConfigError(f"{name} must be a single non-empty line")
        if not self.default_search_engine.strip():
            raise ConfigError("default_search_engine must not be empty")

    @classmethod
    def from_env(cls) -> HistoryConfig:
        """Build a config from WEBKIT_EXTRAS_* environment variables."""
        kwargs: dict = {}
        path = os.environ.get("WEBKIT_EXTRAS_HISTORY_FILE")
        if path:
            kwargs["history_file_path"] = Path(path)
        retention = os.environ.get("WEBKIT_EXTRAS_RETENTION_DAYS")
        if retention:
            try:
                kwargs["retention_days"] = int(retention)
            except ValueError as e:
                raise ConfigError(
                    f"WEBKIT_EXTRAS_RETENTION_DAYS must be an integer, got {retention!r}"
                ) from e
        engine = os.environ.get("WEBKIT_EXTRAS_SEARCH_ENGINE")
        if engine:
            kwargs["default_search_engine"] = engine
        return cls(**kwargs)
