"""Data models for the history log."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class HistoryEntry:
    """One recorded page visit."""

    day: str
    time: str
    title: str
    url: str

    def to_line(self) -> str:
        # Titles are written verbatim; commas are not escaped.
        return f"{self.day},{self.time},{self.title},{self.url}"


@dataclass(frozen=True)
class SessionSeparator:
    """Sentinel row between two browsing sessions."""

    line: str

    def to_line(self) -> str:
        return self.line
