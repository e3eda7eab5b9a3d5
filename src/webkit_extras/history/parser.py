"""Parse history log lines into records."""

from __future__ import annotations

from webkit_extras.history.config import DEFAULT_HEADER_LINE, DEFAULT_SEPARATOR_LINE
from webkit_extras.history.models import HistoryEntry, SessionSeparator


def parse_line(
    line: str,
    separator_line: str = DEFAULT_SEPARATOR_LINE,
    header_line: str = DEFAULT_HEADER_LINE,
) -> HistoryEntry | SessionSeparator | None:
    """Parse one log line; returns None for the header, blanks and malformed rows.

    The title is whatever sits between the time and the last comma, so a
    title containing commas reads back intact as long as the URL has none.
    """
    line = line.rstrip("\r\n")
    if not line.strip() or line == header_line:
        return None
    if line == separator_line:
        return SessionSeparator(line=line)

    parts = line.split(",", 2)
    if len(parts) < 3:
        return None
    day, time, rest = parts
    if "," not in rest:
        return None
    title, url = rest.rsplit(",", 1)
    return HistoryEntry(day=day, time=time, title=title, url=url)


def day_of(line: str) -> str:
    """Return the day field (text before the first comma) of a log line."""
    return line.split(",", 1)[0]
