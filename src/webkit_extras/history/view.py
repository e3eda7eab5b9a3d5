"""Resolve the URL to open from the displayed history log."""

from __future__ import annotations

from urllib.parse import urlparse

from webkit_extras.exceptions import MalformedSelectionError
from webkit_extras.history.models import HistoryEntry
from webkit_extras.history.parser import parse_line


def _is_web_url(text: str) -> bool:
    parsed = urlparse(text)
    return parsed.scheme in {"http", "https"} and bool(parsed.netloc)


def url_at_line(line: str) -> str | None:
    """URL of a displayed log line, or None for header/separator/malformed lines."""
    record = parse_line(line)
    if isinstance(record, HistoryEntry) and _is_web_url(record.url.strip()):
        return record.url.strip()
    return None


def resolve_selection(selection: str | None, current_line: str) -> str:
    """Pick the URL to open: the selection if it is a URL, else the line's URL."""
    candidate = (selection or "").strip()
    if candidate and _is_web_url(candidate):
        return candidate
    url = url_at_line(current_line)
    if url is None:
        raise MalformedSelectionError(
            f"No URL in selection {candidate!r} or current line {current_line!r}"
        )
    return url
