"""Browsing history log for the embedded browser."""

from webkit_extras.history.config import HistoryConfig
from webkit_extras.history.events import BrowserEvents, connect_history
from webkit_extras.history.log import HistoryLog
from webkit_extras.history.models import HistoryEntry, SessionSeparator
from webkit_extras.history.parser import parse_line
from webkit_extras.history.view import resolve_selection, url_at_line

__all__ = [
    "HistoryConfig",
    "HistoryLog",
    "HistoryEntry",
    "SessionSeparator",
    "BrowserEvents",
    "connect_history",
    "parse_line",
    "resolve_selection",
    "url_at_line",
]
