"""Unified exception hierarchy for webkit-extras."""


class WebkitExtrasError(Exception):
    """Base exception for all webkit-extras errors."""


class ConfigError(WebkitExtrasError):
    """Invalid configuration value."""


# History
class HistoryError(WebkitExtrasError):
    """Base exception for history log operations."""


class HistoryWriteError(HistoryError):
    """Failed to write the history file."""


class MalformedSelectionError(HistoryError):
    """Neither the selection nor the current line holds a URL."""


# Web
class WebFetchError(WebkitExtrasError):
    """Failed to fetch web content."""


class WebSearchError(WebkitExtrasError):
    """Failed to build a web search."""


class PageFindError(WebkitExtrasError):
    """In-page search has nothing to search for."""
