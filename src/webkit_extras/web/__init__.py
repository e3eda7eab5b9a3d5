"""Navigation conveniences for the embedded browser."""

from webkit_extras.web.find import PageFinder, find_script
from webkit_extras.web.search import SearchLauncher, build_search_url
from webkit_extras.web.view import TextPageFetcher, ViewMode, ViewRequest, toggle_view

__all__ = [
    "PageFinder",
    "find_script",
    "SearchLauncher",
    "build_search_url",
    "TextPageFetcher",
    "ViewMode",
    "ViewRequest",
    "toggle_view",
]
