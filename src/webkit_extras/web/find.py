"""Simple in-page text search delegated to the browser's window.find()."""

from __future__ import annotations

import json

from webkit_extras.exceptions import PageFindError


class PageFinder:
    """Track the last query and direction of in-page search.

    Every call returns a JavaScript snippet for the browser widget to run.
    Searches are case-insensitive and wrap around the page.
    """

    def __init__(self):
        self.last_query: str | None = None
        self.backwards = False

    def search_forward(self, query: str | None = None) -> str:
        return self._search(query, backwards=False)

    def search_backward(self, query: str | None = None) -> str:
        return self._search(query, backwards=True)

    def repeat(self) -> str:
        """Repeat the last search in the current direction."""
        return self._search(None, backwards=self.backwards)

    def toggle_direction(self) -> str:
        """Flip the direction and repeat the last search."""
        return self._search(None, backwards=not self.backwards)

    def _search(self, query: str | None, backwards: bool) -> str:
        if query:
            self.last_query = query
        elif not self.last_query:
            raise PageFindError("No previous search to repeat")
        self.backwards = backwards
        return find_script(self.last_query, backwards)


def find_script(query: str, backwards: bool = False) -> str:
    """window.find(text, caseSensitive, backwards, wrapAround)"""
    return f"window.find({json.dumps(query)}, false, {json.dumps(backwards)}, true);"
