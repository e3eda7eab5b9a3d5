"""Quick web-search launcher for the embedded browser."""

from __future__ import annotations

import logging
import re
from urllib.parse import urlparse

from webkit_extras.exceptions import WebSearchError
from webkit_extras.history.config import HistoryConfig

logger = logging.getLogger(__name__)

_BARE_HOST = re.compile(r"^[\w-]+(\.[\w-]+)*\.[A-Za-z]{2,}(:\d+)?(/\S*)?$")


def _require_httpx():
    try:
        import httpx
    except ImportError:
        raise ImportError(
            "httpx is required for the search launcher. "
            "Install with: pip install webkit-extras[web]"
        )
    return httpx


def build_search_url(query: str, engine: str) -> str:
    """Build `https://<engine>/?q=<query>` with the query URL-encoded."""
    httpx = _require_httpx()
    query = (query or "").strip()
    if not query:
        raise WebSearchError("Search query is empty")
    if not engine.strip():
        raise WebSearchError("Search engine host is empty")
    return str(httpx.URL(f"https://{engine.strip()}/", params={"q": query}))


class SearchLauncher:
    """Turn user input into a URL: open it directly or search for it.

    Args:
        engine: Search engine hostname, e.g. "duckduckgo.com".
    """

    def __init__(self, engine: str):
        if not engine or not engine.strip():
            raise WebSearchError("A search engine hostname is required.")
        self.engine = engine.strip()

    @classmethod
    def from_config(cls, config: HistoryConfig) -> SearchLauncher:
        """Launcher for `config.default_search_engine`."""
        return cls(engine=config.default_search_engine)

    def resolve(self, text: str) -> str:
        """Return the URL to load for `text`."""
        text = (text or "").strip()
        if not text:
            raise WebSearchError("Nothing to search for")

        parsed = urlparse(text)
        if parsed.scheme in {"http", "https"} and parsed.netloc:
            return text
        if _BARE_HOST.match(text):
            return f"https://{text}"

        url = build_search_url(text, self.engine)
        logger.debug("Searching %s for %r", self.engine, text)
        return url
