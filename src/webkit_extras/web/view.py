"""Switch a URL between the text-mode view and the rendering view."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from urllib.parse import urlparse

from webkit_extras.exceptions import WebFetchError

logger = logging.getLogger(__name__)

USER_AGENT = "webkit-extras/1.0"


class ViewMode(enum.Enum):
    TEXT = "text"
    RENDERED = "rendered"


@dataclass(frozen=True)
class ViewRequest:
    """Open `url` in the viewer for `mode`."""

    mode: ViewMode
    url: str


def web_url(url: str) -> str:
    """Return `url` normalized, or raise if it is not an http(s) URL.

    Both views accept the same URLs, local and intranet hosts included.
    """
    parsed = urlparse((url or "").strip())
    if parsed.scheme not in {"http", "https"} or not parsed.netloc:
        raise WebFetchError(f"Not a web URL: {url!r}")
    return parsed.geturl()


def toggle_view(mode: ViewMode, url: str) -> ViewRequest:
    """Reopen the current URL in the other view."""
    other = ViewMode.RENDERED if mode is ViewMode.TEXT else ViewMode.TEXT
    return ViewRequest(mode=other, url=web_url(url))


class TextPageFetcher:
    """Download a page for the text-mode view and reduce it to plain text.

    Args:
        max_response_bytes: Pages larger than this are refused (default 1MB).
        max_redirects: Redirects followed before giving up.
        timeout: Request timeout in seconds.
        transport: Optional httpx transport, e.g. a proxy or mock.
    """

    def __init__(
        self,
        max_response_bytes: int = 1_048_576,
        max_redirects: int = 5,
        timeout: float = 10.0,
        transport=None,
    ):
        self.max_response_bytes = max_response_bytes
        self.max_redirects = max_redirects
        self.timeout = timeout
        self.transport = transport

    def fetch_text(self, url: str, max_length: int = 20000) -> str:
        try:
            import httpx
        except ImportError:
            raise ImportError(
                "httpx and beautifulsoup4 are required for TextPageFetcher. "
                "Install with: pip install webkit-extras[web]"
            )

        url = web_url(url)
        try:
            with httpx.Client(
                timeout=self.timeout,
                follow_redirects=True,
                max_redirects=self.max_redirects,
                transport=self.transport,
                headers={"User-Agent": USER_AGENT},
            ) as client:
                response = client.get(url)
                response.raise_for_status()
        except httpx.HTTPError as e:
            logger.warning("Text view fetch failed for %s: %s", url, e)
            raise WebFetchError(f"Fetch failed: {e}") from e

        if len(response.content) > self.max_response_bytes:
            raise WebFetchError(f"Page too large (>{self.max_response_bytes} bytes): {url}")
        if response.history:
            logger.debug("Text view of %s redirected to %s", url, response.url)

        content_type = response.headers.get("content-type", "")
        return html_to_text(response.text, content_type)[:max_length]


def html_to_text(raw: str, content_type: str = "text/html") -> str:
    """Drop scripts, styles and page chrome; one text block per line."""
    if "html" not in content_type and not raw.lstrip().startswith("<"):
        return raw
    try:
        from bs4 import BeautifulSoup
    except ImportError:
        raise ImportError(
            "beautifulsoup4 is required for the text view. "
            "Install with: pip install webkit-extras[web]"
        )
    soup = BeautifulSoup(raw, "html.parser")
    for element in soup(["script", "style", "nav", "footer", "header"]):
        element.decompose()
    return soup.get_text(separator="\n", strip=True)
