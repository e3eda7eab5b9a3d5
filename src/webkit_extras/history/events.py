"""Registration points for browser session events."""

from __future__ import annotations

import logging
import time
from typing import Callable

from webkit_extras.history.log import HistoryLog

logger = logging.getLogger(__name__)

PageLoadHandler = Callable[[str, str], object]
SessionStartHandler = Callable[[], object]


class BrowserEvents:
    """Dispatch "page load finished" and "session start" events to handlers.

    Args:
        dedupe_seconds: Drop a page-load event repeating the previous
            (title, url) within this many seconds. 0 disables it.
        clock: Monotonic time source.
    """

    def __init__(self, dedupe_seconds: float = 0.0, clock: Callable[[], float] = time.monotonic):
        self.dedupe_seconds = dedupe_seconds
        self._clock = clock
        self._page_load_handlers: list[PageLoadHandler] = []
        self._session_start_handlers: list[SessionStartHandler] = []
        self._last_load: tuple[str, str, float] | None = None

    def on_page_load_finished(self, handler: PageLoadHandler) -> PageLoadHandler:
        self._page_load_handlers.append(handler)
        return handler

    def on_session_start(self, handler: SessionStartHandler) -> SessionStartHandler:
        self._session_start_handlers.append(handler)
        return handler

    def page_load_finished(self, title: str, url: str) -> bool:
        """Fire the page-load handlers. Returns False if the event was deduped."""
        now = self._clock()
        if self.dedupe_seconds > 0 and self._last_load is not None:
            last_title, last_url, last_at = self._last_load
            if (last_title, last_url) == (title, url) and now - last_at < self.dedupe_seconds:
                logger.debug("Ignoring duplicate page-load event for %s", url)
                return False
        self._last_load = (title, url, now)
        for handler in self._page_load_handlers:
            handler(title, url)
        return True

    def session_start(self) -> None:
        # Fired before the new session exists.
        self._last_load = None
        for handler in self._session_start_handlers:
            handler()


def connect_history(events: BrowserEvents, log: HistoryLog) -> None:
    """Record every finished page load and mark every new session in `log`."""
    events.on_page_load_finished(lambda title, url: log.record_visit(title, url))
    events.on_session_start(lambda: log.start_session())
