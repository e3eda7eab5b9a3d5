"""Tests for browser event dispatch."""

from unittest.mock import MagicMock

import pytest

from webkit_extras.history.config import HistoryConfig
from webkit_extras.history.events import BrowserEvents, connect_history
from webkit_extras.history.log import HistoryLog


def test_handlers_called_in_order():
    events = BrowserEvents()
    calls = []
    events.on_page_load_finished(lambda t, u: calls.append(("first", t, u)))
    events.on_page_load_finished(lambda t, u: calls.append(("second", t, u)))
    events.page_load_finished("Title", "https://example.com")
    assert calls == [
        ("first", "Title", "https://example.com"),
        ("second", "Title", "https://example.com"),
    ]


def test_register_as_decorator():
    events = BrowserEvents()

    @events.on_session_start
    def handler():
        handler.called = True

    events.session_start()
    assert handler.called


def test_dedupe_drops_repeat_within_window():
    now = [100.0]
    events = BrowserEvents(dedupe_seconds=2.0, clock=lambda: now[0])
    handler = MagicMock()
    events.on_page_load_finished(handler)

    assert events.page_load_finished("T", "https://example.com") is True
    now[0] = 100.5
    assert events.page_load_finished("T", "https://example.com") is False
    now[0] = 103.0
    assert events.page_load_finished("T", "https://example.com") is True
    assert handler.call_count == 2


def test_dedupe_off_by_default():
    events = BrowserEvents()
    handler = MagicMock()
    events.on_page_load_finished(handler)
    events.page_load_finished("T", "https://example.com")
    events.page_load_finished("T", "https://example.com")
    assert handler.call_count == 2


def test_handler_errors_propagate():
    events = BrowserEvents()

    def boom():
        raise RuntimeError("handler failed")

    events.on_session_start(boom)
    with pytest.raises(RuntimeError, match="handler failed"):
        events.session_start()


def test_connect_history(tmp_path):
    log = HistoryLog(HistoryConfig(history_file_path=tmp_path / "history.csv"))
    events = BrowserEvents()
    connect_history(events, log)

    events.page_load_finished("Example", "https://example.com")
    events.session_start()

    lines = log.display().splitlines()
    assert lines[0] == "day,time,title,url"
    assert lines[1] == "__________,__________,__________,__________"
    assert lines[2].endswith(",Example,https://example.com")
