"""Tests for in-page search."""

import pytest

from webkit_extras.exceptions import PageFindError
from webkit_extras.web.find import PageFinder, find_script


def test_find_script_escapes_query():
    assert find_script('say "hi"') == 'window.find("say \\"hi\\"", false, false, true);'


def test_search_forward_then_repeat():
    finder = PageFinder()
    assert finder.search_forward("needle") == 'window.find("needle", false, false, true);'
    assert finder.search_forward() == 'window.find("needle", false, false, true);'
    assert finder.repeat() == 'window.find("needle", false, false, true);'


def test_backward_reuses_last_query():
    finder = PageFinder()
    finder.search_forward("needle")
    assert finder.search_backward() == 'window.find("needle", false, true, true);'
    assert finder.backwards is True


def test_new_query_replaces_last():
    finder = PageFinder()
    finder.search_forward("one")
    finder.search_forward("two")
    assert finder.last_query == "two"


def test_toggle_direction():
    finder = PageFinder()
    finder.search_forward("needle")
    assert "true, true" in finder.toggle_direction()
    assert "false, true" in finder.toggle_direction()


def test_repeat_without_query():
    with pytest.raises(PageFindError):
        PageFinder().search_forward()
