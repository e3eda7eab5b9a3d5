"""Tests for history configuration."""

from pathlib import Path

import pytest

from webkit_extras.exceptions import ConfigError
from webkit_extras.history.config import HistoryConfig


def test_defaults():
    config = HistoryConfig()
    assert config.header_line == "day,time,title,url"
    assert config.retention_days == 30
    assert config.default_search_engine == "duckduckgo.com"
    assert config.history_file_path.name == "history.csv"


def test_config_is_frozen():
    config = HistoryConfig()
    with pytest.raises(AttributeError):
        config.retention_days = 5


def test_string_path_accepted(tmp_path):
    config = HistoryConfig(history_file_path=str(tmp_path / "h.csv"))
    assert isinstance(config.history_file_path, Path)


def test_negative_retention_rejected():
    with pytest.raises(ConfigError, match="retention_days"):
        HistoryConfig(retention_days=-1)


def test_multiline_separator_rejected():
    with pytest.raises(ConfigError, match="single non-empty line"):
        HistoryConfig(session_separator_line="a\nb")


def test_from_env(monkeypatch, tmp_path):
    monkeypatch.setenv("WEBKIT_EXTRAS_HISTORY_FILE", str(tmp_path / "log.csv"))
    monkeypatch.setenv("WEBKIT_EXTRAS_RETENTION_DAYS", "7")
    monkeypatch.setenv("WEBKIT_EXTRAS_SEARCH_ENGINE", "www.google.com")
    config = HistoryConfig.from_env()
    assert config.history_file_path == tmp_path / "log.csv"
    assert config.retention_days == 7
    assert config.default_search_engine == "www.google.com"


def test_from_env_bad_retention(monkeypatch):
    monkeypatch.setenv("WEBKIT_EXTRAS_RETENTION_DAYS", "a week")
    with pytest.raises(ConfigError, match="must be an integer"):
        HistoryConfig.from_env()
