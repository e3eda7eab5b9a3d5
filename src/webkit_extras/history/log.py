"""Newest-first history log backed by a single flat text file."""

from __future__ import annotations

import logging
import os
import stat
import tempfile
from datetime import date, datetime, timedelta
from pathlib import Path

from webkit_extras.exceptions import HistoryError, HistoryWriteError
from webkit_extras.history.config import HistoryConfig
from webkit_extras.history.models import HistoryEntry, SessionSeparator
from webkit_extras.history.parser import day_of, parse_line

logger = logging.getLogger(__name__)


class HistoryLog:
    """Record page visits and session boundaries in a CSV-like log file.

    The file keeps the header on line 1 and every new record on line 2, so
    the most recent visit is always directly below the header. Each write
    reads the whole file, edits it in memory and replaces it in one go.

    Args:
        config: Paths, literal lines and retention window.
    """

    def __init__(self, config: HistoryConfig | None = None):
        self.config = config or HistoryConfig()

    @property
    def path(self) -> Path:
        return self.config.history_file_path

    # ---- Write paths ----

    def record_visit(
        self,
        title: str,
        url: str,
        current_time: datetime | None = None,
    ) -> HistoryEntry:
        """Insert a visit directly below the header."""
        now = current_time or datetime.now()
        entry = HistoryEntry(
            day=now.strftime(self.config.day_format),
            time=now.strftime(self.config.time_format),
            title=" ".join((title or "").splitlines()),
            url=url.strip(),
        )
        lines = self._load_lines()
        lines.insert(1, entry.to_line())
        self._write_lines(lines)
        logger.debug("Recorded visit %s", entry.url)
        return entry

    def start_session(self, today: date | None = None) -> int:
        """Mark a session boundary and prune old entries in a single write.

        Returns the number of lines pruned.
        """
        lines = self._load_lines()
        lines.insert(1, self.config.session_separator_line)
        removed = self._prune(lines, self.config.retention_days, today)
        self._write_lines(lines)
        logger.debug("Started new session (%d lines pruned)", removed)
        return removed

    def prune_older_than(self, retention_days: int, today: date | None = None) -> int:
        """Drop the block of lines starting at the first one dated exactly
        `today - retention_days`.

        Returns the number of lines removed; the file is only rewritten when
        that is non-zero.
        """
        if not self.path.exists():
            return 0
        lines = self._load_lines()
        removed = self._prune(lines, retention_days, today)
        if removed:
            self._write_lines(lines)
        return removed

    # ---- Read paths ----

    def display(self) -> str:
        """Return the raw log text. Never creates or modifies the file."""
        if not self.path.exists():
            return self.config.header_line + "\n"
        try:
            return self.path.read_text(encoding="utf-8")
        except OSError as e:
            raise HistoryError(f"Failed to read history file {self.path}: {e}") from e

    def entries(self) -> list[HistoryEntry | SessionSeparator]:
        """Parsed records, newest first."""
        records: list[HistoryEntry | SessionSeparator] = []
        for line in self.display().splitlines():
            record = parse_line(
                line,
                separator_line=self.config.session_separator_line,
                header_line=self.config.header_line,
            )
            if record is not None:
                records.append(record)
        return records

    # ---- Internals ----

    def _prune(self, lines: list[str], retention_days: int, today: date | None) -> int:
        cutoff_day = (today or date.today()) - timedelta(days=retention_days)
        cutoff = cutoff_day.strftime(self.config.day_format)
        for index in range(1, len(lines)):
            if day_of(lines[index]) == cutoff:
                removed = len(lines) - index
                del lines[index:]
                logger.info("Pruned %d history lines dated %s or older", removed, cutoff)
                return removed
        return 0

    def _load_lines(self) -> list[str]:
        header = self.config.header_line
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.info("History file %s not found, starting a new one", self.path)
            return [header]
        except OSError as e:
            raise HistoryError(f"Failed to read history file {self.path}: {e}") from e

        lines = text.splitlines()
        while lines and not lines[-1].strip():
            lines.pop()
        if not lines or lines[0] != header:
            lines.insert(0, header)
        return lines

    def _write_lines(self, lines: list[str]) -> None:
        """Replace the file atomically; the old content survives a failed write."""
        content = "\n".join(lines) + "\n"
        # Write through symlinks to the real file.
        target = self.path.resolve()
        tmp_path: Path | None = None
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=target.parent,
                prefix=f".{target.name}-",
                suffix=".tmp",
                delete=False,
            ) as tmp:
                tmp_path = Path(tmp.name)
                tmp.write(content)
            if target.exists():
                os.chmod(tmp_path, stat.S_IMODE(target.stat().st_mode))
            os.replace(tmp_path, target)
        except OSError as e:
            if tmp_path is not None:
                tmp_path.unlink(missing_ok=True)
            raise HistoryWriteError(f"Failed to write history file {self.path}: {e}") from e
