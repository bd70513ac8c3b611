"""
One-time scan over the existing contents of a VRChat log.

Finds the last URL resolution entry, then the last sync correction at or after
it, and counts the lines read so live tailing can resume right after them.

Both passes go forward through the whole file. URLs tend to sit near the start
of a session's log, so reading backwards for an early exit would gain little.
"""

from __future__ import annotations

import os
from typing import Optional

from ..models.events import FoundSeek, FoundUrl, NothingFound, ScanResult, UrlAndSeek, UrlOnly
from ..preprocessing.patterns import match_seek_line, match_url_line
from ..utils.errors import LogFileNotFoundError
from ..utils.logger import logger
from .lines import iter_complete_lines
from .log_locator import DEFAULT_PATTERN, default_log_dir, find_latest_log


class HistoryScanner:
    """Two forward passes over a log file; last match wins in both."""

    def __init__(self, path: str, progress_every: int = 100_000) -> None:
        self.path = path
        self.progress_every = progress_every
        self.lines_read_initially: Optional[int] = None

    def _open(self):
        try:
            return open(self.path, "rb")
        except FileNotFoundError as exc:
            raise LogFileNotFoundError(self.path) from exc

    def find_last_url(self) -> Optional[FoundUrl]:
        logger.debug("Log file: {}", self.path)
        last_url: Optional[FoundUrl] = None
        line_count = 0
        with self._open() as f:
            for line in iter_complete_lines(f):
                line_count += 1
                if line_count % self.progress_every == 0:
                    logger.debug("Processed {} lines.", line_count)
                found_url = match_url_line(line, line_count)
                if found_url is not None:
                    last_url = found_url
        self.lines_read_initially = line_count
        return last_url

    def find_last_seek(self, not_before_line: int) -> Optional[FoundSeek]:
        last_seek: Optional[FoundSeek] = None
        with self._open() as f:
            for line_number, line in enumerate(iter_complete_lines(f), start=1):
                if line_number < not_before_line:
                    continue
                # Lines appended since the first pass belong to the tailer
                if self.lines_read_initially is not None and line_number > self.lines_read_initially:
                    break
                found_seek = match_seek_line(line)
                if found_seek is not None:
                    last_seek = found_seek
        return last_seek

    def scan(self) -> ScanResult:
        found_url = self.find_last_url()
        lines_scanned = self.lines_read_initially or 0
        if found_url is None:
            return NothingFound(lines_scanned)
        found_seek = self.find_last_seek(found_url.source_line)
        if found_seek is None:
            return UrlOnly(found_url, lines_scanned)
        return UrlAndSeek(found_url, found_seek, lines_scanned)


class LogReader:
    """History scan entry point bound to one log file."""

    def __init__(self, path: str, progress_every: int = 100_000) -> None:
        self.log_path = path
        self.progress_every = progress_every

    @classmethod
    def from_latest(cls, log_dir: Optional[str] = None, pattern: str = DEFAULT_PATTERN, **kwargs) -> "LogReader":
        path = find_latest_log(log_dir, pattern)
        if path is None:
            raise LogFileNotFoundError(os.path.join(log_dir or default_log_dir(), pattern))
        return cls(path, **kwargs)

    def get_latest_url_and_seek(self) -> ScanResult:
        return HistoryScanner(self.log_path, progress_every=self.progress_every).scan()


__all__ = ["HistoryScanner", "LogReader"]
