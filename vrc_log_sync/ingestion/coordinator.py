from __future__ import annotations

import os
from typing import Callable, Optional

from ..models.events import FoundSeek, FoundUrl
from ..preprocessing.patterns import extract_events
from ..utils.errors import LogFileNotFoundError
from .log_locator import DEFAULT_PATTERN, default_log_dir, find_latest_log
from .tailer import IncrementalTailer


UrlCallback = Callable[[FoundUrl], None]
SeekCallback = Callable[[FoundSeek], None]


def dispatch_line(line: str, line_number: int, on_found_url: UrlCallback, on_found_seek: SeekCallback) -> None:
    """Run both recognizers on one raw line and hand each match to its callback."""
    for event in extract_events(line, line_number):
        if isinstance(event, FoundUrl):
            on_found_url(event)
        else:
            on_found_seek(event)


class LogWatcher:
    """Live URL/seek events from one log file, starting after a history scan's bookmark."""

    def __init__(self, path: str) -> None:
        self.log_path = path
        self.tailer = IncrementalTailer(path)

    @classmethod
    def from_latest(cls, log_dir: Optional[str] = None, pattern: str = DEFAULT_PATTERN) -> "LogWatcher":
        path = find_latest_log(log_dir, pattern)
        if path is None:
            raise LogFileNotFoundError(os.path.join(log_dir or default_log_dir(), pattern))
        return cls(path)

    def watch(self, start_after_line: int, on_found_url: UrlCallback, on_found_seek: SeekCallback) -> None:
        self.tailer.follow(
            start_after_line,
            lambda line, line_number: dispatch_line(line, line_number, on_found_url, on_found_seek),
        )

    def stop(self) -> None:
        self.tailer.stop()


def watch_log(path: str, start_after_line: int, on_found_url: UrlCallback, on_found_seek: SeekCallback) -> None:
    LogWatcher(path).watch(start_after_line, on_found_url, on_found_seek)


__all__ = ["LogWatcher", "watch_log", "dispatch_line", "UrlCallback", "SeekCallback"]
