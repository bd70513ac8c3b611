"""
Exception hierarchy for scanning and tailing.

Every condition here is fatal for a run: scanning and tailing code raises, and
the top-level run loop reports the error once and exits non-zero.
"""

from __future__ import annotations


class LogSyncError(Exception):
    """Base exception for fatal log scanning and tailing conditions."""


class LogFileNotFoundError(LogSyncError):
    """Raised when the log directory or log file does not exist."""

    def __init__(self, path: str):
        super().__init__(f"Log file not found: {path}")
        self.path = path


class LogFileTruncatedError(LogSyncError):
    """Raised when the file holds fewer lines than the tailer must skip."""

    def __init__(self, path: str, lines_available: int, lines_required: int):
        super().__init__(
            f"File is smaller than the given line number. {lines_available} < {lines_required} ({path})"
        )
        self.path = path
        self.lines_available = lines_available
        self.lines_required = lines_required


class TimestampParseError(LogSyncError, ValueError):
    """Raised when a captured timestamp is malformed or not a valid local time."""


class SeekOffsetParseError(LogSyncError, ValueError):
    """Raised when a captured seek offset is not a float."""


class WatchError(LogSyncError):
    """Raised when the filesystem watch cannot be set up or breaks."""


__all__ = [
    "LogSyncError",
    "LogFileNotFoundError",
    "LogFileTruncatedError",
    "TimestampParseError",
    "SeekOffsetParseError",
    "WatchError",
]
