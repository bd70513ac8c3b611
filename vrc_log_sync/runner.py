"""
Scan a VRChat log for the last played URL and sync offset, then follow it live.

Usage:
  PYTHONPATH=. python -m vrc_log_sync.runner
  PYTHONPATH=. python -m vrc_log_sync.runner --log-file /path/to/output_log_2024-04-14_21-20-01.txt --scan-only
"""

from __future__ import annotations

import argparse
import os
import sys
from typing import List, Optional

from .ingestion.coordinator import LogWatcher
from .ingestion.history_scan import HistoryScanner
from .ingestion.log_locator import default_log_dir, find_latest_log
from .models.events import FoundSeek, FoundUrl, NothingFound, ScanResult, UrlAndSeek, UrlOnly
from .utils.config import CONFIG_PATH, Settings, load_settings
from .utils.errors import LogFileNotFoundError, LogSyncError
from .utils.event_log import EventLog
from .utils.logger import logger, setup_logging


def resolve_log_path(settings: Settings, log_file: Optional[str] = None, log_dir: Optional[str] = None) -> str:
    """Explicit file first (CLI, then config), otherwise the newest log in the log directory."""
    explicit = log_file or settings.log.file
    if explicit:
        return explicit
    directory = log_dir or settings.log.dir or default_log_dir()
    path = find_latest_log(directory, settings.log.pattern)
    if path is None:
        raise LogFileNotFoundError(os.path.join(directory, settings.log.pattern))
    return path


class EventReporter:
    """Event sink for the run loop: logs every event and journals it when configured."""

    def __init__(self, journal: Optional[EventLog] = None) -> None:
        self.journal = journal
        self.last_url: Optional[FoundUrl] = None
        self.last_seek: Optional[FoundSeek] = None

    def on_found_url(self, found_url: FoundUrl) -> None:
        self.last_url = found_url
        self.last_seek = None
        logger.info("Found URL {} at {} (line {})", found_url.url, found_url.timestamp.isoformat(), found_url.source_line)
        if self.journal is not None:
            self.journal.append(found_url)

    def on_found_seek(self, found_seek: FoundSeek) -> None:
        self.last_seek = found_seek
        logger.info(
            "Found seek to {:.2f}s at {} (now at {:.2f}s)",
            found_seek.seek_offset,
            found_seek.timestamp.isoformat(),
            found_seek.position_at(),
        )
        if self.journal is not None:
            self.journal.append(found_seek)

    def report_scan(self, result: ScanResult) -> None:
        if isinstance(result, NothingFound):
            logger.info("No URL found in {} scanned lines", result.lines_scanned)
            return
        if isinstance(result, (UrlOnly, UrlAndSeek)):
            self.on_found_url(result.url)
        if isinstance(result, UrlAndSeek):
            self.on_found_seek(result.seek)
        elif self.last_url is not None:
            logger.info("No seek since the URL; playback would be at {:.2f}s", self.last_url.position_at())
        logger.info("History scan finished after {} lines", result.lines_scanned)


def run(
    settings: Settings,
    log_file: Optional[str] = None,
    log_dir: Optional[str] = None,
    scan_only: bool = False,
    reporter: Optional[EventReporter] = None,
) -> ScanResult:
    path = resolve_log_path(settings, log_file, log_dir)
    if reporter is None:
        journal = EventLog(settings.events.path) if settings.events.path else None
        reporter = EventReporter(journal)

    result = HistoryScanner(path, progress_every=settings.scan.progress_every).scan()
    reporter.report_scan(result)
    if scan_only:
        return result

    logger.info("Watching {} for new entries", path)
    LogWatcher(path).watch(result.lines_scanned, reporter.on_found_url, reporter.on_found_seek)
    return result


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Follow a VRChat log for video URL and sync events")
    ap.add_argument("--config", default=CONFIG_PATH, help="Path to config.yaml")
    ap.add_argument("--log-file", default=None, help="Log file to read instead of the newest one")
    ap.add_argument("--log-dir", default=None, help="Directory to pick the newest log file from")
    ap.add_argument("--scan-only", action="store_true", help="Stop after the history scan")
    ap.add_argument("--verbose", action="store_true", help="Log at DEBUG level")
    args = ap.parse_args(argv)

    settings = load_settings(args.config)
    setup_logging(settings.logging.dir, "DEBUG" if args.verbose else settings.logging.level)
    try:
        run(settings, log_file=args.log_file, log_dir=args.log_dir, scan_only=args.scan_only)
    except LogSyncError as exc:
        logger.error("{}: {}", type(exc).__name__, exc)
        return 1
    except KeyboardInterrupt:
        logger.info("Interrupted")
    return 0


if __name__ == "__main__":
    sys.exit(main())
