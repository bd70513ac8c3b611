"""
Line-counted tailing of a growing log file using watchdog file system events.

The tailer skips the lines a history scan has already consumed, delivers what
follows, then blocks on a queue fed by a watchdog observer. Every notification
re-reads the file from the start and delivers only lines numbered above the
last one delivered, so coalesced events never lose or repeat a line.
"""

from __future__ import annotations

import os
import queue
import threading
from dataclasses import dataclass
from typing import BinaryIO, Callable, Optional

from watchdog.events import (
    EVENT_TYPE_CLOSED_NO_WRITE,
    EVENT_TYPE_DELETED,
    EVENT_TYPE_MOVED,
    EVENT_TYPE_OPENED,
    FileSystemEvent,
    FileSystemEventHandler,
)
from watchdog.observers import Observer

from ..utils.errors import LogFileNotFoundError, LogFileTruncatedError, WatchError
from ..utils.logger import logger
from .lines import iter_complete_lines


LineCallback = Callable[[str, int], None]

_STOP = object()

# Our own reads must not wake the tail loop
_IGNORED_EVENT_TYPES = {EVENT_TYPE_OPENED, EVENT_TYPE_CLOSED_NO_WRITE}


def _normalize(path) -> str:
    return os.path.realpath(os.fsdecode(path)) if path else ""


class LogFileEventHandler(FileSystemEventHandler):
    """Forwards events about one file into a queue; runs on the observer thread."""

    def __init__(self, path: str, events: "queue.Queue[object]") -> None:
        self.path = path
        self.events = events
        super().__init__()

    def on_any_event(self, event: FileSystemEvent) -> None:
        if event.is_directory or event.event_type in _IGNORED_EVENT_TYPES:
            return
        src = _normalize(event.src_path)
        dest = _normalize(getattr(event, "dest_path", ""))
        if src == self.path and event.event_type in (EVENT_TYPE_DELETED, EVENT_TYPE_MOVED):
            self.events.put(WatchError(f"Watched log file was removed: {self.path}"))
        elif self.path in (src, dest):
            self.events.put(event)


@dataclass
class TailSession:
    """State of one running tail: file handle, observer and line bookmark."""

    path: str
    handle: BinaryIO
    observer: Observer
    last_delivered: int = 0


class IncrementalTailer:
    """Follows one file; not shareable between threads or callers."""

    def __init__(self, path: str) -> None:
        self.path = _normalize(path)
        self.ready = threading.Event()
        self.session: Optional[TailSession] = None
        self._events: "queue.Queue[object]" = queue.Queue()

    def stop(self) -> None:
        """Make a running ``follow`` return after the delivery in progress."""
        self._events.put(_STOP)

    def _subscribe(self) -> Observer:
        handler = LogFileEventHandler(self.path, self._events)
        observer = Observer()
        observer.daemon = True
        try:
            observer.schedule(handler, os.path.dirname(self.path), recursive=False)
            observer.start()
        except OSError as exc:
            raise WatchError(f"Failed to watch {self.path}: {exc}") from exc
        return observer

    def _skip_lines(self, handle: BinaryIO, n: int) -> None:
        skipped = 0
        for _ in iter_complete_lines(handle):
            skipped += 1
            if skipped == n:
                return
        raise LogFileTruncatedError(self.path, skipped, n)

    def _deliver(self, session: TailSession, on_line: LineCallback, lines) -> None:
        for line in lines:
            session.last_delivered += 1
            on_line(line, session.last_delivered)

    def _rescan(self, session: TailSession, on_line: LineCallback) -> None:
        session.handle.seek(0)
        for line_number, line in enumerate(iter_complete_lines(session.handle), start=1):
            if line_number <= session.last_delivered:
                continue
            session.last_delivered = line_number
            on_line(line, line_number)

    def _next_batch(self) -> bool:
        """Block until at least one notification arrives; drain any others queued with it.

        Returns False when stop() was called.
        """
        items = [self._events.get()]
        while True:
            try:
                items.append(self._events.get_nowait())
            except queue.Empty:
                break
        for item in items:
            if item is _STOP:
                return False
            if isinstance(item, WatchError):
                raise item
        return True

    def follow(self, start_after_line: int, on_line: LineCallback) -> None:
        """Deliver every line after ``start_after_line``, then keep delivering as the file grows.

        Blocks until stop() is called; raises on any fatal condition.
        """
        if not os.path.isfile(self.path):
            raise LogFileNotFoundError(self.path)

        # Subscribe before opening so nothing appended in between is missed
        observer = self._subscribe()
        try:
            with open(self.path, "rb") as handle:
                session = TailSession(path=self.path, handle=handle, observer=observer)
                self.session = session
                if start_after_line:
                    self._skip_lines(handle, start_after_line)
                session.last_delivered = start_after_line
                logger.debug("Tailing {} after line {}", self.path, start_after_line)

                self._deliver(session, on_line, iter_complete_lines(handle))
                self.ready.set()

                while self._next_batch():
                    self._rescan(session, on_line)
        finally:
            self.ready.set()
            observer.stop()
            observer.join(timeout=5)


__all__ = [
    "IncrementalTailer",
    "LogFileEventHandler",
    "TailSession",
    "LineCallback",
]
