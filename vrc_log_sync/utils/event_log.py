"""
Append-only JSONL journal of found URL and seek events.
"""

from __future__ import annotations

import json
import os
from typing import Dict

from ..models.events import FoundUrl, LogEvent


def event_to_record(event: LogEvent) -> Dict[str, object]:
    if isinstance(event, FoundUrl):
        return {
            "type": "url",
            "timestamp": event.timestamp.isoformat(),
            "url": event.url,
            "source_line": event.source_line,
        }
    return {
        "type": "seek",
        "timestamp": event.timestamp.isoformat(),
        "seek_offset": event.seek_offset,
    }


class EventLog:
    def __init__(self, path: str) -> None:
        self.path = path

    def append(self, event: LogEvent) -> None:
        os.makedirs(os.path.dirname(self.path) or ".", exist_ok=True)
        with open(self.path, "a", encoding="utf-8") as f:
            f.write(json.dumps(event_to_record(event), ensure_ascii=False) + "\n")


__all__ = ["EventLog", "event_to_record"]
