"""
Events extracted from the VRChat log and the result of a history scan.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Union


@dataclass(frozen=True)
class FoundUrl:
    """An "Attempting to resolve URL" entry and the line it was found on."""

    timestamp: datetime
    url: str
    source_line: int

    def position_at(self, now: Optional[datetime] = None) -> float:
        """Seconds of playback elapsed since the URL started resolving."""
        now = now or datetime.now(self.timestamp.tzinfo)
        return (now - self.timestamp).total_seconds()


@dataclass(frozen=True)
class FoundSeek:
    """A sync/drift correction entry reporting a playback offset in seconds."""

    timestamp: datetime
    seek_offset: float

    def position_at(self, now: Optional[datetime] = None) -> float:
        """Playback position implied at ``now``: the logged offset plus time elapsed since."""
        now = now or datetime.now(self.timestamp.tzinfo)
        return self.seek_offset + (now - self.timestamp).total_seconds()


LogEvent = Union[FoundUrl, FoundSeek]


@dataclass(frozen=True)
class NothingFound:
    lines_scanned: int


@dataclass(frozen=True)
class UrlOnly:
    url: FoundUrl
    lines_scanned: int


@dataclass(frozen=True)
class UrlAndSeek:
    url: FoundUrl
    seek: FoundSeek
    lines_scanned: int


# Every variant carries the resume bookmark for the tailer
ScanResult = Union[NothingFound, UrlOnly, UrlAndSeek]


__all__ = [
    "FoundUrl",
    "FoundSeek",
    "LogEvent",
    "NothingFound",
    "UrlOnly",
    "UrlAndSeek",
    "ScanResult",
]
