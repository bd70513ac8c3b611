"""
Recognizers for the two VRChat log line shapes this project cares about.

URL resolution, emitted by the video player for every URL it loads:

    2024.04.14 21:25:34 Log        -  [Video Playback] Attempting to resolve URL 'http://example.com/mystream/index.m3u8'

ProTV sync corrections, emitted whenever the TV moves playback to a new offset:

    2024.04.22 17:55:53 Log        -  [AT INFO    	TVManager (Theatre 1 TVManager)] Sync enforcement. Updating to 116.47
    2024.05.09 19:11:19 Log        -  [AT DEBUG 	TVManager (Theatre 1 TVManager)] Paused drift threshold exceeded. Updating to 64.8041

"Attempting to resolve URL" is the earliest of the video player's entries for a
new URL, which makes it the best anchor for playback start.
"""

from __future__ import annotations

import re
from typing import List, Optional

from ..models.events import FoundSeek, FoundUrl, LogEvent
from ..utils.errors import SeekOffsetParseError
from .timestamps import parse_timestamp


URL_REGEX = re.compile(
    r"^([0-9.: ]+) Log +- +\[Video Playback\] Attempting to resolve URL '(https?://\S+)'"
)

SEEK_REGEX = re.compile(
    r"^([0-9.: ]+) Log +- +\[AT (INFO|DEBUG)[ \t]+TVManager \(.*\)\] "
    r"(Sync enforcement|Paused drift threshold exceeded)\. Updating to ([0-9.]+)$"
)


def match_url_line(line: str, line_number: int) -> Optional[FoundUrl]:
    """Return a FoundUrl if ``line`` is a URL resolution entry."""
    m = URL_REGEX.match(line)
    if not m:
        return None
    return FoundUrl(timestamp=parse_timestamp(m.group(1)), url=m.group(2), source_line=line_number)


def match_seek_line(line: str) -> Optional[FoundSeek]:
    """Return a FoundSeek if ``line`` is a ProTV sync correction."""
    m = SEEK_REGEX.match(line)
    if not m:
        return None
    timestamp = parse_timestamp(m.group(1))
    raw_offset = m.group(4)
    try:
        seek_offset = float(raw_offset)
    except ValueError as exc:
        # e.g. "1.2.3" satisfies the character class
        raise SeekOffsetParseError(f"Failed to parse seek offset as float: {raw_offset!r}") from exc
    return FoundSeek(timestamp=timestamp, seek_offset=seek_offset)


def extract_events(line: str, line_number: int) -> List[LogEvent]:
    """Run both recognizers on one line; URL event first, then seek event."""
    events: List[LogEvent] = []
    found_url = match_url_line(line, line_number)
    if found_url is not None:
        events.append(found_url)
    found_seek = match_seek_line(line)
    if found_seek is not None:
        events.append(found_seek)
    return events


__all__ = [
    "URL_REGEX",
    "SEEK_REGEX",
    "match_url_line",
    "match_seek_line",
    "extract_events",
]
