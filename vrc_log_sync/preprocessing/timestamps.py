"""
Timestamp normalization for VRChat log lines.

Log timestamps look like ``2024.04.22 17:55:53`` and carry no zone; they are
written in the local time of the machine running the game.
"""

from __future__ import annotations

import re
from datetime import datetime

from ..utils.errors import TimestampParseError


TIMESTAMP_FORMAT = "%Y.%m.%d %H:%M:%S"

# strptime alone accepts unpadded fields
_TIMESTAMP_RE = re.compile(r"[0-9]{4}\.[0-9]{2}\.[0-9]{2} [0-9]{2}:[0-9]{2}:[0-9]{2}")


def to_local(naive: datetime) -> datetime:
    """Attach the host's local zone to a naive wall-clock time.

    On a DST fold the earlier of the two instants is used. Wall-clock times
    that fall into a DST gap do not exist locally and raise.
    """
    try:
        local = naive.replace(fold=0).astimezone()
    except (OverflowError, OSError) as exc:
        raise TimestampParseError(f"Failed to convert timestamp to local time: {naive}") from exc
    if local.replace(tzinfo=None) != naive:
        raise TimestampParseError(f"Failed to convert timestamp to local time: {naive} does not exist locally")
    return local


def parse_timestamp(text: str) -> datetime:
    """Parse a ``YYYY.MM.DD HH:MM:SS`` log timestamp into an aware local datetime."""
    if not _TIMESTAMP_RE.fullmatch(text):
        raise TimestampParseError(f"Failed to parse timestamp: {text!r}")
    try:
        naive = datetime.strptime(text, TIMESTAMP_FORMAT)
    except ValueError as exc:
        raise TimestampParseError(f"Failed to parse timestamp: {text!r}") from exc
    return to_local(naive)


__all__ = ["parse_timestamp", "to_local", "TIMESTAMP_FORMAT"]
