from __future__ import annotations

from typing import BinaryIO, Iterator


def decode_line(raw: bytes) -> str:
    """Strip the line terminator (``\\n`` or ``\\r\\n``) and decode leniently."""
    if raw.endswith(b"\n"):
        raw = raw[:-1]
    if raw.endswith(b"\r"):
        raw = raw[:-1]
    return raw.decode("utf-8", errors="replace")


def iter_complete_lines(f: BinaryIO) -> Iterator[str]:
    """Yield newline-terminated lines from the current position of a binary handle.

    Lines are split on ``\\n`` only. A partial final line (still being written)
    ends iteration without being yielded.
    """
    while True:
        raw = f.readline()
        if not raw.endswith(b"\n"):
            return
        yield decode_line(raw)


__all__ = ["decode_line", "iter_complete_lines"]
