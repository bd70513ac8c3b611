from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace
from typing import Callable, List

import pytest


def url_line(url: str = "http://example.com/s.m3u8", ts: str = "2024.04.14 21:25:34") -> str:
    return f"{ts} Log        -  [Video Playback] Attempting to resolve URL '{url}'"


def seek_line(offset: str = "116.47", ts: str = "2024.04.22 17:55:53", level: str = "INFO") -> str:
    return f"{ts} Log        -  [AT {level}\tTVManager (Theatre 1)] Sync enforcement. Updating to {offset}"


def noise_line(n: int = 0) -> str:
    return f"2024.04.14 21:25:{n % 60:02d} Log        -  [Behaviour] Unrelated entry {n}"


@pytest.fixture
def log_lines() -> SimpleNamespace:
    """Builders for the log line shapes used across tests."""
    return SimpleNamespace(url=url_line, seek=seek_line, noise=noise_line)


@pytest.fixture
def make_log(tmp_path: Path) -> Callable[..., Path]:
    def _make(content: List[str], name: str = "output_log_2024-04-14_21-20-01.txt", trailing_newline: bool = True) -> Path:
        path = tmp_path / name
        text = "\n".join(content)
        if content and trailing_newline:
            text += "\n"
        path.write_bytes(text.encode("utf-8"))
        return path

    return _make
