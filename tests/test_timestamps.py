from __future__ import annotations

import os
import time
from datetime import timedelta

import pytest

from vrc_log_sync.preprocessing.timestamps import parse_timestamp
from vrc_log_sync.utils.errors import TimestampParseError


_BERLIN = "/usr/share/zoneinfo/Europe/Berlin"
needs_tz = pytest.mark.skipif(
    not hasattr(time, "tzset") or not os.path.exists(_BERLIN), reason="needs tzset and the Europe/Berlin zone"
)


@pytest.fixture
def berlin(monkeypatch):
    monkeypatch.setenv("TZ", "Europe/Berlin")
    time.tzset()
    yield
    monkeypatch.undo()
    time.tzset()


@pytest.mark.parametrize(
    "text, expected",
    [
        ("2024.04.14 21:25:34", "2024-04-14 21:25:34"),
        ("2024.01.01 00:00:00", "2024-01-01 00:00:00"),
        ("2023.12.31 23:59:59", "2023-12-31 23:59:59"),
    ],
)
def test_parse_timestamp_keeps_local_wall_clock(text, expected):
    ts = parse_timestamp(text)
    assert ts.tzinfo is not None
    assert ts.astimezone().strftime("%Y-%m-%d %H:%M:%S") == expected


@pytest.mark.parametrize(
    "text",
    [
        "2024-04-14 21:25:34",
        "2024.4.14 21:25:34",
        "2024.04.14 21:25",
        "2024.04.14 21:25:34 ",
        "2024.13.01 00:00:00",
        "2024.02.30 12:00:00",
        "",
    ],
)
def test_parse_timestamp_rejects_malformed_text(text):
    with pytest.raises(TimestampParseError):
        parse_timestamp(text)


@needs_tz
def test_parse_timestamp_uses_host_timezone(berlin):
    assert parse_timestamp("2024.01.15 12:00:00").utcoffset() == timedelta(hours=1)
    assert parse_timestamp("2024.07.15 12:00:00").utcoffset() == timedelta(hours=2)


@needs_tz
def test_parse_timestamp_picks_earliest_instant_in_fold(berlin):
    # 02:30 happens twice on 2024-10-27; the CEST one comes first
    ts = parse_timestamp("2024.10.27 02:30:00")
    assert ts.utcoffset() == timedelta(hours=2)


@needs_tz
def test_parse_timestamp_rejects_time_in_dst_gap(berlin):
    with pytest.raises(TimestampParseError):
        parse_timestamp("2024.03.31 02:30:00")
