from __future__ import annotations

import os

from vrc_log_sync.ingestion.log_locator import default_log_dir, find_latest_log


def test_find_latest_log_picks_greatest_name(tmp_path):
    for name in [
        "output_log_2024-04-14_21-20-01.txt",
        "output_log_2024-05-01_08-00-00.txt",
        "output_log_2023-12-31_23-59-59.txt",
    ]:
        (tmp_path / name).write_text("")
    assert find_latest_log(str(tmp_path)) == os.path.join(str(tmp_path), "output_log_2024-05-01_08-00-00.txt")


def test_find_latest_log_ignores_other_files(tmp_path):
    (tmp_path / "output_log_2024-04-14_21-20-01.txt").write_text("")
    (tmp_path / "output_log_2099-01-01_00-00-00.log").write_text("")
    (tmp_path / "zzz.txt").write_text("")
    (tmp_path / "output_log_2100-01-01_00-00-00.txt").mkdir()
    assert find_latest_log(str(tmp_path)) == os.path.join(str(tmp_path), "output_log_2024-04-14_21-20-01.txt")


def test_find_latest_log_custom_pattern(tmp_path):
    (tmp_path / "app-1.log").write_text("")
    (tmp_path / "app-2.log").write_text("")
    assert find_latest_log(str(tmp_path), "app-*.log").endswith("app-2.log")


def test_find_latest_log_missing_or_empty_dir(tmp_path):
    assert find_latest_log(str(tmp_path)) is None
    assert find_latest_log(str(tmp_path / "nope")) is None


def test_default_log_dir_is_under_home(monkeypatch, tmp_path):
    monkeypatch.setenv("HOME", str(tmp_path))
    log_dir = default_log_dir()
    assert log_dir.startswith(str(tmp_path))
    assert log_dir.endswith(os.path.join("LocalLow", "VRChat", "VRChat"))
    assert find_latest_log() is None
