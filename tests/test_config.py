from __future__ import annotations

import pytest
from pydantic import ValidationError

from vrc_log_sync.utils.config import Settings, load_config, load_settings


def test_missing_config_uses_defaults(tmp_path):
    assert load_config(str(tmp_path / "config.yaml")) == {}
    settings = load_settings(str(tmp_path / "config.yaml"))
    assert settings == Settings()
    assert settings.log.pattern == "output_log_*.txt"
    assert settings.scan.progress_every == 100_000
    assert settings.events.path is None


def test_config_file_overrides_defaults(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "log:\n  dir: /data/vrchat\nscan:\n  progress_every: 500\nlogging:\n  level: DEBUG\n",
        encoding="utf-8",
    )
    settings = load_settings(str(path))
    assert settings.log.dir == "/data/vrchat"
    assert settings.log.file is None
    assert settings.scan.progress_every == 500
    assert settings.logging.level == "DEBUG"
    assert settings.logging.dir == "logs"


def test_empty_config_file(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("", encoding="utf-8")
    assert load_settings(str(path)) == Settings()


def test_invalid_values_are_rejected(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("scan:\n  progress_every: 0\n", encoding="utf-8")
    with pytest.raises(ValidationError):
        load_settings(str(path))
