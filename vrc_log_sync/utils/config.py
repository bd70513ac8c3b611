from __future__ import annotations

import os
from typing import Any, Dict, Optional

import yaml
from pydantic import BaseModel, Field


class LogSourceConfig(BaseModel):
    dir: Optional[str] = None
    file: Optional[str] = None
    pattern: str = "output_log_*.txt"


class ScanConfig(BaseModel):
    progress_every: int = Field(default=100_000, gt=0)


class LoggingConfig(BaseModel):
    dir: str = "logs"
    level: str = "INFO"


class EventsConfig(BaseModel):
    path: Optional[str] = None


class Settings(BaseModel):
    """Validated contents of config.yaml."""

    log: LogSourceConfig = Field(default_factory=LogSourceConfig)
    scan: ScanConfig = Field(default_factory=ScanConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    events: EventsConfig = Field(default_factory=EventsConfig)


def load_config(path: str) -> Dict[str, Any]:
    if not os.path.exists(path):
        return {}
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def load_settings(path: str) -> Settings:
    return Settings(**load_config(path))


CONFIG_PATH = os.environ.get(
    "VRC_LOG_SYNC_CONFIG", os.path.join(os.path.dirname(os.path.dirname(__file__)), "..", "config.yaml")
)


__all__ = [
    "Settings",
    "LogSourceConfig",
    "ScanConfig",
    "LoggingConfig",
    "EventsConfig",
    "load_config",
    "load_settings",
    "CONFIG_PATH",
]
