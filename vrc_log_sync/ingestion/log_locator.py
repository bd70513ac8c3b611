"""
Locating the VRChat log directory and its most recent log file.

VRChat names logs ``output_log_YYYY-MM-DD_HH-MM-SS.txt``, so the newest file is
the lexicographically greatest name.
"""

from __future__ import annotations

import fnmatch
import os
from typing import Iterator, Optional

from ..utils.logger import logger


DEFAULT_PATTERN = "output_log_*.txt"

# VRChat (app 438100) running under Steam's Proton
_PROTON_LOG_DIR = (
    ".steam/steam/steamapps/compatdata/438100/pfx/drive_c/users/steamuser/AppData/LocalLow/VRChat/VRChat"
)


def default_log_dir() -> str:
    return os.path.join(os.environ.get("HOME", ""), _PROTON_LOG_DIR)


def _iter_log_files(log_dir: str, pattern: str) -> Iterator[str]:
    try:
        entries = list(os.scandir(log_dir))
    except (FileNotFoundError, NotADirectoryError):
        logger.debug("Log directory {} does not exist", log_dir)
        return
    for entry in entries:
        if entry.is_file() and fnmatch.fnmatchcase(entry.name, pattern):
            yield entry.path


def find_latest_log(log_dir: Optional[str] = None, pattern: str = DEFAULT_PATTERN) -> Optional[str]:
    """Return the path of the newest log file in ``log_dir``, or None if there is none."""
    log_dir = log_dir or default_log_dir()
    latest: Optional[str] = None
    for path in _iter_log_files(log_dir, pattern):
        if latest is None or os.path.basename(path) > os.path.basename(latest):
            latest = path
    return latest


__all__ = ["default_log_dir", "find_latest_log", "DEFAULT_PATTERN"]
