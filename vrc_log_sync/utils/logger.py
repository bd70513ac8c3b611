from __future__ import annotations

import os
import sys

from loguru import logger


def setup_logging(log_dir: str, level: str = "INFO") -> None:
    os.makedirs(log_dir, exist_ok=True)
    logger.remove()
    logger.add(sys.stderr, level=level)
    logger.add(os.path.join(log_dir, "vrc_log_sync.log"), rotation="10 MB", retention=10, level=level)


__all__ = ["logger", "setup_logging"]
