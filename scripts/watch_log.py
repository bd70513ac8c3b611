from __future__ import annotations

"""
Scan the newest VRChat log, then follow it and report URL/seek events.

Usage:
  PYTHONPATH=. python scripts/watch_log.py --verbose
"""

import sys

from vrc_log_sync.runner import main


if __name__ == "__main__":
    sys.exit(main())
