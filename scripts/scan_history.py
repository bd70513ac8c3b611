from __future__ import annotations

"""
Print the last URL and seek found in a VRChat log as JSON, plus the line count
a live tail would resume from.

Usage:
  PYTHONPATH=. python scripts/scan_history.py
  PYTHONPATH=. python scripts/scan_history.py --log-file /path/to/output_log.txt
"""

import argparse
import json
import sys

from vrc_log_sync.ingestion.history_scan import HistoryScanner, LogReader
from vrc_log_sync.models.events import UrlAndSeek, UrlOnly
from vrc_log_sync.utils.errors import LogSyncError
from vrc_log_sync.utils.event_log import event_to_record


def main() -> int:
    ap = argparse.ArgumentParser()
    ap.add_argument("--log-file", default=None, help="Log file to scan instead of the newest one")
    ap.add_argument("--log-dir", default=None, help="Directory to pick the newest log file from")
    args = ap.parse_args()

    try:
        if args.log_file:
            result = HistoryScanner(args.log_file).scan()
        else:
            result = LogReader.from_latest(args.log_dir).get_latest_url_and_seek()
    except LogSyncError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    out = {"lines_scanned": result.lines_scanned, "url": None, "seek": None}
    if isinstance(result, (UrlOnly, UrlAndSeek)):
        out["url"] = event_to_record(result.url)
    if isinstance(result, UrlAndSeek):
        out["seek"] = event_to_record(result.seek)
    print(json.dumps(out, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
