"""Run artifact helpers for extraction reporting."""

from __future__ import annotations

import json
import os
from datetime import datetime, timezone
from typing import Any

DEFAULT_REPORT_DIR = "output/run_reports"


def build_run_report(
    status: str,
    source: str,
    output_file: str,
    stats: dict[str, Any],
    options: dict[str, Any],
    duration_seconds: float,
) -> dict[str, Any]:
    """Assemble the report payload of one extraction run."""
    return {
        "status": status,
        "source": source,
        "output_file": output_file,
        "stats": dict(stats),
        "options": dict(options),
        "duration_seconds": round(duration_seconds, 3),
    }


def write_run_report(
    report: dict[str, Any],
    run_id: str,
    output_dir: str = DEFAULT_REPORT_DIR,
) -> str:
    """Write a JSON run report and return its path."""
    os.makedirs(output_dir, exist_ok=True)
    payload = dict(report)
    payload.setdefault("run_id", run_id)
    payload.setdefault("timestamp_utc", datetime.now(timezone.utc).isoformat())
    path = os.path.join(output_dir, f"{run_id}.json")
    with open(path, "w", encoding="utf-8") as f:
        json.dump(payload, f, indent=2, sort_keys=True)
    return path
