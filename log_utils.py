"""Lightweight logging helper governed by a feature flag."""

from __future__ import annotations

from datetime import datetime, timezone
import os

import config


def log_debug(label: str, message: str) -> None:
    """Append a timestamped line to the debug log when enabled."""
    if not config.LOG_ENABLED:
        return

    directory = os.path.dirname(config.LOG_FILE_PATH)
    if directory:
        os.makedirs(directory, exist_ok=True)

    timestamp = datetime.now(timezone.utc).isoformat(timespec="milliseconds")
    with open(config.LOG_FILE_PATH, "a", encoding="utf-8") as handle:
        handle.write(f"{timestamp} [{label}] {message}\n")
