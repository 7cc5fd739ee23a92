"""Formatting helpers for lap times and deltas."""

from __future__ import annotations

import math
from datetime import datetime, timezone


def format_seconds(seconds: float | None) -> str:
    """Format seconds as s.fff with a trailing 's', or '—' if unknown."""
    if seconds is None or not math.isfinite(seconds):
        return "—"
    return f"{seconds:.3f}s"


def format_delta(delta: float | None) -> str:
    """Format a signed delta as +s.fffs / −s.fffs, or '—' if unknown."""
    if delta is None or math.isnan(delta):
        return "—"
    if delta == 0:
        sign = ""
    elif delta > 0:
        sign = "+"
    else:
        sign = "−"
    return f"{sign}{abs(delta):.3f}s"


def format_timestamp(timestamp_ms: int | None) -> str:
    """Format an epoch-millisecond timestamp as a UTC date-time string."""
    if timestamp_ms is None:
        return "Unknown time"
    moment = datetime.fromtimestamp(timestamp_ms / 1000, tz=timezone.utc)
    return moment.strftime("%Y-%m-%d %H:%M:%S")
