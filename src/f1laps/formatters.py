"""Formatting helpers for console output."""

from __future__ import annotations

import math

NOT_AVAILABLE = "N/A"
EQUAL = "Equal"


def format_lap_time(seconds: float | None) -> str:
    """Format seconds as m:ss.fff, or 'N/A' when unset, zero or infinite."""
    if seconds is None or not math.isfinite(seconds) or seconds == 0.0:
        return NOT_AVAILABLE
    mins, secs = divmod(round(seconds, 3), 60)
    return f"{int(mins)}:{secs:06.3f}"


def format_sector_time(seconds: float | None) -> str:
    """Format seconds as s.fffs, or 'N/A' when unset, zero or NaN."""
    if seconds is None or math.isnan(seconds) or seconds == 0.0:
        return NOT_AVAILABLE
    return f"{seconds:.3f}s"


def format_difference(delta: float) -> str:
    """Format a signed time difference, 'Equal' when it rounds to zero."""
    if abs(delta) < 0.0005:
        return EQUAL
    return f"{delta:+.3f}s"
