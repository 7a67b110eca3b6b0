# core/time_format.py
from __future__ import annotations

import math
from typing import Any, Iterable, Mapping


def parse_duration(value: str | None) -> int:
    """
    Converts a "m:ss" (or "h:mm:ss") string into seconds.
    Missing, unreadable or negative parts count as zero instead of raising.
    """
    if not value:
        return 0

    total = 0
    for part in str(value).strip().split(":"):
        try:
            number = int(part)
        except ValueError:
            number = 0
        total = total * 60 + max(0, number)
    return total


def track_time(track: Any) -> str | None:
    # Plain records carry "time"; catalog tracks carry "duration".
    if isinstance(track, Mapping):
        return track.get("time") or track.get("duration")
    return getattr(track, "time", None) or getattr(track, "duration", None)


def aggregate_duration(tracks: Iterable[Any] | None) -> str:
    if not tracks:
        return "0 min"

    total_seconds = sum(parse_duration(track_time(t)) for t in tracks)

    hours = total_seconds // 3600
    minutes = (total_seconds % 3600) // 60

    if hours > 0:
        label = "hora" if hours == 1 else "horas"
        minutes_part = f"{minutes} min" if minutes > 0 else ""
        return f"{hours} {label} {minutes_part}".strip()
    return f"{minutes} min"


def format_clock(seconds: float | None) -> str:
    if seconds is None or not math.isfinite(seconds) or seconds < 0:
        seconds = 0
    s = int(seconds)
    m = s // 60
    s = s % 60
    return f"{m}:{s:02d}"
