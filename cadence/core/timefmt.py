# cadence/core/timefmt.py
# Clock-style formatting for elapsed, remaining & deviation seconds

from __future__ import annotations

import math


# round to nearest whole second, ties toward +infinity
def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


# * MM:SS (H:MM:SS past an hour), clamped at zero
def format_clock(seconds: float) -> str:
    total = max(0, math.floor(seconds))
    hours, rest = divmod(total, 3600)
    minutes, secs = divmod(rest, 60)
    if hours > 0:
        return f"{hours}:{minutes:02d}:{secs:02d}"
    return f"{minutes:02d}:{secs:02d}"


# * MM:SS w/ leading minus once the section runs into overtime
def format_remaining(seconds: float) -> str:
    negative = seconds < 0
    total = abs(math.floor(seconds))
    minutes, secs = divmod(total, 60)
    return f"{'-' if negative else ''}{minutes:02d}:{secs:02d}"


# * Signed +MM:SS / -MM:SS after rounding to whole seconds
def format_deviation(seconds: float) -> str:
    value = round_half_up(seconds)
    sign = "+" if value >= 0 else "-"
    minutes, secs = divmod(abs(value), 60)
    return f"{sign}{minutes:02d}:{secs:02d}"
