"""
Display formatting and parsing for swim times.

Times are stored as float seconds. On screen they read as MM:SS.ss, the
same format the video timestamps use.
"""

import math
import re
from typing import Optional

from .models import InvalidPerformanceError


INVALID_TIME_DISPLAY = "00:00.00"

_TIME_RE = re.compile(r"^(?:(\d+):)?(?:(\d+):)?(\d+(?:\.\d+)?)$")


def format_time(total_seconds: Optional[float]) -> str:
    """
    Format seconds as MM:SS.ss.

    Missing, NaN, infinite or negative input shows as 00:00.00. This is
    a display fallback, not an error signal.
    """
    if (
        total_seconds is None
        or isinstance(total_seconds, bool)
        or not isinstance(total_seconds, (int, float))
        or not math.isfinite(total_seconds)
        or total_seconds < 0
    ):
        return INVALID_TIME_DISPLAY

    minutes = math.floor(total_seconds / 60)
    seconds = total_seconds % 60
    return f"{minutes:02d}:{seconds:05.2f}"


def parse_time(text: str) -> float:
    """
    Parse a typed time into seconds.

    Accepts ``SS.ss``, ``M:SS.ss`` and ``H:MM:SS.ss``. Commas are read
    as decimal points.
    """
    if not isinstance(text, str):
        raise InvalidPerformanceError(f"Time must be text, got {text!r}")

    match = _TIME_RE.match(text.strip().replace(",", "."))
    if not match:
        raise InvalidPerformanceError(f"Unrecognized time: {text!r}")

    first, second, seconds = match.groups()
    if second is not None:
        hours, minutes = int(first), int(second)
    else:
        hours, minutes = 0, int(first or 0)

    return hours * 3600 + minutes * 60 + float(seconds)
