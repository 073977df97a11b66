"""
Time span extraction: "at 3pm", "at 10:30am", "from 9am to 5pm", "at 14:00".
Times are normalized to 24-hour "HH:MM".
"""

from typing import NamedTuple, Optional

from nlcal.date_patterns import TIME_SPAN_RE


class TimeSpan(NamedTuple):
    time: Optional[str] = None
    end_time: Optional[str] = None


def to_24h(hour: str, minute: Optional[str], meridiem: Optional[str]) -> Optional[str]:
    """
    Normalize one clock reading.

    12pm stays 12, 12am becomes 0, pm adds 12 to 1-11.
    Returns None if the result is not a valid time of day.
    """
    hours = int(hour)
    minutes = int(minute) if minute else 0
    meridiem = meridiem.lower() if meridiem else None

    if meridiem == "pm" and hours < 12:
        hours += 12
    elif meridiem == "am" and hours == 12:
        hours = 0

    if hours > 23 or minutes > 59:
        return None
    return f"{hours:02d}:{minutes:02d}"


def extract_time_span(text: str) -> TimeSpan:
    """
    Find the first "at"/"from" time and an optional "to" end time.

    The end time is normalized on its own and never inherits the start's am/pm.
    """
    match = TIME_SPAN_RE.search(text)
    if not match:
        return TimeSpan()

    start = to_24h(*match.group(1, 2, 3))
    if start is None:
        return TimeSpan()

    end = to_24h(*match.group(4, 5, 6)) if match.group(4) else None
    return TimeSpan(start, end)
