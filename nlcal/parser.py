"""
Natural language event parser.

parse_natural_language() is the single entry point: it finds a date (relative
expressions first, then absolute ones), an optional time span and a title,
and returns a ParseResult. It never raises; blank input, unrecognized input
and internal faults are all reported as data.
"""

from datetime import date, datetime
from typing import Optional, Union

from dateutil import tz as dateutil_tz

from nlcal.absolute_dates import resolve_absolute_date
from nlcal.event_models import CalendarEvent, ParseResult
from nlcal.logging_helper import Log
from nlcal.relative_dates import resolve_relative_date
from nlcal.time_span import extract_time_span
from nlcal.title_extractor import derive_title

UNRECOGNIZED_WARNING = "Could not recognise a date in the provided text."


def local_today() -> date:
    """Current calendar date in the system timezone."""
    return datetime.now(dateutil_tz.tzlocal()).date()


def _as_date(today: Union[date, datetime, None]) -> date:
    if today is None:
        return local_today()
    if isinstance(today, datetime):
        return today.date()
    return today


def parse_natural_language(
    text: str,
    today: Union[date, datetime, None] = None,
) -> ParseResult:
    """
    Parse a natural language string into at most one CalendarEvent.

    Args:
        text: Raw user input, e.g. "Team sync tomorrow at 3pm"
        today: Reference date for relative expressions and default years
               (defaults to the local calendar date)

    Returns:
        ParseResult with zero or one events and an optional warning
    """
    trimmed = (text or "").strip()
    if not trimmed:
        Log.kv({"stage": "parse", "result": "empty"})
        return ParseResult()

    try:
        reference = _as_date(today)
        event_date: Optional[str] = resolve_relative_date(trimmed, reference)
        source = "relative"
        if event_date is None:
            event_date = resolve_absolute_date(trimmed, reference)
            source = "absolute"

        if event_date is None:
            Log.kv({"stage": "parse", "result": "unrecognized", "input_len": len(trimmed)})
            return ParseResult(warning=UNRECOGNIZED_WARNING)

        span = extract_time_span(trimmed)
        event = CalendarEvent(
            title=derive_title(trimmed),
            date=event_date,
            time=span.time,
            end_time=span.end_time,
        )
    except Exception as e:
        Log.error(f"Parse error: {e}")
        Log.kv({"stage": "parse", "result": "failed", "error": str(e)})
        return ParseResult(warning=UNRECOGNIZED_WARNING)

    Log.kv({
        "stage": "parse",
        "result": "success",
        "source": source,
        "date": event.date,
        "time": event.time,
        "end_time": event.end_time,
    })
    return ParseResult(events=(event,))
