"""
Plain-text rendering of a ParseResult.
"""

from typing import List

from nlcal.event_models import CalendarEvent, ParseResult

EMPTY_STATE = "No events found."


def event_lines(event: CalendarEvent) -> List[str]:
    meta = event.date
    if event.time is not None:
        meta += f" · {event.time}"
        if event.end_time is not None:
            meta += f"–{event.end_time}"
    return [event.title, meta]


def render_result(result: ParseResult) -> List[str]:
    """Title and date/time lines per event, else the warning or the empty state."""
    if not result.events:
        return [result.warning or EMPTY_STATE]
    lines = []
    for event in result.events:
        lines.extend(event_lines(event))
    return lines
