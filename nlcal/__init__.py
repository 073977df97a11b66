"""
nlcal: extract a calendar event (title, date, optional time span) from a
short natural language string.

Import from this module only; the submodules are implementation details.
"""

from nlcal.event_models import CalendarEvent, DateRange, ParseResult
from nlcal.parser import UNRECOGNIZED_WARNING, parse_natural_language

__all__ = [
    "CalendarEvent",
    "DateRange",
    "ParseResult",
    "UNRECOGNIZED_WARNING",
    "parse_natural_language",
]
