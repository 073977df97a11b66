"""
Event data models for natural-language calendar parsing.
Defines CalendarEvent and ParseResult (parser output) and DateRange (picker input).
"""

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class CalendarEvent:
    """
    Single event derived from a natural language string.
    Dates are ISO "YYYY-MM-DD", times are 24-hour "HH:MM".
    """
    title: str
    date: str
    time: Optional[str] = None
    end_time: Optional[str] = None

    def to_dict(self) -> dict:
        """Wire shape used by display collaborators; unset times are omitted."""
        data = {"title": self.title, "date": self.date}
        if self.time is not None:
            data["time"] = self.time
        if self.end_time is not None:
            data["endTime"] = self.end_time
        return data


@dataclass(frozen=True)
class ParseResult:
    """
    Outcome of one parse call.
    warning is only set when the input was non-blank but had no recognizable date.
    """
    events: Tuple[CalendarEvent, ...] = ()
    warning: Optional[str] = None

    def to_dict(self) -> dict:
        data = {"events": [event.to_dict() for event in self.events]}
        if self.warning is not None:
            data["warning"] = self.warning
        return data


@dataclass(frozen=True)
class DateRange:
    """Inclusive range of ISO dates selected in the picker."""
    start: str
    end: str

    def __post_init__(self):
        # ISO strings compare chronologically
        if self.start > self.end:
            raise ValueError(f"DateRange start {self.start} is after end {self.end}")
