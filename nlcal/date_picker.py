"""
Headless date picker model: month grids, single-date/range selection and
pre-seeding from a parse result. Rendering is left to the caller.
"""

import calendar
from dataclasses import dataclass, replace
from datetime import date
from typing import List, Optional, Union

from nlcal.event_models import DateRange, ParseResult

DAY_LABELS = ("Su", "Mo", "Tu", "We", "Th", "Fr", "Sa")
MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


def format_date_str(year: int, month: int, day: int) -> str:
    return f"{year:04d}-{month:02d}-{day:02d}"


def month_grid(year: int, month: int) -> List[List[int]]:
    """
    Sunday-first weeks of day numbers for a month; 0 marks padding cells.
    """
    return calendar.Calendar(firstweekday=calendar.SUNDAY).monthdayscalendar(year, month)


@dataclass(frozen=True)
class RangeSelection:
    """Start/end picked by tapping days; end is only set once a range is complete."""
    start: Optional[str] = None
    end: Optional[str] = None

    def press(self, date_str: str) -> "RangeSelection":
        """
        Apply one tap.

        - Nothing selected, or a completed range: start a new selection.
        - Same day as the start: clear it.
        - Earlier than the start: it becomes the start, the old start the end.
        - Later than the start: complete the range.
        """
        if self.start is None or self.end is not None:
            return RangeSelection(start=date_str)
        if date_str == self.start:
            return RangeSelection()
        if date_str < self.start:
            return RangeSelection(start=date_str, end=self.start)
        return RangeSelection(start=self.start, end=date_str)

    def in_range(self, date_str: str) -> bool:
        """True for days strictly between start and end."""
        if self.start is None or self.end is None:
            return False
        return self.start < date_str < self.end

    def is_selected(self, date_str: str) -> bool:
        return date_str in (self.start, self.end)

    def confirm(self) -> Union[DateRange, str, None]:
        """A DateRange, a single ISO date, or None if nothing was picked."""
        if self.start is not None and self.end is not None:
            return DateRange(start=self.start, end=self.end)
        return self.start


@dataclass(frozen=True)
class PickerState:
    year: int
    month: int
    selection: RangeSelection = RangeSelection()

    @classmethod
    def open_for(cls, result: ParseResult, today: date) -> "PickerState":
        """Navigate to the parsed event's month and pre-select its date."""
        if result.events:
            parsed = date.fromisoformat(result.events[0].date)
            return cls(parsed.year, parsed.month, RangeSelection(start=result.events[0].date))
        return cls(today.year, today.month)

    def prev_month(self) -> "PickerState":
        if self.month == 1:
            return replace(self, year=self.year - 1, month=12)
        return replace(self, month=self.month - 1)

    def next_month(self) -> "PickerState":
        if self.month == 12:
            return replace(self, year=self.year + 1, month=1)
        return replace(self, month=self.month + 1)

    def press(self, day: int) -> "PickerState":
        return replace(self, selection=self.selection.press(format_date_str(self.year, self.month, day)))

    @property
    def title(self) -> str:
        return f"{MONTH_NAMES[self.month - 1]} {self.year}"

    def weeks(self) -> List[List[int]]:
        return month_grid(self.year, self.month)
