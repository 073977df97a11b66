"""
Event normalizer for converting CalendarEvent to NormalizedEvent.
Turns ISO date and "HH:MM" strings into system timezone datetime objects.
"""

from datetime import date, datetime, time, timedelta
from typing import Optional

from dateutil import tz as dateutil_tz

from nlcal.event_models import CalendarEvent
from nlcal.logging_helper import Log

DEFAULT_DURATION_MINUTES = 60


class NormalizedEvent:
    """
    Calendar event with concrete datetimes.
    Ready for ICS generation or a Google Calendar link.
    """

    def __init__(
        self,
        title: str,
        start_time: datetime,
        end_time: datetime,
        all_day: bool = False,
    ):
        self.title = title
        self.start_time = start_time  # System timezone datetime
        self.end_time = end_time      # System timezone datetime
        self.all_day = all_day

    def duration_minutes(self) -> int:
        """Get event duration in minutes."""
        delta = self.end_time - self.start_time
        return int(delta.total_seconds() / 60)


def _parse_clock(value: str) -> time:
    hours, minutes = value.split(":")
    return time(int(hours), int(minutes))


def normalize(event: CalendarEvent, duration_minutes: Optional[int] = None) -> Optional[NormalizedEvent]:
    """
    Normalize a CalendarEvent to a NormalizedEvent in the system timezone.

    Args:
        event: CalendarEvent from the parser
        duration_minutes: Length used when the event has no end time

    Returns:
        NormalizedEvent, or None if the event's date/time cannot be read
    """
    Log.section("Event Normalizer")
    Log.info(f"Normalizing event: {event.title}")

    if duration_minutes is None:
        duration_minutes = DEFAULT_DURATION_MINUTES

    system_tz = dateutil_tz.tzlocal()

    try:
        day = date.fromisoformat(event.date)

        if event.time is None:
            start_datetime = datetime.combine(day, time(0, 0), tzinfo=system_tz)
            normalized = NormalizedEvent(
                title=event.title,
                start_time=start_datetime,
                end_time=start_datetime + timedelta(days=1),
                all_day=True,
            )
        else:
            start_datetime = datetime.combine(day, _parse_clock(event.time), tzinfo=system_tz)
            if event.end_time is not None:
                end_datetime = datetime.combine(day, _parse_clock(event.end_time), tzinfo=system_tz)
                # "from 10pm to 1am" ends the following day
                if end_datetime <= start_datetime:
                    end_datetime += timedelta(days=1)
            else:
                end_datetime = start_datetime + timedelta(minutes=duration_minutes)
            normalized = NormalizedEvent(
                title=event.title,
                start_time=start_datetime,
                end_time=end_datetime,
            )

    except (ValueError, OverflowError) as e:
        Log.error(f"Normalization error: {e}")
        Log.kv({"stage": "normalize", "result": "failed", "error": str(e)})
        return None

    Log.kv({
        "stage": "normalize",
        "result": "success",
        "start": normalized.start_time.isoformat(),
        "end": normalized.end_time.isoformat(),
        "all_day": normalized.all_day,
        "duration_min": normalized.duration_minutes(),
    })
    return normalized
