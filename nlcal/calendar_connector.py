"""
Calendar export for parsed events.
Builds RFC5545 ICS files and Google Calendar "eventedit" links from a NormalizedEvent.
"""

import hashlib
import re
from datetime import datetime
from pathlib import Path
from typing import Optional, Union
from urllib.parse import quote

import tzlocal
from dateutil import tz as dateutil_tz

from nlcal import settings_manager
from nlcal.event_models import CalendarEvent
from nlcal.event_normalizer import NormalizedEvent, normalize
from nlcal.logging_helper import Log

PRODID = "-//NLCal//nlcal//EN"
GOOGLE_CALENDAR_URL = "https://calendar.google.com/calendar/r/eventedit"


def _tzinfo_to_iana(dt: datetime) -> Optional[str]:
    """
    Attempt to extract an IANA timezone identifier from a datetime's tzinfo.
    """
    tzinfo = dt.tzinfo
    if tzinfo is None:
        return None

    # zoneinfo exposes .key, pytz exposes .zone
    for attr in ("key", "zone"):
        value = getattr(tzinfo, attr, None)
        if isinstance(value, str) and ("/" in value or value.upper() == "UTC"):
            return value

    value = tzinfo.tzname(dt)
    if isinstance(value, str) and ("/" in value or value.upper() == "UTC"):
        return value

    return None


def _resolve_iana_timezone(normalized_event: NormalizedEvent) -> Optional[str]:
    """
    Resolve an IANA timezone identifier for use with Google Calendar URLs.

    Events in the system timezone are looked up with tzlocal, since dateutil's
    tzlocal only knows abbreviations like "EST". Other events use their own tzinfo.
    """
    if not isinstance(normalized_event.start_time.tzinfo, dateutil_tz.tzlocal):
        return _tzinfo_to_iana(normalized_event.start_time)

    try:
        iana = tzlocal.get_localzone_name()
    except (LookupError, ValueError, OSError) as tz_err:
        Log.warn(f"Failed to determine system IANA timezone: {tz_err}")
        return None
    return iana or None


def _escape_ical_text(text: str) -> str:
    """
    Escape a property value for iCalendar format (RFC5545).
    Escapes backslashes, semicolons, commas and newlines.
    """
    if text is None:
        return ""

    # Backslashes first so later escapes are not doubled
    text = text.replace('\\', '\\\\')
    text = text.replace(';', '\\;')
    text = text.replace(',', '\\,')
    text = text.replace('\n', '\\n')
    return text.replace('\r', '')


def _fold_line(line: str) -> str:
    """
    Fold a full content line (name and value) into 75-octet physical lines.
    Continuation lines start with a space, which counts towards the limit.
    """
    lines = []
    current_line = ""
    for char in line:
        test_line = current_line + char
        if len(test_line.encode('utf-8')) <= 75:
            current_line = test_line
        elif current_line:
            lines.append(current_line)
            current_line = " " + char  # Continuation starts with space
        else:
            current_line = char

    if current_line:
        lines.append(current_line)

    return '\r\n'.join(lines)


def _format_utc(dt: datetime) -> str:
    """
    Format datetime as UTC YYYYMMDDTHHMMSSZ.
    Naive datetimes are taken to be in the system timezone.
    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=dateutil_tz.tzlocal())
    return dt.astimezone(dateutil_tz.tzutc()).strftime('%Y%m%dT%H%M%SZ')


def _format_day(dt: datetime) -> str:
    return dt.strftime('%Y%m%d')


def _event_uid(normalized_event: NormalizedEvent) -> str:
    uid_string = f"{normalized_event.start_time.isoformat()}_{normalized_event.title}"
    return hashlib.md5(uid_string.encode()).hexdigest() + "@nlcal.local"


def build_ics(normalized_event: NormalizedEvent, stamp: Optional[datetime] = None) -> str:
    """
    Build ICS text for a single event.

    Args:
        normalized_event: NormalizedEvent object
        stamp: DTSTAMP value (defaults to now, UTC)

    Returns:
        VCALENDAR document with CRLF line endings
    """
    if stamp is None:
        stamp = datetime.now(dateutil_tz.tzutc())

    ics_lines = [
        "BEGIN:VCALENDAR",
        "VERSION:2.0",
        f"PRODID:{PRODID}",
        "CALSCALE:GREGORIAN",
        "METHOD:PUBLISH",
        "BEGIN:VEVENT",
        f"UID:{_event_uid(normalized_event)}",
    ]
    if normalized_event.all_day:
        ics_lines.append(f"DTSTART;VALUE=DATE:{_format_day(normalized_event.start_time)}")
        ics_lines.append(f"DTEND;VALUE=DATE:{_format_day(normalized_event.end_time)}")
    else:
        ics_lines.append(f"DTSTART:{_format_utc(normalized_event.start_time)}")
        ics_lines.append(f"DTEND:{_format_utc(normalized_event.end_time)}")
    ics_lines.append(_fold_line(f"SUMMARY:{_escape_ical_text(normalized_event.title)}"))
    ics_lines.append(f"DTSTAMP:{_format_utc(stamp)}")
    ics_lines.append("END:VEVENT")
    ics_lines.append("END:VCALENDAR")

    return '\r\n'.join(ics_lines) + '\r\n'


def write_ics(normalized_event: NormalizedEvent, directory: Path) -> Optional[Path]:
    """
    Write an ICS file for the event into directory.

    Returns:
        Path to generated ICS file, or None if writing fails
    """
    Log.info(f"Generating ICS file for: {normalized_event.title}")

    try:
        directory = Path(directory)
        directory.mkdir(parents=True, exist_ok=True)

        safe_title = re.sub(r'[^\w\s-]', '', normalized_event.title)[:50]
        safe_title = re.sub(r'[-\s]+', '_', safe_title).strip('_') or "event"
        ics_path = directory / f"NLCal_{safe_title}_{_format_day(normalized_event.start_time)}.ics"

        # newline="" keeps the CRLF endings intact on every platform
        with open(ics_path, 'w', encoding='utf-8', newline='') as handle:
            handle.write(build_ics(normalized_event))
    except OSError as e:
        Log.error(f"ICS generation failed: {e}")
        Log.kv({"stage": "calendar", "result": "failed", "error": str(e)})
        return None

    Log.info(f"ICS file generated: {ics_path}")
    Log.kv({
        "stage": "calendar",
        "result": "success",
        "ics_path": str(ics_path),
        "event_title": normalized_event.title,
    })
    return ics_path


def build_google_calendar_url(normalized_event: NormalizedEvent) -> str:
    """
    Build a Google Calendar URL with pre-filled event details.

    All-day events use YYYYMMDD/YYYYMMDD; timed events use UTC datetimes.
    """
    if normalized_event.all_day:
        start_str = _format_day(normalized_event.start_time)
        end_str = _format_day(normalized_event.end_time)
    else:
        start_str = _format_utc(normalized_event.start_time)
        end_str = _format_utc(normalized_event.end_time)

    title_encoded = quote(normalized_event.title, safe='')
    url = f"{GOOGLE_CALENDAR_URL}?action=TEMPLATE&dates={start_str}%2F{end_str}&text={title_encoded}"

    # Lets Google Calendar default to the right zone
    iana_timezone = _resolve_iana_timezone(normalized_event)
    if iana_timezone:
        url += f"&ctz={quote(iana_timezone, safe='')}"
    else:
        Log.info("Unable to determine IANA timezone for Google Calendar URL; using account default")

    Log.kv({"stage": "calendar", "result": "success", "calendar_type": "google", "event_title": normalized_event.title})
    return url


def export_event(
    event: CalendarEvent,
    preference: Optional[str] = None,
    directory: Optional[Path] = None,
) -> Union[Path, str, None]:
    """
    Export a parsed event to the user's preferred calendar target.

    Args:
        event: CalendarEvent from the parser
        preference: "ics" or "google"; read from settings when None
        directory: Where ICS files are written (defaults to the current directory)

    Returns:
        Path to the ICS file, the Google Calendar URL, or None on failure
    """
    Log.section("Calendar Connector")

    if preference is None:
        preference = settings_manager.get_preferred_export()
    if preference not in settings_manager.EXPORT_CHOICES:
        raise ValueError(f"Invalid export preference: {preference}")

    normalized = normalize(event, duration_minutes=settings_manager.get_default_duration())
    if normalized is None:
        return None

    if preference == "google":
        return build_google_calendar_url(normalized)
    return write_ics(normalized, directory if directory is not None else Path.cwd())
