"""
Relative date resolution: today/tomorrow/yesterday, day offsets,
next month/year and next <weekday>, all anchored on an explicit "today".
"""

from datetime import date, timedelta
from typing import Optional

from dateutil.relativedelta import FR, MO, SA, SU, TH, TU, WE, relativedelta

from nlcal.date_patterns import (
    AFTER_DAYS_RE,
    BEFORE_DAYS_RE,
    IN_DAYS_RE,
    NEXT_MONTH_RE,
    NEXT_WEEKDAY_RE,
    NEXT_YEAR_RE,
    TODAY_RE,
    TOMORROW_RE,
    WEEKDAY_INDEX,
    YESTERDAY_RE,
)

RELATIVEDELTA_WEEKDAYS = (MO, TU, WE, TH, FR, SA, SU)


def _shift(today: date, delta) -> Optional[date]:
    """Add a timedelta/relativedelta, or None if the result leaves the calendar."""
    try:
        return today + delta
    except (OverflowError, ValueError):
        return None


def _offset_days(pattern, sign: int):
    def rule(text: str, today: date) -> Optional[date]:
        match = pattern.search(text)
        if not match:
            return None
        try:
            delta = timedelta(days=sign * int(match.group(1)))
        except (OverflowError, ValueError):
            return None
        return _shift(today, delta)
    return rule


def _keyword(pattern, days: int):
    def rule(text: str, today: date) -> Optional[date]:
        return _shift(today, timedelta(days=days)) if pattern.search(text) else None
    return rule


def _next_month(text: str, today: date) -> Optional[date]:
    if not NEXT_MONTH_RE.search(text):
        return None
    return _shift(today, relativedelta(months=+1, day=1))


def _next_year(text: str, today: date) -> Optional[date]:
    if not NEXT_YEAR_RE.search(text):
        return None
    return _shift(today, relativedelta(years=+1, month=1, day=1))


def _next_weekday(text: str, today: date) -> Optional[date]:
    match = NEXT_WEEKDAY_RE.search(text)
    if not match:
        return None
    target = WEEKDAY_INDEX[match.group(1).lower()]
    # Start from tomorrow so a same-weekday "today" lands 7 days out
    return _shift(today, relativedelta(days=+1, weekday=RELATIVEDELTA_WEEKDAYS[target](+1)))


# Evaluated in order, first hit wins
RELATIVE_RULES = (
    _keyword(TODAY_RE, 0),
    _keyword(TOMORROW_RE, 1),
    _keyword(YESTERDAY_RE, -1),
    _offset_days(IN_DAYS_RE, +1),
    _offset_days(AFTER_DAYS_RE, +1),
    _offset_days(BEFORE_DAYS_RE, -1),
    _next_month,
    _next_year,
    _next_weekday,
)


def resolve_relative_date(text: str, today: date) -> Optional[str]:
    """
    Resolve a relative date expression against today.

    Args:
        text: Input text (matched case-insensitively)
        today: Reference calendar date

    Returns:
        ISO date string, or None if no relative expression is present
    """
    lower = text.lower()
    for rule in RELATIVE_RULES:
        resolved = rule(lower, today)
        if resolved is not None:
            return resolved.isoformat()
    return None
