"""
Absolute date resolution: ISO, numeric M/D[/YYYY], "Month Day [Year]" and
"Day Month [Year]". Out-of-range components roll over into neighbouring
months/years instead of being rejected ("February 30" is March 1st or 2nd).
"""

from datetime import date
from typing import Optional

from dateutil.relativedelta import relativedelta

from nlcal.date_patterns import DAY_MONTH_RE, ISO_DATE_RE, MONTH_DAY_RE, MONTH_INDEX, NUMERIC_DATE_RE


def calendar_date(year: int, month: int, day: int) -> Optional[date]:
    """
    Build a date, normalizing month/day overflow.

    Returns:
        The normalized date, or None if the year is outside 1..9999
    """
    try:
        return date(year, 1, 1) + relativedelta(months=month - 1, days=day - 1)
    except (OverflowError, ValueError):
        return None


def _iso(text: str, today: date) -> Optional[date]:
    match = ISO_DATE_RE.search(text)
    if not match:
        return None
    year, month, day = (int(g) for g in match.groups())
    return calendar_date(year, month, day)


def _numeric(text: str, today: date) -> Optional[date]:
    match = NUMERIC_DATE_RE.search(text)
    if not match:
        return None
    month, day, year = match.groups()
    return calendar_date(int(year) if year else today.year, int(month), int(day))


def _month_day(text: str, today: date) -> Optional[date]:
    match = MONTH_DAY_RE.search(text)
    if not match:
        return None
    name, day, year = match.groups()
    return calendar_date(int(year) if year else today.year, MONTH_INDEX[name.lower()], int(day))


def _day_month(text: str, today: date) -> Optional[date]:
    match = DAY_MONTH_RE.search(text)
    if not match:
        return None
    day, name, year = match.groups()
    return calendar_date(int(year) if year else today.year, MONTH_INDEX[name.lower()], int(day))


ABSOLUTE_RULES = (_iso, _numeric, _month_day, _day_month)


def resolve_absolute_date(text: str, today: date) -> Optional[str]:
    """
    Resolve an explicit calendar date written in text.

    Args:
        text: Input text
        today: Reference date, used only for the default year

    Returns:
        ISO date string, or None if no absolute date is present
    """
    for rule in ABSOLUTE_RULES:
        resolved = rule(text, today)
        if resolved is not None:
            return resolved.isoformat()
    return None
