"""
Static month/weekday tables and the regular expressions shared by the
date resolvers and the title extractor.
"""

import re

WEEKDAY_INDEX = {
    "monday": 0,
    "tuesday": 1,
    "wednesday": 2,
    "thursday": 3,
    "friday": 4,
    "saturday": 5,
    "sunday": 6,
}

MONTH_INDEX = {
    "january": 1, "jan": 1,
    "february": 2, "feb": 2,
    "march": 3, "mar": 3,
    "april": 4, "apr": 4,
    "may": 5,
    "june": 6, "jun": 6,
    "july": 7, "jul": 7,
    "august": 8, "aug": 8,
    "september": 9, "sep": 9, "sept": 9,
    "october": 10, "oct": 10,
    "november": 11, "nov": 11,
    "december": 12, "dec": 12,
}

WEEKDAYS = "|".join(WEEKDAY_INDEX)
# Longest names first so "sept" wins over "sep" and "march" over "mar"
MONTHS = "|".join(sorted(MONTH_INDEX, key=len, reverse=True))

# Relative dates
TODAY_RE = re.compile(r"\btoday\b", re.I)
TOMORROW_RE = re.compile(r"\btomorrow\b", re.I)
YESTERDAY_RE = re.compile(r"\byesterday\b", re.I)
IN_DAYS_RE = re.compile(r"\bin\s+(\d+)\s+days?\b", re.I)
AFTER_DAYS_RE = re.compile(r"\bafter\s+(\d+)\s+days?\b", re.I)
BEFORE_DAYS_RE = re.compile(r"\bbefore\s+(\d+)\s+days?\b", re.I)
NEXT_MONTH_RE = re.compile(r"\bnext\s+month\b", re.I)
NEXT_YEAR_RE = re.compile(r"\bnext\s+year\b", re.I)
NEXT_WEEKDAY_RE = re.compile(rf"\bnext\s+({WEEKDAYS})\b", re.I)

# Absolute dates
ISO_DATE_RE = re.compile(r"\b(\d{4})-(\d{2})-(\d{2})\b")
NUMERIC_DATE_RE = re.compile(r"\b(\d{1,2})/(\d{1,2})(?:/(\d{4}))?\b")
MONTH_DAY_RE = re.compile(rf"\b({MONTHS})\s+(\d{{1,2}})(?:\s+(\d{{4}}))?\b", re.I)
DAY_MONTH_RE = re.compile(rf"\b(\d{{1,2}})\s+({MONTHS})(?:\s+(\d{{4}}))?\b", re.I)

# Time span: "at 4pm to 5pm", "from 9:30am", "at 14:00"
# A clock never runs straight into a date like "06/20" or "06-20"
_CLOCK = r"(\d{1,2})(?::(\d{2}))?\s*(am|pm)?\b(?![/\-]\d)"
TIME_SPAN_RE = re.compile(rf"\b(?:at|from)\s+{_CLOCK}(?:\s+to\s+{_CLOCK})?", re.I)

# Title stripping, applied in this order
TITLE_STRIP_PATTERNS = (
    TIME_SPAN_RE,
    re.compile(rf"\b(?:next\s+)?(?:{WEEKDAYS})\b", re.I),
    re.compile(r"\bnext\s+(?:month|year)\b", re.I),
    re.compile(r"\b(?:today|tomorrow|yesterday)\b", re.I),
    re.compile(r"\b(?:in|after|before)\s+\d+\s+days?\b", re.I),
    re.compile(rf"\b(?:{MONTHS})\s+\d{{1,2}}(?:\s+\d{{4}})?\b", re.I),
    re.compile(rf"\b\d{{1,2}}\s+(?:{MONTHS})(?:\s+\d{{4}})?\b", re.I),
    re.compile(r"\b\d{4}-\d{2}-\d{2}\b"),
    re.compile(r"\b\d{1,2}/\d{1,2}(?:/\d{4})?\b"),
)

WHITESPACE_RE = re.compile(r"\s+")
