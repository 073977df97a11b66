"""
Title derivation by stripping every date/time token from the input.
"""

from nlcal.date_patterns import TITLE_STRIP_PATTERNS, WHITESPACE_RE


def derive_title(text: str) -> str:
    """
    Remove time spans, relative keywords and absolute dates, in that order.
    Falls back to the trimmed input when nothing else is left.
    """
    stripped = text
    for pattern in TITLE_STRIP_PATTERNS:
        stripped = pattern.sub("", stripped)
    stripped = WHITESPACE_RE.sub(" ", stripped).strip()

    return stripped if stripped else text.strip()
