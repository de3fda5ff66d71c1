"""Checking and comparing dates written as dd/mm/yyyy."""

from __future__ import annotations

import re
from datetime import date

_DATE_FIELDS = re.compile(r"\s*([+-]?\d+)/\s*([+-]?\d+)/\s*([+-]?\d+)")
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _days_in_month(month: int, year: int) -> int:
    if month == 2:
        leap = (year % 4 == 0 and year % 100 != 0) or year % 400 == 0
        return 29 if leap else 28
    if month in (4, 6, 9, 11):
        return 30
    return 31


def validate_date(text: str, today: date | None = None) -> bool:
    """Tell whether ``text`` is a real day/month/year date.

    The year must lie between 1900 and the current year, inclusive.
    """
    match = _DATE_FIELDS.match(text)
    if match is None:
        return False
    day, month, year = (int(field) for field in match.groups())
    current_year = (today or date.today()).year
    if not 1900 <= year <= current_year:
        return False
    if not 1 <= month <= 12:
        return False
    return 1 <= day <= _days_in_month(month, year)


def _take_token(text: str, width: int) -> tuple[str, str]:
    """Read up to ``width`` non-blank characters after leading blanks."""
    text = text.lstrip()
    length = 0
    while length < min(width, len(text)) and not text[length].isspace():
        length += 1
    return text[:length], text[length:]


def _leading_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def date_key(text: str) -> int:
    """Turn ``dd/mm/yyyy`` into the integer ``yyyymmdd`` for ordering.

    Parts that cannot be read are left empty, so the placeholder ``"0"``
    used for "no date" gives 0 and sorts before every real date.
    """
    parts: list[str] = []
    rest = text
    widths = (2, 2, 4)
    for index, width in enumerate(widths):
        token, rest = _take_token(rest, width)
        if not token:
            break
        parts.append(token)
        if index < len(widths) - 1:
            if not rest.startswith("/"):
                break
            rest = rest[1:]
    parts.extend([""] * (3 - len(parts)))
    day, month, year = parts
    return _leading_int(year + month + day)