"""
Canonical date handling.

Every day the tracker deals with is identified by a ``YYYY-MM-DD`` string.
Comparisons between days ("same day", "is today") always go through this
string form so that time-of-day and time-zone offsets never leak in.

Example:
    >>> format_date(date(2026, 3, 5))
    '2026-03-05'
    >>> parse_date('2026-03-05')
    datetime.date(2026, 3, 5)
"""

import re
from datetime import date, datetime
from typing import Optional, Union

from django.utils import timezone

from .exceptions import ParseError

DATE_PATTERN = re.compile(r'^\d{4}-\d{2}-\d{2}$')


def format_date(value: Union[date, datetime]) -> str:
    """
    Format a date using its local calendar fields.

    Aware datetimes are converted to the active local time zone first;
    naive datetimes and plain dates are taken as already local.
    """
    if isinstance(value, datetime):
        if timezone.is_aware(value):
            value = timezone.localtime(value)
        value = value.date()
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def parse_date(text: str) -> date:
    """
    Parse a canonical date string.

    Args:
        text: String in YYYY-MM-DD format

    Returns:
        The calendar day as a date

    Raises:
        ParseError: If the shape is wrong or the day does not exist
    """
    if not isinstance(text, str) or not DATE_PATTERN.match(text):
        raise ParseError(f"Invalid date format: {text!r}. Use YYYY-MM-DD")

    year, month, day = (int(part) for part in text.split('-'))
    try:
        return date(year, month, day)
    except ValueError:
        raise ParseError(f"Invalid calendar day: {text!r}")


def today_string(today: Optional[date] = None) -> str:
    """Canonical string for today's local date."""
    return format_date(today if today is not None else timezone.localdate())


def is_today(text: str, today: Optional[date] = None) -> bool:
    return text == today_string(today)


def is_same_day(first: Union[date, datetime], second: Union[date, datetime]) -> bool:
    return format_date(first) == format_date(second)


WEEKDAY_NAMES = ('一', '二', '三', '四', '五', '六', '日')


def day_label(text: str) -> str:
    """Readable label for a day, e.g. '3月5日 星期四'."""
    day = parse_date(text)
    return f"{day.month}月{day.day}日 星期{WEEKDAY_NAMES[day.weekday()]}"
