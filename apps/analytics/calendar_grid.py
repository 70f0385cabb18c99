"""
Calendar grid for the month view.

The grid is laid out in Sunday-first weeks: a month starting on a
Thursday gets four blank cells before day 1.
"""

from calendar import monthrange
from datetime import date
from typing import Dict, List, Optional, Tuple

from apps.tracker.dates import format_date, is_today
from apps.tracker.record_store import DAY_CAPACITY, RecordStore
from .analytics import validate_year_month

WEEKDAY_HEADERS = ('SUN', 'MON', 'TUE', 'WED', 'THU', 'FRI', 'SAT')


def shift_month(year: int, month: int, delta: int) -> Tuple[int, int]:
    """Move a (year, month) pair by delta months."""
    index = year * 12 + (month - 1) + delta
    return index // 12, index % 12 + 1


def days_in_month(year: int, month: int) -> int:
    return monthrange(year, month)[1]


def leading_blanks(year: int, month: int) -> int:
    """Weekday index of the 1st, Sunday = 0."""
    return (date(year, month, 1).weekday() + 1) % 7


def month_label(year: int, month: int) -> str:
    return f"{year} / {month:02d}"


def _blank_cell() -> Dict:
    return {
        'blank': True,
        'day': None,
        'date': None,
        'records': (),
        'dot_count': 0,
        'has_capacity': False,
        'is_selected': False,
        'is_today': False,
    }


def build_grid(
    store: RecordStore,
    year: int,
    month: int,
    selected_date: Optional[str] = None,
    today: Optional[date] = None,
) -> List[Dict]:
    """
    Build the ordered cells of a month view.

    Args:
        store: Loaded record store the day cells read from
        year: Displayed year
        month: Displayed month, 1-12
        selected_date: Canonical string of the selected day, if any
        today: Override for the current local date (tests)

    Returns:
        Leading blank cells followed by one cell per day. A day cell has
        day, date, records, dot_count (at most 2), has_capacity,
        is_selected and is_today.

    Raises:
        InvalidYearError, InvalidMonthError: For an invalid year/month
    """
    validate_year_month(year, month)

    cells = [_blank_cell() for _ in range(leading_blanks(year, month))]

    for day in range(1, days_in_month(year, month) + 1):
        day_string = format_date(date(year, month, day))
        records = store.records_on(day_string)
        cells.append({
            'blank': False,
            'day': day,
            'date': day_string,
            'records': records,
            'dot_count': min(len(records), DAY_CAPACITY),
            'has_capacity': store.has_capacity(day_string),
            'is_selected': selected_date == day_string,
            'is_today': is_today(day_string, today),
        })

    return cells


def build_month_view(
    store: RecordStore,
    year: int,
    month: int,
    selected_date: Optional[str] = None,
    today: Optional[date] = None,
) -> Dict:
    """Grid plus the header and navigation data around it."""
    cells = build_grid(store, year, month, selected_date=selected_date, today=today)
    previous_year, previous_month = shift_month(year, month, -1)
    next_year, next_month = shift_month(year, month, 1)

    return {
        'year': year,
        'month': month,
        'label': month_label(year, month),
        'weekdays': WEEKDAY_HEADERS,
        'leading_blanks': leading_blanks(year, month),
        'days_in_month': days_in_month(year, month),
        'cells': cells,
        'previous': {'year': previous_year, 'month': previous_month},
        'next': {'year': next_year, 'month': next_month},
    }
