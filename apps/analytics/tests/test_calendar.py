from datetime import date

import pytest
from apps.analytics.calendar_grid import (
    WEEKDAY_HEADERS,
    build_grid,
    build_month_view,
    days_in_month,
    leading_blanks,
    month_label,
    shift_month,
)
from apps.analytics.exceptions import InvalidMonthError, InvalidYearError


class TestMonthArithmetic:

    @pytest.mark.parametrize('year, month, expected', [
        (2026, 1, 31),
        (2026, 2, 28),
        (2028, 2, 29),
        (2100, 2, 28),
        (2000, 2, 29),
        (2026, 4, 30),
        (2026, 12, 31),
        (9999, 12, 31),
    ])
    def test_days_in_month(self, year, month, expected):
        assert days_in_month(year, month) == expected

    @pytest.mark.parametrize('year, month, expected', [
        (2026, 1, 4),   # Thursday
        (2026, 2, 0),   # Sunday
        (2026, 8, 6),   # Saturday
        (2026, 6, 1),   # Monday
    ])
    def test_leading_blanks(self, year, month, expected):
        assert leading_blanks(year, month) == expected

    @pytest.mark.parametrize('year, month, delta, expected', [
        (2026, 1, -1, (2025, 12)),
        (2026, 12, 1, (2027, 1)),
        (2026, 5, 1, (2026, 6)),
        (2026, 5, -17, (2024, 12)),
    ])
    def test_shift_month(self, year, month, delta, expected):
        assert shift_month(year, month, delta) == expected

    def test_month_label(self):
        assert month_label(2026, 1) == '2026 / 01'
        assert month_label(2026, 11) == '2026 / 11'


class TestBuildGrid:
    """Tests for build_grid()"""

    def test_leap_february(self, memory_store):
        cells = build_grid(memory_store, 2028, 2, today=date(2028, 1, 1))
        days = [cell for cell in cells if not cell['blank']]

        assert len(days) == 29
        assert [cell['day'] for cell in days] == list(range(1, 30))
        assert days[-1]['date'] == '2028-02-29'

    def test_blanks_come_first(self, memory_store):
        cells = build_grid(memory_store, 2026, 1, today=date(2026, 1, 1))

        assert [cell['blank'] for cell in cells[:5]] == [True, True, True, True, False]
        assert cells[4]['day'] == 1
        assert cells[4]['date'] == '2026-01-01'
        assert len(cells) == 4 + 31

    def test_day_records_and_dots(self, memory_store, add_drink):
        add_drink(memory_store, '2026-01-10', shop='A')
        add_drink(memory_store, '2026-01-10', shop='B')
        add_drink(memory_store, '2026-01-11', shop='C')

        cells = build_grid(memory_store, 2026, 1, today=date(2026, 1, 1))
        by_date = {cell['date']: cell for cell in cells if not cell['blank']}

        full = by_date['2026-01-10']
        assert [record.shop for record in full['records']] == ['A', 'B']
        assert full['dot_count'] == 2
        assert full['has_capacity'] is False

        partial = by_date['2026-01-11']
        assert partial['dot_count'] == 1
        assert partial['has_capacity'] is True

        empty = by_date['2026-01-12']
        assert empty['records'] == ()
        assert empty['dot_count'] == 0
        assert empty['has_capacity'] is True

    def test_other_month_records_excluded(self, memory_store, add_drink):
        add_drink(memory_store, '2026-02-10')

        cells = build_grid(memory_store, 2026, 1, today=date(2026, 1, 1))

        assert all(cell['dot_count'] == 0 for cell in cells)

    def test_selected_and_today(self, memory_store):
        cells = build_grid(
            memory_store, 2026, 3,
            selected_date='2026-03-05',
            today=date(2026, 3, 9),
        )
        selected = [cell['date'] for cell in cells if cell['is_selected']]
        today = [cell['date'] for cell in cells if cell['is_today']]

        assert selected == ['2026-03-05']
        assert today == ['2026-03-09']

    def test_today_outside_month(self, memory_store):
        cells = build_grid(memory_store, 2026, 3, today=date(2026, 4, 9))

        assert not any(cell['is_today'] for cell in cells)

    def test_invalid_month(self, memory_store):
        with pytest.raises(InvalidMonthError):
            build_grid(memory_store, 2026, 13)

    def test_last_supported_month(self, memory_store):
        cells = build_grid(memory_store, 9999, 12, today=date(2026, 1, 1))
        days = [cell for cell in cells if not cell['blank']]

        assert len(days) == 31
        assert days[-1]['date'] == '9999-12-31'

    def test_year_out_of_range(self, memory_store):
        with pytest.raises(InvalidYearError):
            build_grid(memory_store, 10000, 1)


class TestBuildMonthView:

    def test_header_and_navigation(self, memory_store):
        view = build_month_view(memory_store, 2026, 1, today=date(2026, 1, 1))

        assert view['label'] == '2026 / 01'
        assert view['weekdays'] == WEEKDAY_HEADERS
        assert view['weekdays'][0] == 'SUN'
        assert view['leading_blanks'] == 4
        assert view['days_in_month'] == 31
        assert view['previous'] == {'year': 2025, 'month': 12}
        assert view['next'] == {'year': 2026, 'month': 2}
        assert len(view['cells']) == 35
