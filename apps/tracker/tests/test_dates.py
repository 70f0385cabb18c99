"""
Tests for canonical date handling.
"""
import pytest
from datetime import date, datetime, timezone as dt_timezone
from django.utils import timezone
from apps.tracker.dates import (
    format_date,
    parse_date,
    today_string,
    is_today,
    is_same_day,
    day_label,
)
from apps.tracker.exceptions import ParseError


class TestFormatDate:
    """Tests for format_date."""

    def test_zero_pads_month_and_day(self):
        assert format_date(date(2026, 3, 5)) == '2026-03-05'

    def test_two_digit_month_and_day(self):
        assert format_date(date(2025, 12, 31)) == '2025-12-31'

    def test_naive_datetime_uses_its_own_fields(self):
        assert format_date(datetime(2026, 1, 1, 23, 59)) == '2026-01-01'

    def test_aware_datetime_uses_local_calendar_day(self, settings):
        """20:00 UTC on March 4th is already March 5th in Taipei."""
        settings.TIME_ZONE = 'Asia/Taipei'
        moment = datetime(2026, 3, 4, 20, 0, tzinfo=dt_timezone.utc)

        assert format_date(moment) == '2026-03-05'


class TestParseDate:
    """Tests for parse_date."""

    def test_parses_canonical_string(self):
        assert parse_date('2026-03-05') == date(2026, 3, 5)

    def test_inverse_of_format(self):
        for day in [date(2026, 1, 1), date(2028, 2, 29), date(1999, 12, 31)]:
            assert parse_date(format_date(day)) == day

    @pytest.mark.parametrize('text', [
        '2026-3-5',
        '26-03-05',
        '2026/03/05',
        '2026-03-05T10:00',
        ' 2026-03-05',
        '',
        'abcd-ef-gh',
    ])
    def test_rejects_wrong_shape(self, text):
        with pytest.raises(ParseError):
            parse_date(text)

    @pytest.mark.parametrize('text', [
        '2026-04-31',
        '2026-02-29',
        '2026-13-01',
        '2026-00-10',
        '2026-01-00',
    ])
    def test_rejects_invalid_calendar_day(self, text):
        with pytest.raises(ParseError):
            parse_date(text)

    def test_rejects_non_string(self):
        with pytest.raises(ParseError):
            parse_date(date(2026, 3, 5))

    def test_parse_error_is_value_error(self):
        with pytest.raises(ValueError):
            parse_date('nope')


class TestTodayChecks:
    """Tests for today/same-day comparisons via canonical strings."""

    def test_today_string_with_override(self):
        assert today_string(date(2026, 3, 5)) == '2026-03-05'

    def test_today_string_defaults_to_local_date(self):
        assert today_string() == format_date(timezone.localdate())

    def test_is_today(self):
        today = date(2026, 3, 5)

        assert is_today('2026-03-05', today)
        assert not is_today('2026-03-06', today)

    def test_is_same_day_ignores_time_of_day(self):
        assert is_same_day(datetime(2026, 3, 5, 0, 1), datetime(2026, 3, 5, 23, 59))
        assert is_same_day(date(2026, 3, 5), datetime(2026, 3, 5, 12, 0))
        assert not is_same_day(date(2026, 3, 5), date(2026, 3, 6))


class TestDayLabel:
    """Tests for the readable day label."""

    def test_label(self):
        # 2026-03-05 is a Thursday
        assert day_label('2026-03-05') == '3月5日 星期四'

    def test_sunday(self):
        assert day_label('2026-03-08') == '3月8日 星期日'

    def test_invalid_day(self):
        with pytest.raises(ParseError):
            day_label('2026-02-30')
