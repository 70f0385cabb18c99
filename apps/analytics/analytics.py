"""
Analytics Module
=================

This module derives statistics and preference rankings from drink records.
Everything here is a pure function of its arguments: nothing is cached and
nothing is written, so callers recompute after every change to the store.

Classes:
    DrinkAnalytics: Static methods for statistics and rankings.

Key Features:
    - Monthly and annual drink count and spending
    - Frequency ranking of shops or items
    - Favourite shop/item with an explicit "no data" sentinel

Example:
    Getting the numbers for the stat cards::

        from apps.analytics.analytics import DrinkAnalytics

        records = store.all_records()
        stats = DrinkAnalytics.calculate_stats(records, 2026, 1)
        print(f"{stats['monthly_count']} drinks, ${stats['monthly_cost']}")

        favourite = DrinkAnalytics.top_frequency(records, 'shop')
        if favourite['count'] == 0:
            print("No data yet")

Note:
    Months are 1-based (1 = January), the same convention as
    datetime.date.month and the tracker's parse_date().
"""

from collections import OrderedDict
from datetime import MAXYEAR
from typing import Dict, Iterable, List

from apps.tracker.dates import parse_date
from apps.tracker.record_store import DrinkRecord
from .exceptions import InvalidFieldError, InvalidMonthError, InvalidYearError

RANKING_FIELDS = ('shop', 'item')

NO_DATA_NAME = ''


def validate_year_month(year: int, month: int) -> None:
    """
    Raises:
        InvalidYearError: If year is not an integer in 1-MAXYEAR
        InvalidMonthError: If month is not in 1-12
    """
    if isinstance(year, bool) or not isinstance(year, int) or not 1 <= year <= MAXYEAR:
        raise InvalidYearError(f"Year must be between 1 and {MAXYEAR}, got {year!r}")
    if isinstance(month, bool) or not isinstance(month, int) or not 1 <= month <= 12:
        raise InvalidMonthError(f"Month must be between 1 and 12, got {month!r}")


class DrinkAnalytics:
    """
    Statistics and rankings over drink records.

    Methods:
        calculate_stats: Monthly and annual count and spending.
        rank_frequency: Distinct shops or items ordered by popularity.
        top_frequency: The most frequent shop or item.

    Note:
        All methods return plain dictionaries or lists, making them
        suitable for JSON serialization in API responses.
    """

    @staticmethod
    def calculate_stats(
        records: Iterable[DrinkRecord],
        reference_year: int,
        reference_month: int,
    ) -> Dict[str, int]:
        """
        Count drinks and sum their prices for a month and for its year.

        Records are bucketed by the year and month parsed from their own
        date, never by comparison with today, so drinks logged for other
        years never leak into the reference year's totals.

        Args:
            records: Drink records to aggregate.
            reference_year (int): Year to aggregate, e.g. 2026.
            reference_month (int): Month to aggregate, 1-12.

        Returns:
            dict: A dictionary containing:
                - monthly_count (int): Drinks in the reference month.
                - monthly_cost (int): Sum of their prices.
                - annual_count (int): Drinks in the reference year.
                - annual_cost (int): Sum of their prices.

        Raises:
            InvalidYearError: If reference_year is not positive.
            InvalidMonthError: If reference_month is outside 1-12.

        Example:
            Records on 2026-01-10 ($40), 2026-02-01 ($60) and
            2025-12-31 ($30) with reference 2026-01::

                >>> DrinkAnalytics.calculate_stats(records, 2026, 1)
                {'monthly_count': 1, 'monthly_cost': 40,
                 'annual_count': 2, 'annual_cost': 100}
        """
        validate_year_month(reference_year, reference_month)

        stats = {
            'monthly_count': 0,
            'monthly_cost': 0,
            'annual_count': 0,
            'annual_cost': 0,
        }

        for record in records:
            day = parse_date(record.date)
            if day.year != reference_year:
                continue

            stats['annual_count'] += 1
            stats['annual_cost'] += record.price

            if day.month == reference_month:
                stats['monthly_count'] += 1
                stats['monthly_cost'] += record.price

        return stats

    @staticmethod
    def rank_frequency(records: Iterable[DrinkRecord], field: str) -> List[Dict]:
        """
        Rank the distinct values of a field by how often they occur.

        Counting runs over all records regardless of date. Values are
        collected in first-occurrence order and then stably sorted by
        descending count, so equal counts keep first-occurrence order.

        Args:
            records: Drink records in insertion order.
            field (str): 'shop' or 'item'.

        Returns:
            list[dict]: Entries of {'name': str, 'count': int}, most
            frequent first. Empty if there are no records.

        Raises:
            InvalidFieldError: If field is not 'shop' or 'item'.

        Example:
            >>> DrinkAnalytics.rank_frequency(records, 'shop')
            [{'name': '50嵐', 'count': 3}, {'name': '迷客夏', 'count': 1}]
        """
        if field not in RANKING_FIELDS:
            raise InvalidFieldError(
                f"Invalid field: {field!r}. Valid options: {', '.join(RANKING_FIELDS)}"
            )

        counts = OrderedDict()
        for record in records:
            value = getattr(record, field)
            counts[value] = counts.get(value, 0) + 1

        ranked = sorted(counts.items(), key=lambda entry: entry[1], reverse=True)
        return [{'name': name, 'count': count} for name, count in ranked]

    @staticmethod
    def top_frequency(records: Iterable[DrinkRecord], field: str) -> Dict:
        """
        Get the most frequent shop or item.

        Returns:
            dict: {'name': str, 'count': int}. When there are no records
            this is {'name': '', 'count': 0}; treat count == 0 as "no data".

        Raises:
            InvalidFieldError: If field is not 'shop' or 'item'.
        """
        ranking = DrinkAnalytics.rank_frequency(records, field)
        if not ranking:
            return {'name': NO_DATA_NAME, 'count': 0}
        return ranking[0]
