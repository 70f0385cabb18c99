"""
Serializers for analytics app.

This module contains:
1. Input serializers - Query parameter validation
2. Response serializers - API documentation and output formatting

Input Serializers:
    MonthQuerySerializer - Validates year/month, defaulting to this month
    RankingQuerySerializer - Validates the ranking field
    CalendarQuerySerializer - Validates year/month plus the selected day

Response Serializers:
    StatsSerializer - Monthly and annual count/cost
    FrequencyEntrySerializer - One ranking entry
    RankingResponseSerializer - Full ranking
    CalendarResponseSerializer - Month grid with navigation
    DashboardResponseSerializer - Stat cards plus favourites
"""

from django.utils import timezone
from rest_framework import serializers

from apps.tracker.serializers import (
    CanonicalDateField,
    DrinkRecordSerializer,
    ErrorSerializer,
)
from .analytics import RANKING_FIELDS


# =============================================================================
# Input Serializers (Query Parameter Validation)
# =============================================================================

class MonthQuerySerializer(serializers.Serializer):
    """
    Validate year and month query parameters.

    Used by: stats, dashboard

    Query Parameters:
        year (int): Reference year (defaults to the current local year)
        month (int): Reference month 1-12 (defaults to the current local month)

    Note:
        Defaults are filled in validate() from the local date at request
        time, not at import time.
    """

    year = serializers.IntegerField(min_value=1, max_value=9999, required=False)
    month = serializers.IntegerField(min_value=1, max_value=12, required=False)

    def validate(self, attrs):
        """Fill in the current year/month when omitted."""
        today = timezone.localdate()
        attrs.setdefault('year', today.year)
        attrs.setdefault('month', today.month)
        return attrs


class RankingQuerySerializer(serializers.Serializer):
    """
    Validate query parameters for ranking endpoints.

    Used by: ranking, top

    Query Parameters:
        field (str): Ranking field - 'shop' or 'item'
    """

    field = serializers.ChoiceField(
        choices=RANKING_FIELDS,
        default='shop',
        help_text="Ranking field: 'shop' or 'item'"
    )


class CalendarQuerySerializer(MonthQuerySerializer):
    """
    Validate query parameters for the calendar endpoint.

    Query Parameters:
        year (int): Displayed year
        month (int): Displayed month 1-12
        selected (str): Selected day in YYYY-MM-DD format
    """

    selected = CanonicalDateField(required=False)


# =============================================================================
# Response Serializers (API Documentation)
# =============================================================================

class StatsSerializer(serializers.Serializer):
    """Response serializer for monthly/annual statistics."""
    monthly_count = serializers.IntegerField()
    monthly_cost = serializers.IntegerField()
    annual_count = serializers.IntegerField()
    annual_cost = serializers.IntegerField()


class FrequencyEntrySerializer(serializers.Serializer):
    """Nested serializer for a single ranking entry."""
    name = serializers.CharField(allow_blank=True)
    count = serializers.IntegerField()


class RankingResponseSerializer(serializers.Serializer):
    """Response serializer for a frequency ranking."""
    field = serializers.CharField()
    results = FrequencyEntrySerializer(many=True)


class CalendarCellSerializer(serializers.Serializer):
    """Nested serializer for one grid cell (blank or day)."""
    blank = serializers.BooleanField()
    day = serializers.IntegerField(allow_null=True)
    date = serializers.CharField(allow_null=True)
    records = DrinkRecordSerializer(many=True)
    dot_count = serializers.IntegerField()
    has_capacity = serializers.BooleanField()
    is_selected = serializers.BooleanField()
    is_today = serializers.BooleanField()


class YearMonthSerializer(serializers.Serializer):
    year = serializers.IntegerField()
    month = serializers.IntegerField()


class CalendarResponseSerializer(serializers.Serializer):
    """Response serializer for the month view."""
    year = serializers.IntegerField()
    month = serializers.IntegerField()
    label = serializers.CharField()
    weekdays = serializers.ListField(child=serializers.CharField())
    leading_blanks = serializers.IntegerField()
    days_in_month = serializers.IntegerField()
    cells = CalendarCellSerializer(many=True)
    previous = YearMonthSerializer()
    next = YearMonthSerializer()


class DashboardResponseSerializer(serializers.Serializer):
    """Response serializer for dashboard summary."""
    year = serializers.IntegerField()
    month = serializers.IntegerField()
    stats = StatsSerializer()
    favorite_shop = FrequencyEntrySerializer()
    favorite_item = FrequencyEntrySerializer()
