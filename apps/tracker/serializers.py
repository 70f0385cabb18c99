"""
Serializers for tracker app.

Input Serializers:
    DrinkDraftSerializer - Validates an entry form submission
    RecordFilterSerializer - Validates the record list query parameters

Response Serializers:
    DrinkRecordSerializer - One drink record
    ShopCatalogSerializer - The shop catalog
    DaySummarySerializer - Records and remaining capacity of a day
"""

from rest_framework import serializers

from .dates import parse_date
from .exceptions import ParseError
from .record_store import DrinkDraft


class CanonicalDateField(serializers.CharField):
    """YYYY-MM-DD string that must name a real calendar day."""

    def to_internal_value(self, data):
        value = super().to_internal_value(data)
        try:
            parse_date(value)
        except ParseError as e:
            raise serializers.ValidationError(str(e))
        return value


# =============================================================================
# Input Serializers
# =============================================================================

class DrinkDraftSerializer(serializers.Serializer):
    """
    Validate a new drink submitted by the entry form.

    Fields:
        shop (str): Vendor name, required
        item (str): Drink name, required
        sweetness (str): Free-form sweetness level
        ice (str): Free-form ice level
        price (int): Price in the smallest currency unit, >= 0
        date (str): Target day in YYYY-MM-DD format
    """

    shop = serializers.CharField(max_length=100)
    item = serializers.CharField(max_length=100)
    sweetness = serializers.CharField(max_length=50, allow_blank=True, required=False, default='')
    ice = serializers.CharField(max_length=50, allow_blank=True, required=False, default='')
    price = serializers.IntegerField(min_value=0)
    date = CanonicalDateField(help_text='Day in YYYY-MM-DD format')

    def to_draft(self) -> DrinkDraft:
        return DrinkDraft(**self.validated_data)


class RecordFilterSerializer(serializers.Serializer):
    """
    Validate query parameters for the record list.

    Query Parameters:
        date (str): Only records on this day (YYYY-MM-DD)
    """

    date = CanonicalDateField(required=False)


# =============================================================================
# Response Serializers
# =============================================================================

class DrinkRecordSerializer(serializers.Serializer):
    """A stored drink record."""
    id = serializers.CharField()
    date = serializers.CharField()
    shop = serializers.CharField()
    item = serializers.CharField()
    sweetness = serializers.CharField(allow_blank=True)
    ice = serializers.CharField(allow_blank=True)
    price = serializers.IntegerField()


class ShopCatalogSerializer(serializers.Serializer):
    shops = serializers.ListField(child=serializers.CharField())


class DaySummarySerializer(serializers.Serializer):
    """Records of a single day and how many more it can take."""
    date = serializers.CharField()
    label = serializers.CharField()
    records = DrinkRecordSerializer(many=True)
    remaining_capacity = serializers.IntegerField()


class ErrorSerializer(serializers.Serializer):
    """Standard error response serializer."""
    error = serializers.CharField()
