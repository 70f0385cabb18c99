"""
Tests for tracker input serializers.
"""
import pytest
from apps.tracker.record_store import DrinkDraft
from apps.tracker.serializers import (
    DrinkDraftSerializer,
    RecordFilterSerializer,
)


def draft_data(**overrides):
    data = {
        'shop': '50嵐',
        'item': 'Milk Tea',
        'sweetness': 'Half',
        'ice': 'Less ice',
        'price': 50,
        'date': '2026-03-05',
    }
    data.update(overrides)
    return data


class TestDrinkDraftSerializer:
    """Test DrinkDraftSerializer validation."""

    def test_valid_draft(self):
        serializer = DrinkDraftSerializer(data=draft_data())

        assert serializer.is_valid(), serializer.errors
        assert serializer.to_draft() == DrinkDraft(
            shop='50嵐',
            item='Milk Tea',
            sweetness='Half',
            ice='Less ice',
            price=50,
            date='2026-03-05',
        )

    def test_sweetness_and_ice_optional(self):
        data = draft_data()
        del data['sweetness']
        del data['ice']
        serializer = DrinkDraftSerializer(data=data)

        assert serializer.is_valid(), serializer.errors
        assert serializer.to_draft().sweetness == ''
        assert serializer.to_draft().ice == ''

    def test_price_as_numeric_string(self):
        serializer = DrinkDraftSerializer(data=draft_data(price='65'))

        assert serializer.is_valid(), serializer.errors
        assert serializer.validated_data['price'] == 65

    @pytest.mark.parametrize('field, value', [
        ('shop', ''),
        ('shop', '   '),
        ('item', ''),
        ('price', -1),
        ('price', 'free'),
        ('date', '2026-3-5'),
        ('date', '2026-02-30'),
        ('date', ''),
    ])
    def test_invalid_field(self, field, value):
        serializer = DrinkDraftSerializer(data=draft_data(**{field: value}))

        assert not serializer.is_valid()
        assert field in serializer.errors

    @pytest.mark.parametrize('field', ['shop', 'item', 'price', 'date'])
    def test_required_fields(self, field):
        data = draft_data()
        del data[field]
        serializer = DrinkDraftSerializer(data=data)

        assert not serializer.is_valid()
        assert field in serializer.errors


class TestRecordFilterSerializer:
    """Test RecordFilterSerializer validation."""

    def test_empty_filters(self):
        serializer = RecordFilterSerializer(data={})

        assert serializer.is_valid()
        assert len(serializer.validated_data) == 0

    def test_valid_date(self):
        serializer = RecordFilterSerializer(data={'date': '2026-03-05'})

        assert serializer.is_valid()
        assert serializer.validated_data['date'] == '2026-03-05'

    def test_invalid_date(self):
        serializer = RecordFilterSerializer(data={'date': '2026-04-31'})

        assert not serializer.is_valid()
        assert 'date' in serializer.errors
