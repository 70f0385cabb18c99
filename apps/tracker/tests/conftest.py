import pytest
from rest_framework.test import APIClient
from apps.tracker.record_store import DrinkDraft, RecordStore
from apps.tracker.storage import DatabaseKeyValueStorage


class SequentialIdGenerator:
    """Deterministic ids: drink-1, drink-2, ..."""

    def __init__(self, prefix='drink'):
        self.prefix = prefix
        self.count = 0

    def next_id(self):
        self.count += 1
        return f'{self.prefix}-{self.count}'


@pytest.fixture
def api_client():
    """Return an API client."""
    return APIClient()


@pytest.fixture
def id_generator():
    """Return a generator producing drink-1, drink-2, ..."""
    return SequentialIdGenerator()


@pytest.fixture
def storage(db):
    """Return key-value storage on the test database."""
    return DatabaseKeyValueStorage()


@pytest.fixture
def record_store(storage, id_generator):
    """Return a loaded, empty record store with two default shops."""
    return RecordStore(
        storage=storage,
        id_generator=id_generator,
        default_shops=['50嵐', '迷客夏'],
    ).load()


@pytest.fixture
def make_draft():
    """Return a factory for drafts; keyword arguments override defaults."""
    def _make(**overrides):
        data = {
            'shop': 'A',
            'item': 'Milk Tea',
            'sweetness': 'Half',
            'ice': 'Less ice',
            'price': 50,
            'date': '2026-03-05',
        }
        data.update(overrides)
        return DrinkDraft(**data)
    return _make
