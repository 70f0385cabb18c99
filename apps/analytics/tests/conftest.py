import pytest
from rest_framework.test import APIClient
from apps.tracker.record_store import DrinkDraft, DrinkRecord, RecordStore
from apps.tracker.services import open_record_store


class MemoryStorage:
    """Dict-backed key-value storage, no database needed."""

    def __init__(self, values=None):
        self.values = dict(values or {})

    def get(self, key):
        return self.values.get(key)

    def set_many(self, values):
        self.values.update(values)


class SequentialIdGenerator:
    def __init__(self):
        self.count = 0

    def next_id(self):
        self.count += 1
        return f'drink-{self.count}'


@pytest.fixture
def api_client():
    """Return an API client."""
    return APIClient()


@pytest.fixture
def make_record():
    """Return a factory for records that never touch a store."""
    counter = {'n': 0}

    def _make(date, price=50, shop='50嵐', item='Milk Tea'):
        counter['n'] += 1
        return DrinkRecord(
            id=f'record-{counter["n"]}',
            date=date,
            shop=shop,
            item=item,
            sweetness='',
            ice='',
            price=price,
        )
    return _make


@pytest.fixture
def memory_store():
    """Return a loaded record store on in-memory storage."""
    return RecordStore(
        storage=MemoryStorage(),
        id_generator=SequentialIdGenerator(),
    ).load()


@pytest.fixture
def add_drink():
    """Return a helper adding a drink to a store by keyword arguments."""
    def _add(store, date, price=50, shop='50嵐', item='Milk Tea'):
        return store.add(DrinkDraft(shop=shop, item=item, price=price, date=date))
    return _add


@pytest.fixture
def db_store(db):
    """Return the project-configured store on the test database."""
    return open_record_store(id_generator=SequentialIdGenerator())
