"""
Record Store Module
===================

The authoritative collection of drink purchase records and the shop catalog.

Classes:
    DrinkDraft: Input for a new record (everything except the id).
    DrinkRecord: One immutable purchase record.
    RecordStore: Owns the records and the catalog, enforces the per-day
        capacity, and persists itself after every mutation.
    UUIDGenerator: Default id source.

Example:
    Adding a drink::

        from apps.tracker.record_store import RecordStore, DrinkDraft
        from apps.tracker.storage import DatabaseKeyValueStorage

        store = RecordStore(storage=DatabaseKeyValueStorage()).load()
        record = store.add(DrinkDraft(
            shop='50嵐',
            item='Milk Tea',
            sweetness='Half',
            ice='Less ice',
            price=50,
            date='2026-03-05',
        ))

Note:
    The store keeps no state besides its two collections. Every successful
    add/remove writes both of them back before returning, so durable state
    always matches the last completed operation.
"""

import json
import logging
import uuid
from collections import Counter
from dataclasses import asdict, dataclass
from typing import Iterable, List, Optional, Protocol, Tuple

from .dates import parse_date
from .exceptions import (
    CapacityExceeded,
    DuplicateRecordIdError,
    InvalidRecordError,
    StorageError,
)
from .storage import KeyValueStorage

logger = logging.getLogger(__name__)

DAY_CAPACITY = 2
RECORDS_KEY = 'records'
SHOPS_KEY = 'shops'

RECORD_FIELDS = ('id', 'date', 'shop', 'item', 'sweetness', 'ice', 'price')


class IdGenerator(Protocol):
    def next_id(self) -> str:
        ...


class UUIDGenerator:
    """Random UUID4 identifiers."""

    def next_id(self) -> str:
        return str(uuid.uuid4())


def _require_name(value, field: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise InvalidRecordError(f"{field} must be a non-empty string")
    return value


def _require_text(value, field: str) -> str:
    if not isinstance(value, str):
        raise InvalidRecordError(f"{field} must be a string")
    return value


def _require_price(value) -> int:
    # bool is an int subclass
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise InvalidRecordError(
            f"price must be a non-negative integer, got {value!r}"
        )
    return value


@dataclass(frozen=True)
class DrinkDraft:
    """What the entry form supplies for a new record."""

    shop: str
    item: str
    price: int
    date: str
    sweetness: str = ''
    ice: str = ''


@dataclass(frozen=True)
class DrinkRecord:
    """One drink purchase attributed to a calendar day."""

    id: str
    date: str
    shop: str
    item: str
    sweetness: str
    ice: str
    price: int

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data) -> 'DrinkRecord':
        """
        Build a record from its JSON object form.

        Raises:
            InvalidRecordError: If a field is missing or has a bad value
            ParseError: If the date is not a canonical day string
        """
        if not isinstance(data, dict):
            raise InvalidRecordError(f"Record must be an object, got {type(data).__name__}")

        missing = [field for field in RECORD_FIELDS if field not in data]
        if missing:
            raise InvalidRecordError(f"Record is missing fields: {', '.join(missing)}")

        parse_date(data['date'])
        return cls(
            id=_require_name(data['id'], 'id'),
            date=data['date'],
            shop=_require_name(data['shop'], 'shop'),
            item=_require_name(data['item'], 'item'),
            sweetness=_require_text(data['sweetness'], 'sweetness'),
            ice=_require_text(data['ice'], 'ice'),
            price=_require_price(data['price']),
        )


def _check_invariants(records: List[DrinkRecord]) -> None:
    ids = Counter(record.id for record in records)
    duplicated = [record_id for record_id, count in ids.items() if count > 1]
    if duplicated:
        raise InvalidRecordError(f"Duplicate record ids: {', '.join(duplicated)}")

    per_day = Counter(record.date for record in records)
    overfull = sorted(day for day, count in per_day.items() if count > DAY_CAPACITY)
    if overfull:
        raise InvalidRecordError(f"Days over capacity: {', '.join(overfull)}")


class RecordStore:
    """
    Owns the drink records and the shop catalog.

    Build one, call load(), then pass it to whatever needs to read or
    mutate records. Derived views (statistics, rankings, calendar grids)
    are recomputed by the caller from all_records()/records_on().

    Args:
        storage: Key-value storage with get() and set_many()
        id_generator: Source of record ids (defaults to UUID4)
        default_shops: Catalog used when nothing valid is persisted
    """

    def __init__(
        self,
        storage: KeyValueStorage,
        id_generator: Optional[IdGenerator] = None,
        default_shops: Iterable[str] = (),
        records_key: str = RECORDS_KEY,
        shops_key: str = SHOPS_KEY,
    ):
        self._storage = storage
        self._id_generator = id_generator or UUIDGenerator()
        self._default_shops = list(dict.fromkeys(default_shops))
        self._records_key = records_key
        self._shops_key = shops_key

        self._records: List[DrinkRecord] = []
        self._shops: List[str] = list(self._default_shops)

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    def load(self) -> 'RecordStore':
        """
        Restore records and catalog from storage.

        Missing or unusable data at either key is replaced by its default
        (no records / the default shops). Never raises for bad data.
        """
        self._records = self._load_records()
        self._shops = self._load_shops()
        logger.debug(
            "Loaded %d records and %d shops", len(self._records), len(self._shops)
        )
        return self

    def _read_json(self, key: str):
        raw = self._storage.get(key)
        if raw is None:
            return None
        return json.loads(raw)

    def _load_records(self) -> List[DrinkRecord]:
        try:
            data = self._read_json(self._records_key)
            if data is None:
                return []
            if not isinstance(data, list):
                raise InvalidRecordError("records entry is not a JSON array")
            records = [DrinkRecord.from_dict(item) for item in data]
            _check_invariants(records)
        except (ValueError, StorageError) as e:
            logger.warning("Ignoring stored %r entry: %s", self._records_key, e)
            return []
        return records

    def _load_shops(self) -> List[str]:
        try:
            data = self._read_json(self._shops_key)
            if data is None:
                return list(self._default_shops)
            if not isinstance(data, list) or not all(isinstance(s, str) for s in data):
                raise InvalidRecordError("shops entry is not a JSON array of strings")
        except (ValueError, StorageError) as e:
            logger.warning("Ignoring stored %r entry: %s", self._shops_key, e)
            return list(self._default_shops)
        return list(dict.fromkeys(data))

    def _persist(self) -> None:
        self._storage.set_many({
            self._records_key: json.dumps(
                [record.to_dict() for record in self._records],
                ensure_ascii=False,
            ),
            self._shops_key: json.dumps(self._shops, ensure_ascii=False),
        })

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------

    def add(self, draft: DrinkDraft) -> DrinkRecord:
        """
        Create a record from a draft and persist it.

        Args:
            draft: Shop, item, sweetness, ice, price and target date

        Returns:
            The created DrinkRecord with a fresh id

        Raises:
            ParseError: If draft.date is not a canonical day
            InvalidRecordError: If shop/item is empty or price is invalid
            CapacityExceeded: If the day already holds DAY_CAPACITY records
            DuplicateRecordIdError: If the id generator repeats an id
        """
        parse_date(draft.date)
        shop = _require_name(draft.shop, 'shop')
        item = _require_name(draft.item, 'item')
        sweetness = _require_text(draft.sweetness, 'sweetness')
        ice = _require_text(draft.ice, 'ice')
        price = _require_price(draft.price)

        if not self.has_capacity(draft.date):
            logger.info("Rejected drink on %s: day is full", draft.date)
            raise CapacityExceeded(draft.date, DAY_CAPACITY)

        record_id = self._id_generator.next_id()
        if any(record.id == record_id for record in self._records):
            raise DuplicateRecordIdError(f"Record id {record_id!r} is already in use")

        record = DrinkRecord(
            id=record_id,
            date=draft.date,
            shop=shop,
            item=item,
            sweetness=sweetness,
            ice=ice,
            price=price,
        )

        previous_records, previous_shops = self._records, self._shops
        self._records = previous_records + [record]
        if shop not in previous_shops:
            self._shops = previous_shops + [shop]

        try:
            self._persist()
        except Exception:
            self._records, self._shops = previous_records, previous_shops
            raise

        logger.info("Added drink %s on %s (%s, %s)", record.id, record.date, shop, item)
        return record

    def remove(self, record_id: str) -> bool:
        """
        Delete a record by id. Unknown ids are a no-op.

        Returns:
            True if a record was removed
        """
        previous_records = self._records
        self._records = [record for record in previous_records if record.id != record_id]
        removed = len(self._records) != len(previous_records)

        try:
            self._persist()
        except Exception:
            self._records = previous_records
            raise

        if removed:
            logger.info("Removed drink %s", record_id)
        return removed

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def records_on(self, date: str) -> Tuple[DrinkRecord, ...]:
        """Records on a canonical day string, in insertion order."""
        return tuple(record for record in self._records if record.date == date)

    def all_records(self) -> Tuple[DrinkRecord, ...]:
        return tuple(self._records)

    def shops(self) -> Tuple[str, ...]:
        return tuple(self._shops)

    def get(self, record_id: str) -> Optional[DrinkRecord]:
        return next((record for record in self._records if record.id == record_id), None)

    def remaining_capacity(self, date: str) -> int:
        return max(DAY_CAPACITY - len(self.records_on(date)), 0)

    def has_capacity(self, date: str) -> bool:
        return self.remaining_capacity(date) > 0
