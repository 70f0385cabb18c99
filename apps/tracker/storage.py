"""Local durable key-value storage backed by the Django database."""

from typing import Dict, Optional, Protocol

from django.db import DatabaseError, transaction

from .exceptions import StorageError
from .models import StoredEntry


class KeyValueStorage(Protocol):
    """Interface the record store persists itself through."""

    def get(self, key: str) -> Optional[str]:
        ...

    def set_many(self, values: Dict[str, str]) -> None:
        ...


class DatabaseKeyValueStorage:
    """
    Key-value storage using one StoredEntry row per key.

    Writes of several keys happen in a single transaction, so a crash leaves
    either all of them or none of them updated.
    """

    def get(self, key: str) -> Optional[str]:
        try:
            entry = StoredEntry.objects.filter(key=key).only('value').first()
        except DatabaseError as e:
            raise StorageError(f"Cannot read storage key {key!r}: {e}") from e
        return entry.value if entry else None

    def set(self, key: str, value: str) -> None:
        self.set_many({key: value})

    def set_many(self, values: Dict[str, str]) -> None:
        try:
            with transaction.atomic():
                for key, value in values.items():
                    StoredEntry.objects.update_or_create(
                        key=key,
                        defaults={'value': value},
                    )
        except DatabaseError as e:
            raise StorageError(f"Cannot write storage keys {', '.join(values)}: {e}") from e
