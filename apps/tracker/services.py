"""Builds record stores wired to the project's storage and settings."""

from typing import Optional

from django.conf import settings

from .record_store import IdGenerator, RecordStore
from .storage import DatabaseKeyValueStorage


def open_record_store(*, id_generator: Optional[IdGenerator] = None) -> RecordStore:
    """
    Create a RecordStore on the database storage and load it.

    Options come from settings.DRINK_TRACKER:
        DEFAULT_SHOPS: Catalog used when no valid catalog is stored
        RECORDS_KEY: Storage key for the record list
        SHOPS_KEY: Storage key for the shop catalog
    """
    options = settings.DRINK_TRACKER
    store = RecordStore(
        storage=DatabaseKeyValueStorage(),
        id_generator=id_generator,
        default_shops=options['DEFAULT_SHOPS'],
        records_key=options['RECORDS_KEY'],
        shops_key=options['SHOPS_KEY'],
    )
    return store.load()
