"""
Tracker App - Drink Purchase Records

This app owns the authoritative collection of drink purchase records and the
shop catalog, and persists both to a local durable key-value store.

Key Features:
- Canonical YYYY-MM-DD date handling (DateCodec)
- Per-day capacity invariant (at most two drinks per calendar day)
- Monotonically growing shop catalog in first-appearance order
- Corruption-tolerant load from the key-value store

Architecture:
- Models: StoredEntry (one row per storage key)
- Storage: DatabaseKeyValueStorage
- Store: RecordStore, DrinkRecord, DrinkDraft
- Views: thin JSON adapters for the entry form and day view
- Exceptions: Domain exception hierarchy
"""

__version__ = '1.0.0'
