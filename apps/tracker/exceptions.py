"""
Domain exceptions for tracker app.

This module defines the exception hierarchy for record store errors. These
exceptions represent validation and invariant violations, separate from
HTTP concerns; views translate them into responses.

Exception Hierarchy:
    TrackerServiceError (base)
    ├── ParseError
    ├── InvalidRecordError
    ├── CapacityExceeded
    ├── DuplicateRecordIdError
    └── StorageError

Usage:
    from apps.tracker.exceptions import CapacityExceeded

    try:
        store.add(draft)
    except CapacityExceeded as e:
        return Response({'error': str(e)}, status=409)
"""


class TrackerServiceError(Exception):
    """Base exception for all tracker service errors."""
    pass


class ParseError(TrackerServiceError, ValueError):
    """
    Raised when a date string is malformed or not a real calendar day.

    Dates must be canonical YYYY-MM-DD strings (e.g. '2026-03-05').

    Example:
        raise ParseError("Invalid calendar day: '2026-04-31'")
    """
    pass


class InvalidRecordError(TrackerServiceError, ValueError):
    """Raised when a draft has an empty shop/item or an invalid price."""
    pass


class CapacityExceeded(TrackerServiceError):
    """
    Raised when the target day already holds the maximum number of records.

    The store is left untouched when this is raised.
    """

    def __init__(self, date, capacity):
        self.date = date
        self.capacity = capacity
        super().__init__(
            f"{date} already has {capacity} records"
        )


class DuplicateRecordIdError(TrackerServiceError):
    """Raised when the id generator returns an id that is already in use."""
    pass


class StorageError(TrackerServiceError):
    """Raised when the key-value storage backend cannot be read or written."""
    pass
