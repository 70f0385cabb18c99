"""
Domain exceptions for analytics app.

This module defines domain-specific exceptions that are raised by the
analytics functions. These exceptions represent invalid inputs, separate
from HTTP concerns.

Exception Hierarchy:
    AnalyticsServiceError (base)
    ├── InvalidFieldError
    ├── InvalidMonthError
    └── InvalidYearError

Usage:
    from apps.analytics.exceptions import InvalidFieldError

    if field not in RANKING_FIELDS:
        raise InvalidFieldError(f"Invalid field: {field}")
"""


class AnalyticsServiceError(Exception):
    """
    Base exception for all analytics service errors.

    All domain-specific exceptions in the analytics app inherit from this
    class, making it easy to catch all analytics errors in views:

        try:
            data = DrinkAnalytics.rank_frequency(records, 'price')
        except AnalyticsServiceError as e:
            return Response({'error': str(e)}, status=400)
    """

    pass


class InvalidFieldError(AnalyticsServiceError):
    """
    Raised when a ranking field other than 'shop' or 'item' is requested.

    Example:
        raise InvalidFieldError(
            "Invalid field: 'price'. Valid options: shop, item"
        )
    """

    pass


class InvalidMonthError(AnalyticsServiceError):
    """
    Raised when a month is outside 1-12.

    Example:
        raise InvalidMonthError("Month must be between 1 and 12, got 13")
    """

    pass


class InvalidYearError(AnalyticsServiceError):
    """
    Raised when a year is not a positive integer.

    Example:
        raise InvalidYearError("Year must be positive, got 0")
    """

    pass
