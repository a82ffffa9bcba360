"""
Datetime utilities.

Provides timezone-aware datetime functions.
"""

from datetime import UTC, date, datetime

from affiliates.config.constants import PAYOUT_DAY_OF_MONTH


def utc_now() -> datetime:
    """
    Get current UTC datetime with timezone info.

    Returns:
        Current datetime in UTC with timezone awareness
    """
    return datetime.now(UTC)


def ensure_utc(value: datetime) -> datetime:
    """
    Make a datetime timezone-aware.

    SQLite returns naive datetimes; they are stored as UTC.

    Args:
        value: Naive or aware datetime

    Returns:
        Aware datetime in UTC
    """
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def next_payout_date(today: date) -> date:
    """
    Get the payout date following the given day.

    Payouts happen on the 15th of the month after the current one.

    Examples:
        >>> next_payout_date(date(2024, 3, 20))
        datetime.date(2024, 4, 15)
        >>> next_payout_date(date(2024, 12, 1))
        datetime.date(2025, 1, 15)
    """
    if today.month == 12:
        return date(today.year + 1, 1, PAYOUT_DAY_OF_MONTH)
    return date(today.year, today.month + 1, PAYOUT_DAY_OF_MONTH)
