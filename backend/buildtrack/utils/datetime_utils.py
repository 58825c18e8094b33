"""
Timezone-aware datetime utilities.

Milestone dates are computed on timezone-aware UTC datetimes so that
arithmetic between caller-supplied dates never mixes naive and aware values.
"""

from datetime import date, datetime, time, timezone
from typing import Optional, Union

# UTC timezone constant
UTC = timezone.utc

# Average Gregorian month length in days (365.2425 / 12)
AVERAGE_DAYS_PER_MONTH = 30.436875

DateLike = Union[date, datetime]


def now_utc() -> datetime:
    """
    Get current UTC datetime (timezone-aware).

    Returns:
        datetime: Current UTC time with tzinfo set to UTC
    """
    return datetime.now(UTC)


def ensure_utc(dt: Optional[DateLike]) -> Optional[datetime]:
    """
    Ensure a date/datetime is a timezone-aware UTC datetime.

    Args:
        dt: date, naive datetime, aware datetime, or None

    Returns:
        UTC datetime, or None if input is None. Plain dates become midnight UTC.
    """
    if dt is None:
        return None

    if not isinstance(dt, datetime):
        return datetime.combine(dt, time.min, tzinfo=UTC)

    if dt.tzinfo is None:
        # Naive datetime - assume UTC
        return dt.replace(tzinfo=UTC)

    return dt.astimezone(UTC)


def months_between(start: DateLike, end: DateLike) -> float:
    """
    Length of the range start..end in average months.

    Negative when end precedes start.

    Example:
        >>> months_between(date(2025, 1, 1), date(2026, 1, 1))
        11.99...
    """
    delta = ensure_utc(end) - ensure_utc(start)
    return delta.total_seconds() / 86400 / AVERAGE_DAYS_PER_MONTH
