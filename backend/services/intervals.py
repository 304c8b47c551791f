"""
Half-open interval helpers shared by conflict detection and aggregation.
"""

from datetime import date, datetime, time, timedelta, timezone


def overlaps(
    a_start: datetime, a_end: datetime, b_start: datetime, b_end: datetime
) -> bool:
    """
    Whether ``[a_start, a_end)`` and ``[b_start, b_end)`` overlap.

    Intervals that only touch (one ends when the other starts) do not
    overlap. Both ranges must already be well ordered.
    """
    return a_start < b_end and a_end > b_start


def to_utc(value: datetime) -> datetime:
    """Return ``value`` as an aware UTC datetime, reading naive values as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def day_bounds(day: date) -> tuple[datetime, datetime]:
    """The whole UTC day ``[day 00:00, day+1 00:00)``."""
    start = datetime.combine(day, time.min, tzinfo=timezone.utc)
    return start, start + timedelta(days=1)


def month_bounds(year: int, month: int) -> tuple[datetime, datetime]:
    """The UTC range covering a calendar month."""
    start = datetime(year, month, 1, tzinfo=timezone.utc)
    if month == 12:
        end = datetime(year + 1, 1, 1, tzinfo=timezone.utc)
    else:
        end = datetime(year, month + 1, 1, tzinfo=timezone.utc)
    return start, end
