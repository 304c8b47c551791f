"""
Read side of the calendar: the occurrence stream for a period.
"""

from datetime import datetime, timezone
from typing import Optional

from app.schemas.occurrence import Occurrence
from services.aggregator import occurrences_in_month, occurrences_in_range
from services.errors import ValidationError
from services.intervals import to_utc
from services.repository import CalendarRepository


class OccurrenceService:
    def __init__(self, repo: CalendarRepository):
        self.repo = repo

    def between(
        self, start: datetime, end: datetime, church_id: Optional[str] = None
    ) -> tuple[Occurrence, ...]:
        """Occurrences overlapping [start, end); naive bounds are read as UTC."""
        start, end = to_utc(start), to_utc(end)
        if start >= end:
            raise ValidationError("start must be before end")
        return occurrences_in_range(
            self.repo.all_events(church_id),
            self.repo.all_birthdays(church_id),
            start,
            end,
        )

    def for_month(
        self, month: int, year: Optional[int] = None, church_id: Optional[str] = None
    ) -> tuple[Occurrence, ...]:
        """Occurrences in ``month`` of ``year`` (the current UTC year by default)."""
        if not 1 <= month <= 12:
            raise ValidationError("month must be between 1 and 12")
        if year is None:
            year = datetime.now(timezone.utc).year
        return occurrences_in_month(
            self.repo.all_events(church_id),
            self.repo.all_birthdays(church_id),
            year,
            month,
        )
