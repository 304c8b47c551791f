"""
Calendar view: events and birthdays for a period, in one ordered list.
"""

from datetime import datetime
from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Query

from services.errors import ValidationError
from services.intervals import to_utc
from services.occurrences import OccurrenceService

from ..dependencies import get_occurrence_service
from ..schemas.occurrence import Occurrence

router = APIRouter(prefix="/occurrences", tags=["calendar"])

Service = Annotated[OccurrenceService, Depends(get_occurrence_service)]


@router.get("", response_model=list[Occurrence])
def list_occurrences(
    svc: Service,
    start: Annotated[Optional[datetime], Query()] = None,
    end: Annotated[Optional[datetime], Query()] = None,
    month: Annotated[Optional[int], Query()] = None,
    year: Annotated[Optional[int], Query()] = None,
    church_id: Annotated[Optional[str], Query()] = None,
):
    """
    Either ``start``/``end`` (ISO-8601, naive values read as UTC) or
    ``month`` with an optional ``year`` (defaults to the current year).
    """
    if start is not None and end is not None:
        return list(svc.between(to_utc(start), to_utc(end), church_id=church_id))
    if month is not None:
        return list(svc.for_month(month, year=year, church_id=church_id))
    raise ValidationError("Provide start and end, or month")
