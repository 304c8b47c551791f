"""
Pydantic schema for calendar occurrences.
"""

from datetime import date, datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict


class OccurrenceKind(Enum):
    """
    What produced an occurrence.

    Attributes:
        EVENT: A timed event.
        BIRTHDAY: A birthday projected onto a concrete year.
    """

    EVENT = "event"
    BIRTHDAY = "birthday"


class Occurrence(BaseModel):
    """
    A single dated calendar entry, computed per query and never stored.

    Attributes:
        kind (OccurrenceKind): Event or birthday.
        date (date): Calendar day (UTC) the entry is listed under.
        start_at (datetime): Event start, or midnight UTC for birthdays.
        end_at (datetime): Event end, or the following midnight for birthdays.
        source_id (str): Id of the event or birthday record.
        label (str): Event title or person's name.
        church_id (Optional[str]): Owning church.
        resource_id (Optional[str]): Booked resource (events only).
        department_id (Optional[str]): Department tag.
        organization_unit_id (Optional[str]): Organization unit tag.
        age (Optional[int]): Age reached on a birthday, when the birth year is known.
    """

    model_config = ConfigDict(frozen=True)

    kind: OccurrenceKind
    date: date
    start_at: datetime
    end_at: datetime
    source_id: str
    label: str
    church_id: Optional[str] = None
    resource_id: Optional[str] = None
    department_id: Optional[str] = None
    organization_unit_id: Optional[str] = None
    age: Optional[int] = None
