"""
Pydantic schemas for birthday models.
"""

from datetime import date
from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from services.recurrence import is_valid_day_month

from .common import NonEmptyStr, OptionalText

Day = Annotated[int, Field(ge=1, le=31)]
Month = Annotated[int, Field(ge=1, le=12)]
BirthYear = Annotated[int, Field(ge=1, le=9999)]


class BirthdayCreate(BaseModel):
    """
    Payload for registering a birthday.

    Attributes:
        name (str): Person's name.
        day (int): Day of month, 1-31.
        month (int): Month, 1-12. Together with day it must exist in a leap year.
        birth_year (Optional[int]): Year of birth.
        church_id (Optional[str]): Owning church.
        notes (Optional[str]): Free text notes.
        department_id (Optional[str]): Department tag.
        organization_unit_id (Optional[str]): Organization unit tag.
    """

    name: NonEmptyStr
    day: Day
    month: Month
    birth_year: Optional[BirthYear] = None
    church_id: OptionalText = None
    notes: OptionalText = None
    department_id: OptionalText = None
    organization_unit_id: OptionalText = None

    @model_validator(mode="after")
    def check_day_month(self) -> "BirthdayCreate":
        if not is_valid_day_month(self.day, self.month):
            raise ValueError(f"{self.day}/{self.month} is not a valid date")
        return self


class BirthdayUpdate(BaseModel):
    """Partial update of a birthday, day/month are re-checked after merging."""

    name: Optional[NonEmptyStr] = None
    day: Optional[Day] = None
    month: Optional[Month] = None
    birth_year: Optional[BirthYear] = None
    church_id: OptionalText = None
    notes: OptionalText = None
    department_id: OptionalText = None
    organization_unit_id: OptionalText = None


class Birthday(BaseModel):
    """
    Pydantic schema for birthday data.
    """

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    day: int
    month: int
    birth_year: Optional[int]
    church_id: Optional[str]
    notes: Optional[str]
    department_id: Optional[str]
    organization_unit_id: Optional[str]


class BirthdayListItem(BaseModel):
    """
    List-view projection. Birth year and notes are left out on purpose.
    """

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    day: int
    month: int
    church_id: Optional[str]
    department_id: Optional[str]
    organization_unit_id: Optional[str]


class UpcomingBirthday(BaseModel):
    id: str
    name: str
    day: int
    month: int
    church_id: Optional[str]
    date: date
    days_until: int
    age: Optional[int]


class BirthdayStats(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    total: int
    this_month: int
    next_month: int
    next_7_days: int
    busiest_month: int
    busiest_month_name: str
    busiest_month_count: int
