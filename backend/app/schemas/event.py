"""
Pydantic schemas for event models.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, model_validator

from .common import NonEmptyStr, OptionalText, UTCInstant


class EventCreate(BaseModel):
    """
    Payload for booking a new event.

    Attributes:
        title (str): Non-empty title.
        description (Optional[str]): Free text description.
        responsible (Optional[str]): Person in charge.
        start_at (datetime): Start instant, naive values are read as UTC.
        end_at (datetime): End instant, must be after start_at.
        church_id (str): Owning church.
        resource_id (Optional[str]): Booked resource, None for the main space.
        all_day (bool): Display hint.
        department_id (Optional[str]): Department tag.
        organization_unit_id (Optional[str]): Organization unit tag.
    """

    title: NonEmptyStr
    description: OptionalText = None
    responsible: OptionalText = None
    start_at: UTCInstant
    end_at: UTCInstant
    church_id: NonEmptyStr
    resource_id: OptionalText = None
    all_day: bool = False
    department_id: OptionalText = None
    organization_unit_id: OptionalText = None

    @model_validator(mode="after")
    def check_range(self) -> "EventCreate":
        if self.start_at >= self.end_at:
            raise ValueError("start_at must be before end_at")
        return self


class EventUpdate(BaseModel):
    """
    Partial update of an event. Only fields present in the request are
    applied; the merged record is validated again by the service.
    """

    title: Optional[NonEmptyStr] = None
    description: OptionalText = None
    responsible: OptionalText = None
    start_at: Optional[UTCInstant] = None
    end_at: Optional[UTCInstant] = None
    church_id: Optional[NonEmptyStr] = None
    resource_id: OptionalText = None
    all_day: Optional[bool] = None
    department_id: OptionalText = None
    organization_unit_id: OptionalText = None


class Event(BaseModel):
    """
    Pydantic schema for event data.
    """

    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    description: Optional[str]
    responsible: Optional[str]
    start_at: datetime
    end_at: datetime
    church_id: str
    resource_id: Optional[str]
    all_day: bool
    department_id: Optional[str]
    organization_unit_id: Optional[str]
