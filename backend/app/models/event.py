"""
Model for scheduled church events.

Classes:
    Event (Base): SQLAlchemy model for a timed activity booked by a church,
        optionally on a specific resource.
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from . import Base
from .types import UTCDateTime


class Event(Base):
    """
    SQLAlchemy model for a scheduled event.

    Attributes:
        id (str): Primary key (uuid4 string), immutable once assigned.
        title (str): Non-empty title.
        description (Optional[str]): Free text description.
        responsible (Optional[str]): Person in charge of the event.
        start_at (datetime): Start instant (UTC, inclusive).
        end_at (datetime): End instant (UTC, exclusive).
        church_id (str): Owning church.
        resource_id (Optional[str]): Booked resource, None means the main space.
        all_day (bool): Display hint only, overlap always uses the instants.
        department_id (Optional[str]): Optional department tag.
        organization_unit_id (Optional[str]): Optional organization unit tag.
    """

    __tablename__ = "event"

    id: Mapped[str] = mapped_column(primary_key=True)
    title: Mapped[str] = mapped_column(nullable=False)
    description: Mapped[Optional[str]]
    responsible: Mapped[Optional[str]]
    start_at: Mapped[datetime] = mapped_column(UTCDateTime(), index=True, nullable=False)
    end_at: Mapped[datetime] = mapped_column(UTCDateTime(), index=True, nullable=False)
    church_id: Mapped[str] = mapped_column(
        ForeignKey("church.id", ondelete="CASCADE"), index=True, nullable=False
    )
    resource_id: Mapped[Optional[str]] = mapped_column(
        ForeignKey("resource.id", ondelete="SET NULL"), index=True, nullable=True
    )
    all_day: Mapped[bool] = mapped_column(default=False, nullable=False)
    department_id: Mapped[Optional[str]]
    organization_unit_id: Mapped[Optional[str]]

    def __repr__(self) -> str:
        return f"<Event(id={self.id}, title='{self.title}', church_id={self.church_id})>"
