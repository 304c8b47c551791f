"""
Repository: SQL access for calendar records.

The calendar engine only needs "all events" and "all birthdays"; the CRUD
services additionally look records up by id and stage writes here. Commit
boundaries belong to the services, not to this class.
"""

from typing import Optional, TypeVar

from sqlalchemy import delete, func, select, update
from sqlalchemy.orm import Session

from app.models import Base
from app.models.birthday import Birthday
from app.models.church import Church
from app.models.event import Event
from app.models.resource import Resource

ModelT = TypeVar("ModelT", bound=Base)


class CalendarRepository:
    """DB access only. No business rules here."""

    def __init__(self, session: Session):
        self.session = session

    def all_events(self, church_id: Optional[str] = None) -> list[Event]:
        """All events in insertion-independent, stable order (start, id)."""
        stmt = select(Event).order_by(Event.start_at, Event.id)
        if church_id is not None:
            stmt = stmt.where(Event.church_id == church_id)
        return list(self.session.scalars(stmt))

    def all_birthdays(self, church_id: Optional[str] = None) -> list[Birthday]:
        stmt = select(Birthday).order_by(Birthday.month, Birthday.day, Birthday.name)
        if church_id is not None:
            stmt = stmt.where(Birthday.church_id == church_id)
        return list(self.session.scalars(stmt))

    def birthdays_in_month(self, month: int) -> list[Birthday]:
        stmt = (
            select(Birthday)
            .where(Birthday.month == month)
            .order_by(Birthday.day, Birthday.name)
        )
        return list(self.session.scalars(stmt))

    def all_churches(self) -> list[Church]:
        return list(self.session.scalars(select(Church).order_by(Church.name)))

    def all_resources(self) -> list[Resource]:
        return list(self.session.scalars(select(Resource).order_by(Resource.name)))

    def get(self, model: type[ModelT], record_id: str) -> Optional[ModelT]:
        return self.session.get(model, record_id)

    def find_by_name(self, model: type[ModelT], name: str) -> Optional[ModelT]:
        """Case-insensitive lookup for models with a unique ``name``."""
        stmt = select(model).where(func.lower(model.name) == name.lower())
        return self.session.scalars(stmt).first()

    def add(self, record: Base) -> None:
        self.session.add(record)

    def delete(self, record: Base) -> None:
        self.session.delete(record)

    def delete_church_events(self, church_id: str) -> None:
        self.session.execute(delete(Event).where(Event.church_id == church_id))

    def release_resource(self, resource_id: str) -> None:
        """Move every event booked on ``resource_id`` back to the main space."""
        self.session.execute(
            update(Event).where(Event.resource_id == resource_id).values(resource_id=None)
        )

    def commit(self) -> None:
        self.session.commit()

    def refresh(self, record: Base) -> None:
        self.session.refresh(record)

    def rollback(self) -> None:
        self.session.rollback()
