"""
Service layer for events.

Every write goes through here so that the conflict check and the write
happen under the scheduling lock of the event's church/resource pair.
"""

from datetime import datetime
from typing import Any, Optional
from uuid import uuid4

from fastapi.concurrency import run_in_threadpool

import utils.logging
from app.models.church import Church
from app.models.event import Event
from app.models.resource import Resource
from app.schemas.event import EventCreate, EventUpdate
from services.conflicts import find_conflict
from services.errors import ConflictError, NotFoundError, ValidationError
from services.intervals import overlaps, to_utc
from services.locks import ScheduleLock
from services.repository import CalendarRepository

logger = utils.logging.get_logger(__name__)

EVENT_FIELDS = (
    "title",
    "description",
    "responsible",
    "start_at",
    "end_at",
    "church_id",
    "resource_id",
    "all_day",
    "department_id",
    "organization_unit_id",
)
REQUIRED_FIELDS = ("title", "start_at", "end_at", "church_id", "all_day")


class EventService:
    """
    Business rules for booking, editing and cancelling events.

    Example usage:
        svc = EventService(CalendarRepository(session), MemoryScheduleLock())
        await svc.create_event(EventCreate(...))
    """

    def __init__(self, repo: CalendarRepository, lock: ScheduleLock):
        self.repo = repo
        self.lock = lock

    def list_events(
        self,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
        church_id: Optional[str] = None,
    ) -> list[Event]:
        """
        Stored events, optionally restricted to those overlapping [start, end).
        Naive bounds are read as UTC.

        :raise ValidationError: If only one bound is given or the range is empty.
        """
        if (start is None) != (end is None):
            raise ValidationError("start and end must be given together")
        events = self.repo.all_events(church_id)
        if start is None:
            return events
        start, end = to_utc(start), to_utc(end)
        if start >= end:
            raise ValidationError("start must be before end")
        return [e for e in events if overlaps(e.start_at, e.end_at, start, end)]

    def get_event(self, event_id: str) -> Event:
        event = self.repo.get(Event, event_id)
        if event is None:
            raise NotFoundError("Event", event_id)
        return event

    async def create_event(self, data: EventCreate) -> Event:
        """
        Validate and store a new event.

        :raise ValidationError: Unknown church or resource.
        :raise ConflictError: The slot is already booked.
        """
        candidate = Event(id=str(uuid4()), **data.model_dump())

        async with self.lock.hold(candidate.church_id, candidate.resource_id):
            await run_in_threadpool(self._insert, candidate)

        logger.info(f"Created event {candidate.id} for church {candidate.church_id}")
        return candidate

    async def replace_event(self, event_id: str, data: EventCreate) -> Event:
        """Full replace: every field comes from ``data``."""
        return await self._update(event_id, data.model_dump())

    async def patch_event(self, event_id: str, data: EventUpdate) -> Event:
        """Partial replace: only fields set in the request change."""
        return await self._update(event_id, data.model_dump(exclude_unset=True))

    def delete_event(self, event_id: str) -> None:
        event = self.get_event(event_id)
        self.repo.delete(event)
        self.repo.commit()
        logger.info(f"Deleted event {event_id}")

    async def _update(self, event_id: str, changes: dict[str, Any]) -> Event:
        current = await run_in_threadpool(self.get_event, event_id)
        fields = {name: getattr(current, name) for name in EVENT_FIELDS}
        fields.update(changes)

        for name in REQUIRED_FIELDS:
            if fields[name] is None:
                raise ValidationError(f"{name} cannot be null")
        if fields["start_at"] >= fields["end_at"]:
            raise ValidationError("start_at must be before end_at")

        candidate = Event(id=event_id, **fields)

        async with self.lock.hold(candidate.church_id, candidate.resource_id):
            await run_in_threadpool(self._apply, current, candidate, fields)

        logger.info(f"Updated event {event_id}")
        return current

    # The read-check-write steps below block on the database and run in a
    # worker thread while the caller holds the schedule lock.

    def _insert(self, candidate: Event) -> None:
        self._check_references(candidate)
        self._reject_conflict(candidate)
        self.repo.add(candidate)
        self.repo.commit()

    def _apply(self, current: Event, candidate: Event, fields: dict[str, Any]) -> None:
        self._check_references(candidate)
        self._reject_conflict(candidate, exclude_id=current.id)
        for name, value in fields.items():
            setattr(current, name, value)
        self.repo.commit()

    def _check_references(self, candidate: Event) -> None:
        if self.repo.get(Church, candidate.church_id) is None:
            raise ValidationError(f"Unknown church {candidate.church_id}")
        if candidate.resource_id and self.repo.get(Resource, candidate.resource_id) is None:
            raise ValidationError(f"Unknown resource {candidate.resource_id}")

    def _reject_conflict(self, candidate: Event, exclude_id: Optional[str] = None) -> None:
        clash = find_conflict(candidate, self.repo.all_events(), exclude_id=exclude_id)
        if clash is not None:
            logger.warning(
                f"Rejected booking {candidate.id}: overlaps event {clash.id} "
                f"in church {candidate.church_id}"
            )
            raise ConflictError.scheduling(clash.id, clash.title)
