"""
FastAPI dependency providers. Tests override ``get_session`` and
``get_schedule_lock`` through ``app.dependency_overrides``.
"""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends
from sqlalchemy.orm import Session

from services.birthdays import BirthdayService
from services.directory import ChurchService, ResourceService
from services.events import EventService
from services.locks import ScheduleLock, schedule_lock_from_env
from services.occurrences import OccurrenceService
from services.repository import CalendarRepository

from .db import get_session


@lru_cache
def get_schedule_lock() -> ScheduleLock:
    """One lock registry per process, shared by every request."""
    return schedule_lock_from_env()


def get_repository(session: Annotated[Session, Depends(get_session)]) -> CalendarRepository:
    return CalendarRepository(session)


Repository = Annotated[CalendarRepository, Depends(get_repository)]


def get_event_service(
    repo: Repository, lock: Annotated[ScheduleLock, Depends(get_schedule_lock)]
) -> EventService:
    return EventService(repo, lock)


def get_birthday_service(repo: Repository) -> BirthdayService:
    return BirthdayService(repo)


def get_church_service(repo: Repository) -> ChurchService:
    return ChurchService(repo)


def get_resource_service(repo: Repository) -> ResourceService:
    return ResourceService(repo)


def get_occurrence_service(repo: Repository) -> OccurrenceService:
    return OccurrenceService(repo)
