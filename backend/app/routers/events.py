"""
Event endpoints. Conflicts surface as 409 with the colliding event's title.
"""

from datetime import datetime
from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Query, status

from services.events import EventService
from services.intervals import to_utc

from ..dependencies import get_event_service
from ..schemas.event import Event, EventCreate, EventUpdate

router = APIRouter(prefix="/events", tags=["events"])

Service = Annotated[EventService, Depends(get_event_service)]


@router.get("", response_model=list[Event])
def list_events(
    svc: Service,
    start: Annotated[Optional[datetime], Query()] = None,
    end: Annotated[Optional[datetime], Query()] = None,
    church_id: Annotated[Optional[str], Query()] = None,
):
    """
    List events, optionally only those overlapping [start, end).
    """
    return svc.list_events(
        start=to_utc(start) if start else None,
        end=to_utc(end) if end else None,
        church_id=church_id,
    )


@router.get("/{event_id}", response_model=Event)
def get_event(event_id: str, svc: Service):
    return svc.get_event(event_id)


@router.post("", response_model=Event, status_code=status.HTTP_201_CREATED)
async def create_event(data: EventCreate, svc: Service):
    return await svc.create_event(data)


@router.put("/{event_id}", response_model=Event)
async def replace_event(event_id: str, data: EventCreate, svc: Service):
    return await svc.replace_event(event_id, data)


@router.patch("/{event_id}", response_model=Event)
async def patch_event(event_id: str, data: EventUpdate, svc: Service):
    return await svc.patch_event(event_id, data)


@router.delete("/{event_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_event(event_id: str, svc: Service):
    svc.delete_event(event_id)
