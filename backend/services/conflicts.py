"""
Scheduling conflict detection.

Two events compete for the same slot only when they belong to the same
church and resolve to the same resource identity. Events without a resource
all share the church's implicit main space.
"""

from datetime import datetime
from typing import Iterable, Optional, Protocol

from services.intervals import overlaps

MAIN_SPACE = "__main_space__"


class Schedulable(Protocol):
    id: str
    church_id: str
    resource_id: Optional[str]
    start_at: datetime
    end_at: datetime


def resource_identity(resource_id: Optional[str]) -> str:
    """
    Comparable key for the resource an event occupies.
    :param resource_id: Booked resource id, or None/empty for the main space.
    :return: The id itself, or MAIN_SPACE.
    """
    return resource_id or MAIN_SPACE


def find_conflict(
    candidate: Schedulable,
    existing: Iterable[Schedulable],
    exclude_id: Optional[str] = None,
) -> Optional[Schedulable]:
    """
    Return the first existing event that collides with ``candidate``.

    :param candidate: Event being created or updated, with a valid range.
    :param existing: Events already stored.
    :param exclude_id: Id to skip, the candidate's own id on update.
    :return: The colliding event, or None.
    """
    identity = resource_identity(candidate.resource_id)
    for other in existing:
        if exclude_id is not None and other.id == exclude_id:
            continue
        if other.church_id != candidate.church_id:
            continue
        if resource_identity(other.resource_id) != identity:
            continue
        if overlaps(candidate.start_at, candidate.end_at, other.start_at, other.end_at):
            return other
    return None
