"""
Error taxonomy for calendar operations.

Services raise these; ``app.main`` maps each class onto an HTTP status.
"""

from typing import Optional


class CalendarError(Exception):
    """Base class for every calendar error surfaced to callers."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(CalendarError):
    """A record is malformed: missing field, bad day/month, inverted range."""

    status_code = 400


class NotFoundError(CalendarError):
    """An update or delete referenced an id that does not exist."""

    status_code = 404

    def __init__(self, entity: str, entity_id: str):
        super().__init__(f"{entity} {entity_id} not found")
        self.entity = entity
        self.entity_id = entity_id


class ConflictError(CalendarError):
    """
    A write collides with an existing record.

    For scheduling conflicts ``conflicting_id`` and ``conflicting_title``
    identify the event already holding the slot.
    """

    status_code = 409

    def __init__(
        self,
        message: str,
        conflicting_id: Optional[str] = None,
        conflicting_title: Optional[str] = None,
    ):
        super().__init__(message)
        self.conflicting_id = conflicting_id
        self.conflicting_title = conflicting_title

    @classmethod
    def scheduling(cls, conflicting_id: str, conflicting_title: str) -> "ConflictError":
        return cls(
            f'Scheduling conflict with event "{conflicting_title}"',
            conflicting_id=conflicting_id,
            conflicting_title=conflicting_title,
        )


class LockUnavailableError(CalendarError):
    """The scheduling lock for a church/resource pair could not be acquired."""

    status_code = 503
