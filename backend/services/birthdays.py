"""
Service layer for birthdays: CRUD plus the read-time recurrence queries
(month listing, upcoming reminders, statistics).
"""

from datetime import date, datetime, timezone
from typing import Any, Optional
from uuid import uuid4

import utils.logging
from app.models.birthday import Birthday
from app.models.church import Church
from app.schemas.birthday import BirthdayCreate, BirthdayUpdate
from services.errors import NotFoundError, ValidationError
from services.recurrence import (
    BirthdayStats,
    Upcoming,
    birthday_stats,
    is_valid_day_month,
    upcoming,
)
from services.repository import CalendarRepository

logger = utils.logging.get_logger(__name__)

REQUIRED_FIELDS = ("name", "day", "month")


def utc_today() -> date:
    return datetime.now(timezone.utc).date()


class BirthdayService:
    def __init__(self, repo: CalendarRepository):
        self.repo = repo

    def list_birthdays(self, church_id: Optional[str] = None) -> list[Birthday]:
        return self.repo.all_birthdays(church_id)

    def get_birthday(self, birthday_id: str) -> Birthday:
        birthday = self.repo.get(Birthday, birthday_id)
        if birthday is None:
            raise NotFoundError("Birthday", birthday_id)
        return birthday

    def create_birthday(self, data: BirthdayCreate) -> Birthday:
        """
        :raise ValidationError: ``church_id`` names no stored church.
        """
        self._check_church(data.church_id)
        birthday = Birthday(id=str(uuid4()), **data.model_dump())
        self.repo.add(birthday)
        self.repo.commit()
        logger.info(f"Created birthday {birthday.id}")
        return birthday

    def patch_birthday(self, birthday_id: str, data: BirthdayUpdate) -> Birthday:
        """
        Apply the fields set in ``data`` and re-check the merged day/month.

        :raise NotFoundError: Unknown id.
        :raise ValidationError: A required field is cleared or the merged
            day/month is not a date (e.g. changing only the month of 31 Jan to 4).
            Also raised for an unknown ``church_id``.
        """
        birthday = self.get_birthday(birthday_id)
        changes: dict[str, Any] = data.model_dump(exclude_unset=True)

        for name in REQUIRED_FIELDS:
            if name in changes and changes[name] is None:
                raise ValidationError(f"{name} cannot be null")
        day = changes.get("day", birthday.day)
        month = changes.get("month", birthday.month)
        if not is_valid_day_month(day, month):
            logger.warning(f"Rejected birthday update {birthday_id}: {day}/{month}")
            raise ValidationError(f"{day}/{month} is not a valid date")
        if "church_id" in changes:
            self._check_church(changes["church_id"])

        for name, value in changes.items():
            setattr(birthday, name, value)
        self.repo.commit()
        logger.info(f"Updated birthday {birthday_id}")
        return birthday

    def delete_birthday(self, birthday_id: str) -> None:
        birthday = self.get_birthday(birthday_id)
        self.repo.delete(birthday)
        self.repo.commit()
        logger.info(f"Deleted birthday {birthday_id}")

    def birthdays_in_month(self, month: int) -> list[Birthday]:
        if not 1 <= month <= 12:
            raise ValidationError("month must be between 1 and 12")
        return self.repo.birthdays_in_month(month)

    def upcoming(
        self,
        within_days: int = 7,
        reference: Optional[date] = None,
        church_id: Optional[str] = None,
    ) -> list[Upcoming]:
        if within_days < 0:
            raise ValidationError("within_days cannot be negative")
        return upcoming(
            self.repo.all_birthdays(church_id), reference or utc_today(), within_days
        )

    def stats(
        self, reference: Optional[date] = None, church_id: Optional[str] = None
    ) -> BirthdayStats:
        return birthday_stats(self.repo.all_birthdays(church_id), reference or utc_today())

    def _check_church(self, church_id: Optional[str]) -> None:
        if church_id is not None and self.repo.get(Church, church_id) is None:
            raise ValidationError(f"Unknown church {church_id}")
