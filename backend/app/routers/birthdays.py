"""
Birthday endpoints. List views use BirthdayListItem, which leaves out the
birth year and notes.
"""

from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Query, status

from services.birthdays import BirthdayService
from services.recurrence import age

from ..dependencies import get_birthday_service
from ..schemas.birthday import (
    Birthday,
    BirthdayCreate,
    BirthdayListItem,
    BirthdayStats,
    BirthdayUpdate,
    UpcomingBirthday,
)

router = APIRouter(prefix="/birthdays", tags=["birthdays"])

Service = Annotated[BirthdayService, Depends(get_birthday_service)]


@router.get("", response_model=list[Birthday])
def list_birthdays(svc: Service, church_id: Annotated[Optional[str], Query()] = None):
    return svc.list_birthdays(church_id)


@router.get("/month", response_model=list[BirthdayListItem])
def birthdays_in_month(svc: Service, month: Annotated[int, Query()]):
    return svc.birthdays_in_month(month)


@router.get("/upcoming", response_model=list[UpcomingBirthday])
def upcoming_birthdays(
    svc: Service,
    within_days: Annotated[int, Query()] = 7,
    church_id: Annotated[Optional[str], Query()] = None,
):
    """Birthdays within the next ``within_days`` days, soonest first."""
    return [
        UpcomingBirthday(
            id=item.birthday.id,
            name=item.birthday.name,
            day=item.birthday.day,
            month=item.birthday.month,
            church_id=item.birthday.church_id,
            date=item.date,
            days_until=item.days_until,
            age=age(item.birthday, item.date),
        )
        for item in svc.upcoming(within_days=within_days, church_id=church_id)
    ]


@router.get("/stats", response_model=BirthdayStats)
def birthday_stats(svc: Service, church_id: Annotated[Optional[str], Query()] = None):
    return svc.stats(church_id=church_id)


@router.get("/{birthday_id}", response_model=Birthday)
def get_birthday(birthday_id: str, svc: Service):
    return svc.get_birthday(birthday_id)


@router.post("", response_model=Birthday, status_code=status.HTTP_201_CREATED)
def create_birthday(data: BirthdayCreate, svc: Service):
    return svc.create_birthday(data)


@router.patch("/{birthday_id}", response_model=Birthday)
def patch_birthday(birthday_id: str, data: BirthdayUpdate, svc: Service):
    return svc.patch_birthday(birthday_id, data)


@router.delete("/{birthday_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_birthday(birthday_id: str, svc: Service):
    svc.delete_birthday(birthday_id)
