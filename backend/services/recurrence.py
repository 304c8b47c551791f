"""
Projection of year-less birthdays onto concrete calendar dates.

A birthday only stores a day and a month (and optionally a birth year), so
every date answer here is computed against a reference date. 29 February
never slides to 1 March: in non-leap years that birthday simply has no
occurrence.
"""

import calendar
from datetime import date, datetime
from typing import Iterable, NamedTuple, Optional, Protocol, Union

LEAP_REFERENCE_YEAR = 2000
# Consecutive leap years are never more than 8 years apart (e.g. 2096 -> 2104).
MAX_LEAP_GAP = 8

DateLike = Union[date, datetime]


class AnnualDate(Protocol):
    day: int
    month: int
    birth_year: Optional[int]


class NextOccurrence(NamedTuple):
    date: date
    days_until: int


class Upcoming(NamedTuple):
    birthday: AnnualDate
    date: date
    days_until: int


class BirthdayStats(NamedTuple):
    total: int
    this_month: int
    next_month: int
    next_7_days: int
    busiest_month: int
    busiest_month_name: str
    busiest_month_count: int


def is_valid_day_month(day: int, month: int) -> bool:
    """
    Whether ``day``/``month`` exists in at least one year.

    Checked against a leap year so that 29 February is accepted.
    """
    if not 1 <= month <= 12:
        return False
    return 1 <= day <= calendar.monthrange(LEAP_REFERENCE_YEAR, month)[1]


def occurrence_in_year(day: int, month: int, year: int) -> Optional[date]:
    """
    The concrete date of ``day``/``month`` in ``year``.
    :return: The date, or None when it does not exist that year (29 Feb).
    """
    if day > calendar.monthrange(year, month)[1]:
        return None
    return date(year, month, day)


def _as_date(reference: DateLike) -> date:
    if isinstance(reference, datetime):
        return reference.date()
    return reference


def next_occurrence(birthday: AnnualDate, reference: DateLike) -> NextOccurrence:
    """
    Resolve the next occurrence of ``birthday`` on or after ``reference``.

    Comparison is by calendar date, so a birthday falling on the reference
    day is returned with ``days_until == 0``. Years in which the date does
    not exist are skipped.

    :param birthday: Record with a previously validated day and month.
    :param reference: Date (or datetime, reduced to its date) to count from.
    :return: NextOccurrence(date, days_until)
    :raise ValueError: If day/month never form a valid date.
    """
    ref = _as_date(reference)
    for year in range(ref.year, ref.year + MAX_LEAP_GAP + 2):
        candidate = occurrence_in_year(birthday.day, birthday.month, year)
        if candidate is not None and candidate >= ref:
            return NextOccurrence(candidate, (candidate - ref).days)
    raise ValueError(f"{birthday.day}/{birthday.month} is not a calendar date")


def age(birthday: AnnualDate, reference: DateLike) -> Optional[int]:
    """
    Calendar-year age: ``reference.year - birth_year``.

    Whether the birthday has already happened in the reference year is not
    taken into account.
    """
    if birthday.birth_year is None:
        return None
    return _as_date(reference).year - birthday.birth_year


def upcoming(
    birthdays: Iterable[AnnualDate], reference: DateLike, within_days: int = 7
) -> list[Upcoming]:
    """
    Birthdays whose next occurrence is at most ``within_days`` away.
    Sorted by days until the occurrence, record order breaking ties.
    """
    found = []
    for birthday in birthdays:
        nxt = next_occurrence(birthday, reference)
        if nxt.days_until <= within_days:
            found.append(Upcoming(birthday, nxt.date, nxt.days_until))
    found.sort(key=lambda item: item.days_until)
    return found


def birthday_stats(birthdays: Iterable[AnnualDate], reference: DateLike) -> BirthdayStats:
    ref = _as_date(reference)
    following = 1 if ref.month == 12 else ref.month + 1
    per_month = dict.fromkeys(range(1, 13), 0)
    total = this_month = next_month = soon = 0

    for birthday in birthdays:
        total += 1
        per_month[birthday.month] += 1
        if birthday.month == ref.month:
            this_month += 1
        if birthday.month == following:
            next_month += 1
        if next_occurrence(birthday, ref).days_until <= 7:
            soon += 1

    busiest, busiest_count = 1, 0
    for month, count in per_month.items():
        if count > busiest_count:
            busiest, busiest_count = month, count

    return BirthdayStats(
        total=total,
        this_month=this_month,
        next_month=next_month,
        next_7_days=soon,
        busiest_month=busiest,
        busiest_month_name=calendar.month_name[busiest],
        busiest_month_count=busiest_count,
    )
