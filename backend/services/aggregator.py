"""
Merges events and projected birthdays into one ordered occurrence stream.

Ordering is by calendar day, then events before birthdays, then by start
instant, then by the position of the record in the input. Repeated records
(same kind, source id and day) are emitted once. An event that started
before the requested range is listed on the first day of the range.
"""

from datetime import date, datetime
from typing import Iterable, Sequence

from app.schemas.occurrence import Occurrence, OccurrenceKind
from services.conflicts import Schedulable
from services.intervals import day_bounds, month_bounds, overlaps, to_utc
from services.recurrence import AnnualDate, age, occurrence_in_year

_KIND_RANK = {OccurrenceKind.EVENT: 0, OccurrenceKind.BIRTHDAY: 1}


def _event_occurrence(event, first_day: date) -> Occurrence:
    return Occurrence(
        kind=OccurrenceKind.EVENT,
        date=max(to_utc(event.start_at).date(), first_day),
        start_at=event.start_at,
        end_at=event.end_at,
        source_id=event.id,
        label=event.title,
        church_id=event.church_id,
        resource_id=event.resource_id,
        department_id=event.department_id,
        organization_unit_id=event.organization_unit_id,
    )


def _birthday_occurrences(
    birthday, range_start: datetime, range_end: datetime
) -> Iterable[Occurrence]:
    for year in range(range_start.year, range_end.year + 1):
        day = occurrence_in_year(birthday.day, birthday.month, year)
        if day is None:
            continue
        start, end = day_bounds(day)
        if not overlaps(start, end, range_start, range_end):
            continue
        yield Occurrence(
            kind=OccurrenceKind.BIRTHDAY,
            date=day,
            start_at=start,
            end_at=end,
            source_id=birthday.id,
            label=birthday.name,
            church_id=birthday.church_id,
            department_id=birthday.department_id,
            organization_unit_id=birthday.organization_unit_id,
            age=age(birthday, day),
        )


def occurrences_in_range(
    events: Sequence[Schedulable],
    birthdays: Sequence[AnnualDate],
    range_start: datetime,
    range_end: datetime,
) -> tuple[Occurrence, ...]:
    """
    Everything happening in ``[range_start, range_end)``.

    Events are included when their own range overlaps the requested one and
    are listed under their UTC start day, or under the first day of the range
    when they started before it.
    A birthday is included for every year of the range in which its whole
    UTC day overlaps the requested range; 29 February is absent in non-leap
    years.

    :param events: Candidate events, any order.
    :param birthdays: Candidate birthdays, any order.
    :param range_start: Start instant (inclusive), naive values read as UTC.
    :param range_end: End instant (exclusive), after range_start.
    :return: Occurrences in deterministic order.
    """
    range_start, range_end = to_utc(range_start), to_utc(range_end)
    first_day = range_start.date()
    ranked = []
    for position, event in enumerate(events):
        if overlaps(event.start_at, event.end_at, range_start, range_end):
            ranked.append((position, _event_occurrence(event, first_day)))
    for position, birthday in enumerate(birthdays):
        for occurrence in _birthday_occurrences(birthday, range_start, range_end):
            ranked.append((position, occurrence))

    ranked.sort(
        key=lambda item: (
            item[1].date,
            _KIND_RANK[item[1].kind],
            item[1].start_at,
            item[0],
        )
    )

    seen = set()
    merged = []
    for _, occurrence in ranked:
        key = (occurrence.kind, occurrence.source_id, occurrence.date)
        if key in seen:
            continue
        seen.add(key)
        merged.append(occurrence)
    return tuple(merged)


def occurrences_in_month(
    events: Sequence[Schedulable],
    birthdays: Sequence[AnnualDate],
    year: int,
    month: int,
) -> tuple[Occurrence, ...]:
    """Occurrences for one calendar month, see ``occurrences_in_range``."""
    range_start, range_end = month_bounds(year, month)
    return occurrences_in_range(events, birthdays, range_start, range_end)
