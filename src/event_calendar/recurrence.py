"""Expansion of recurring events into concrete occurrences."""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Iterable, Iterator
from datetime import date, datetime, time, timedelta
from typing import TypeVar

from dateutil.rrule import WEEKLY, rrule

from .const import MAX_RECURRENCE_ITERATIONS, WEEK_STARTS_ON
from .dates import (
    DateLike,
    as_date,
    at_day,
    days_in_month,
    each_day,
    each_month_start,
    each_week_start,
    timestamp_ms,
)
from .exceptions import RecurrenceConfigError
from .models import Event, RecurrencePattern, RecurrenceType

_LOGGER = logging.getLogger(__name__)

_T = TypeVar("_T")


def expand_recurring(
    event: Event,
    range_start: DateLike,
    range_end: DateLike,
    *,
    week_starts_on: int = WEEK_STARTS_ON,
) -> list[Event]:
    """Expand ``event`` into its occurrences inside ``[range_start, range_end]``.

    Both bounds are inclusive calendar dates. Non-recurring events come back
    as a one-element list holding the very same object. Weekly and monthly
    patterns missing their ``week_days``/``month_day`` are treated as
    non-recurring.

    Raises:
        RecurrenceConfigError: If a custom pattern has a non-positive interval.
    """
    recurrence = event.recurrence
    if recurrence is None or recurrence.type == RecurrenceType.NONE:
        return [event]

    first = as_date(range_start)
    last = as_date(range_end)

    # The recurrence ended before the queried window opens.
    if recurrence.end_date is not None and recurrence.end_date < first:
        return []

    if recurrence.type == RecurrenceType.CUSTOM and (
        recurrence.interval is None or recurrence.interval < 1
    ):
        raise RecurrenceConfigError(
            f"Custom recurrence of event {event.id} needs a positive interval, "
            f"got {recurrence.interval!r}",
            event_id=event.id,
        )

    starts: Iterable[datetime]
    if recurrence.type == RecurrenceType.DAILY:
        starts = _daily_starts(event, recurrence, first, last)
    elif recurrence.type == RecurrenceType.WEEKLY:
        if not recurrence.week_days:
            _LOGGER.debug(
                "Weekly recurrence of event %s has no week days, not expanding",
                event.id,
            )
            return [event]
        starts = _weekly_starts(event, recurrence, first, last, week_starts_on)
    elif recurrence.type == RecurrenceType.MONTHLY:
        if not recurrence.month_day:
            _LOGGER.debug(
                "Monthly recurrence of event %s has no month day, not expanding",
                event.id,
            )
            return [event]
        starts = _monthly_starts(event, recurrence, first, last)
    else:
        starts = _custom_starts(event, recurrence, first, last)

    span = event.duration_days
    return [_make_occurrence(event, start, span) for start in starts]


def _make_occurrence(event: Event, start: datetime, span: int) -> Event:
    end = at_day(start.date() + timedelta(days=span), event.end)
    return dataclasses.replace(
        event,
        id=f"{event.id}-{timestamp_ms(start)}",
        start=start,
        end=end,
        is_recurring_instance=True,
    )


def _ended_before(recurrence: RecurrencePattern, day: date) -> bool:
    return recurrence.end_date is not None and recurrence.end_date < day


def _bounded(candidates: Iterable[_T], event: Event) -> Iterator[_T]:
    """Stop after ``MAX_RECURRENCE_ITERATIONS`` candidates."""
    for index, candidate in enumerate(candidates):
        if index >= MAX_RECURRENCE_ITERATIONS:
            _LOGGER.warning(
                "Expansion of event %s stopped after %d candidates",
                event.id,
                MAX_RECURRENCE_ITERATIONS,
            )
            return
        yield candidate


def _daily_starts(
    event: Event, recurrence: RecurrencePattern, first: date, last: date
) -> Iterator[datetime]:
    for day in _bounded(each_day(first, last), event):
        if _ended_before(recurrence, day):
            break
        yield at_day(day, event.start)


def _weekly_starts(
    event: Event,
    recurrence: RecurrencePattern,
    first: date,
    last: date,
    week_starts_on: int,
) -> Iterator[datetime]:
    for week_start in _bounded(each_week_start(first, last, week_starts_on), event):
        if _ended_before(recurrence, week_start):
            break
        for weekday in recurrence.week_days:
            day = week_start + timedelta(days=(weekday - week_starts_on) % 7)
            if first <= day <= last and not _ended_before(recurrence, day):
                yield at_day(day, event.start)


def _monthly_starts(
    event: Event, recurrence: RecurrencePattern, first: date, last: date
) -> Iterator[datetime]:
    month_day = recurrence.month_day
    for month_start in _bounded(each_month_start(first, last), event):
        if _ended_before(recurrence, month_start):
            break
        # Short months are skipped rather than clamped to their last day.
        if not 1 <= month_day <= days_in_month(month_start):
            continue
        day = month_start.replace(day=month_day)
        if first <= day <= last and not _ended_before(recurrence, day):
            yield at_day(day, event.start)


def _custom_starts(
    event: Event, recurrence: RecurrencePattern, first: date, last: date
) -> Iterator[datetime]:
    # Anchored on the event's own start so the selected dates never depend on
    # the queried window. Whole steps before the window are skipped, which
    # lands on the same anchored dates.
    step_days = 7 * recurrence.interval
    skipped = max(0, (first - event.start.date()).days // step_days)
    begin = event.start + timedelta(days=skipped * step_days)
    until = datetime.combine(last, time.max, tzinfo=event.start.tzinfo)
    walk = rrule(WEEKLY, interval=recurrence.interval, dtstart=begin, until=until)
    for current in _bounded(walk, event):
        if _ended_before(recurrence, current.date()):
            break
        if first <= current.date() <= last:
            # rrule drops microseconds from dtstart.
            yield at_day(current.date(), event.start)
