"""Day-level event queries used by the calendar views."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date

from .const import WEEK_STARTS_ON
from .dates import DateLike, as_date, end_of_week, start_of_week, timestamp_ms
from .models import Event
from .recurrence import expand_recurring


# --------------------------------------------------------------------------- #
#  Classification and ordering
# --------------------------------------------------------------------------- #


def is_multi_day_event(event: Event) -> bool:
    """Whether ``event`` is all-day or ends on a different date than it starts."""
    return event.all_day or event.start.date() != event.end.date()


def _sort_key(event: Event) -> int:
    """Start time as Unix ms, so naive and aware starts compare."""
    return timestamp_ms(event.start)


def sort_events(events: Iterable[Event]) -> list[Event]:
    """Return multi-day events first, each group in ascending start order."""
    return sorted(events, key=lambda ev: (not is_multi_day_event(ev), _sort_key(ev)))


# --------------------------------------------------------------------------- #
#  Day queries
# --------------------------------------------------------------------------- #


def events_starting_on_day(events: Iterable[Event], day: DateLike) -> list[Event]:
    """Stored events that start on ``day``, earliest first.

    Recurring events are not expanded here.
    """
    target = as_date(day)
    return sorted(
        (ev for ev in events if ev.start.date() == target), key=_sort_key
    )


def spanning_events_for_day(events: Iterable[Event], day: DateLike) -> list[Event]:
    """Multi-day events running through or ending on ``day`` without starting on it."""
    target = as_date(day)
    return [
        ev
        for ev in events
        if is_multi_day_event(ev) and ev.start.date() < target <= ev.end.date()
    ]


def _touches_day(event: Event, target: date) -> bool:
    return event.start.date() <= target <= event.end.date()


def all_occurrences_for_day(
    events: Iterable[Event],
    day: DateLike,
    *,
    week_starts_on: int = WEEK_STARTS_ON,
) -> list[Event]:
    """Every occurrence that starts, ends or runs through ``day``.

    Recurring events are expanded over the week containing ``day``, which
    keeps the number of generated occurrences small.
    """
    target = as_date(day)
    window_start = start_of_week(target, week_starts_on)
    window_end = end_of_week(target, week_starts_on)

    results: list[Event] = []
    for event in events:
        for occurrence in expand_recurring(
            event, window_start, window_end, week_starts_on=week_starts_on
        ):
            if _touches_day(occurrence, target):
                results.append(occurrence)
    return results


def agenda_events_for_day(
    events: Iterable[Event],
    day: DateLike,
    *,
    week_starts_on: int = WEEK_STARTS_ON,
) -> list[Event]:
    """Like :func:`all_occurrences_for_day`, in strict chronological order."""
    return sorted(
        all_occurrences_for_day(events, day, week_starts_on=week_starts_on),
        key=_sort_key,
    )


def events_in_range(
    events: Iterable[Event],
    range_start: DateLike,
    range_end: DateLike,
    *,
    week_starts_on: int = WEEK_STARTS_ON,
) -> list[Event]:
    """Occurrences overlapping ``[range_start, range_end]``, grid-sorted."""
    first = as_date(range_start)
    last = as_date(range_end)

    results: list[Event] = []
    for event in events:
        for occurrence in expand_recurring(
            event, first, last, week_starts_on=week_starts_on
        ):
            if occurrence.start.date() <= last and occurrence.end.date() >= first:
                results.append(occurrence)
    return sort_events(results)
