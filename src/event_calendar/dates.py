"""Calendar-date helpers.

Every comparison here works on calendar dates, never on instants. Weekdays
are numbered Sunday=0 through Saturday=6.
"""

from __future__ import annotations

import calendar
from collections.abc import Iterator
from datetime import date, datetime, time, timedelta, timezone
from typing import Union

from dateutil.parser import parse as dtparse
from dateutil.relativedelta import relativedelta
from dateutil.rrule import DAILY, MONTHLY, WEEKLY, rrule

from .const import WEEK_STARTS_ON

DateLike = Union[date, datetime, str]


def as_datetime(value: DateLike) -> datetime:
    """Coerce a date, datetime or ISO string to a datetime.

    Plain dates become midnight of that day.

    Raises:
        ValueError: If a string cannot be parsed.
        TypeError: For any other input type.
    """
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time.min)
    if isinstance(value, str):
        return dtparse(value)
    msg = f"Expected date, datetime or str, got {type(value).__name__}"
    raise TypeError(msg)


def as_date(value: DateLike) -> date:
    """Return the calendar date of ``value``."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return as_datetime(value).date()


def is_same_day(left: DateLike, right: DateLike) -> bool:
    return as_date(left) == as_date(right)


def sunday_weekday(day: DateLike) -> int:
    """Weekday with Sunday as 0 (``date.weekday()`` uses Monday as 0)."""
    return (as_date(day).weekday() + 1) % 7


def start_of_week(day: DateLike, week_starts_on: int = WEEK_STARTS_ON) -> date:
    d = as_date(day)
    return d - timedelta(days=(sunday_weekday(d) - week_starts_on) % 7)


def end_of_week(day: DateLike, week_starts_on: int = WEEK_STARTS_ON) -> date:
    return start_of_week(day, week_starts_on) + timedelta(days=6)


def start_of_month(day: DateLike) -> date:
    return as_date(day).replace(day=1)


def days_in_month(day: DateLike) -> int:
    d = as_date(day)
    return calendar.monthrange(d.year, d.month)[1]


def add_months(day: DateLike, months: int) -> date:
    return as_date(day) + relativedelta(months=months)


def _midnight(day: date) -> datetime:
    return datetime.combine(day, time.min)


def each_day(start: DateLike, end: DateLike) -> Iterator[date]:
    """Yield every calendar day in ``[start, end]``."""
    for dt in rrule(DAILY, dtstart=_midnight(as_date(start)), until=_midnight(as_date(end))):
        yield dt.date()


def each_week_start(
    start: DateLike, end: DateLike, week_starts_on: int = WEEK_STARTS_ON
) -> Iterator[date]:
    """Yield the first day of every week overlapping ``[start, end]``."""
    first = start_of_week(start, week_starts_on)
    for dt in rrule(WEEKLY, dtstart=_midnight(first), until=_midnight(as_date(end))):
        yield dt.date()


def each_month_start(start: DateLike, end: DateLike) -> Iterator[date]:
    """Yield the first day of every month overlapping ``[start, end]``."""
    first = start_of_month(start)
    for dt in rrule(MONTHLY, dtstart=_midnight(first), until=_midnight(as_date(end))):
        yield dt.date()


def at_day(day: DateLike, moment: datetime) -> datetime:
    """Place the time of day (and tzinfo) of ``moment`` on ``day``."""
    return datetime.combine(as_date(day), moment.timetz())


def duration_days(start: DateLike, end: DateLike) -> int:
    """Number of calendar days between the dates of ``start`` and ``end``."""
    return (as_date(end) - as_date(start)).days


def timestamp_ms(moment: datetime) -> int:
    """Unix milliseconds for ``moment``.

    Naive datetimes are read as UTC wall-clock time so the result does not
    depend on the host time zone.
    """
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return int(moment.timestamp() * 1000)
