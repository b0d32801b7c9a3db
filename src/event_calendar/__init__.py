"""Recurrence expansion and day queries for an event calendar."""

from .const import __version__
from .exceptions import EventCalendarError, EventParseError, RecurrenceConfigError
from .models import Event, EventColor, RecurrencePattern, RecurrenceType
from .queries import (
    agenda_events_for_day,
    all_occurrences_for_day,
    events_in_range,
    events_starting_on_day,
    is_multi_day_event,
    sort_events,
    spanning_events_for_day,
)
from .recurrence import expand_recurring

__all__ = [
    "__version__",
    "EventCalendarError",
    "EventParseError",
    "RecurrenceConfigError",
    "Event",
    "EventColor",
    "RecurrencePattern",
    "RecurrenceType",
    "agenda_events_for_day",
    "all_occurrences_for_day",
    "events_in_range",
    "events_starting_on_day",
    "expand_recurring",
    "is_multi_day_event",
    "sort_events",
    "spanning_events_for_day",
]
