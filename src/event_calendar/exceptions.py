"""Exception hierarchy for the event calendar."""

from __future__ import annotations


class EventCalendarError(Exception):
    """Base exception for all event calendar errors."""


class EventParseError(EventCalendarError, ValueError):
    """An event or recurrence payload could not be parsed.

    Attributes:
        field: Name of the offending field, if known.
    """

    def __init__(self, message: str, *, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class RecurrenceConfigError(EventCalendarError, ValueError):
    """A recurrence pattern cannot be expanded without looping forever.

    Attributes:
        event_id: Id of the base event carrying the pattern.
    """

    def __init__(self, message: str, *, event_id: str | None = None) -> None:
        super().__init__(message)
        self.event_id = event_id
