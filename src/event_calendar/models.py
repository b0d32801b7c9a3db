"""Data models for calendar events and recurrence patterns."""

from __future__ import annotations

import dataclasses
import enum
import logging
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any

from ._serialization import decamelize_keys, to_plain
from .const import DEFAULT_COLOR, DEFAULT_RECURRENCE_INTERVAL
from .dates import as_date, as_datetime, duration_days
from .exceptions import EventParseError

_LOGGER = logging.getLogger(__name__)


class EventColor(str, enum.Enum):
    """Colour tag shown on an event."""

    SKY = "sky"
    AMBER = "amber"
    VIOLET = "violet"
    ROSE = "rose"
    EMERALD = "emerald"
    ORANGE = "orange"


class RecurrenceType(str, enum.Enum):
    """How a base event repeats.

    ``CUSTOM`` repeats every ``interval`` weeks counted from the event start.
    """

    NONE = "none"
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    CUSTOM = "custom"


@dataclass(frozen=True)
class RecurrencePattern:
    """Recurrence rule attached to a base event.

    Only the fields relevant to ``type`` are read: ``week_days`` for weekly,
    ``month_day`` for monthly, ``interval`` (in weeks) for custom.
    """

    type: RecurrenceType = RecurrenceType.NONE
    interval: int = DEFAULT_RECURRENCE_INTERVAL
    week_days: tuple[int, ...] = field(default_factory=tuple)  # 0 = Sunday
    month_day: int | None = None
    end_date: date | None = None

    def __post_init__(self) -> None:
        # Plain strings are accepted; anything unknown never repeats.
        object.__setattr__(self, "type", _parse_recurrence_type(self.type))

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> RecurrencePattern:
        """Construct from a camelCase or snake_case dict."""
        values = decamelize_keys(data)
        interval = values.get("interval")
        month_day = values.get("month_day")
        end_date = _parse_optional_date(values.get("end_date"), "endDate")
        try:
            return cls(
                type=_parse_recurrence_type(values.get("type")),
                interval=(
                    DEFAULT_RECURRENCE_INTERVAL if interval is None else int(interval)
                ),
                week_days=tuple(int(d) for d in values.get("week_days") or ()),
                month_day=None if month_day is None else int(month_day),
                end_date=end_date,
            )
        except (TypeError, ValueError) as err:
            raise EventParseError(f"Invalid recurrence pattern: {err}") from err

    @property
    def is_recurring(self) -> bool:
        return self.type != RecurrenceType.NONE

    def to_dict(self) -> dict[str, Any]:
        return to_plain(dataclasses.asdict(self))


@dataclass(frozen=True)
class Event:
    """Calendar event, either stored by the caller or generated by expansion.

    Use ``dataclasses.replace()`` to derive modified copies.
    """

    id: str
    title: str
    start: datetime
    end: datetime
    all_day: bool = False
    description: str | None = None
    color: EventColor = EventColor.SKY
    location: str | None = None
    recurrence: RecurrencePattern | None = None
    is_recurring_instance: bool = False  # True only on generated occurrences

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Event:
        """Construct from a camelCase or snake_case dict.

        ``start``, ``end`` and ``recurrence.endDate`` accept date/datetime
        objects or ISO-8601 strings.

        Raises:
            EventParseError: If ``id``, ``start`` or ``end`` is missing or a
                date cannot be parsed.
        """
        values = decamelize_keys(data)
        for required in ("id", "start", "end"):
            if values.get(required) is None:
                raise EventParseError(
                    f"Event is missing required field '{required}'", field=required
                )

        recurrence = values.get("recurrence")
        if isinstance(recurrence, dict):
            recurrence = RecurrencePattern.from_dict(recurrence)

        return cls(
            id=str(values["id"]),
            title=values.get("title") or "",
            start=_parse_datetime(values["start"], "start"),
            end=_parse_datetime(values["end"], "end"),
            all_day=bool(values.get("all_day", False)),
            description=values.get("description"),
            color=_parse_color(values.get("color")),
            location=values.get("location"),
            recurrence=recurrence,
            is_recurring_instance=bool(values.get("is_recurring_instance", False)),
        )

    @property
    def is_recurring(self) -> bool:
        """Whether expansion may turn this event into several occurrences."""
        return self.recurrence is not None and self.recurrence.is_recurring

    @property
    def duration_days(self) -> int:
        """Whole calendar days between the start and end dates."""
        return duration_days(self.start, self.end)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a camelCase dict with ISO-8601 date strings."""
        return to_plain(dataclasses.asdict(self))


def _parse_datetime(value: Any, field_name: str) -> datetime:
    try:
        return as_datetime(value)
    except (TypeError, ValueError, OverflowError) as err:
        raise EventParseError(
            f"Invalid value for '{field_name}': {value!r}", field=field_name
        ) from err


def _parse_optional_date(value: Any, field_name: str) -> date | None:
    if value is None:
        return None
    try:
        return as_date(value)
    except (TypeError, ValueError, OverflowError) as err:
        raise EventParseError(
            f"Invalid value for '{field_name}': {value!r}", field=field_name
        ) from err


def _parse_color(value: Any) -> EventColor:
    """Parse an event colour, defaulting to sky for missing or unknown values."""
    if value is None:
        return EventColor(DEFAULT_COLOR)
    try:
        return EventColor(value)
    except ValueError:
        return EventColor(DEFAULT_COLOR)


def _parse_recurrence_type(value: Any) -> RecurrenceType:
    """Parse a recurrence type; unknown values mean the event never repeats."""
    if value is None:
        return RecurrenceType.NONE
    try:
        return RecurrenceType(value)
    except ValueError:
        _LOGGER.debug("Unknown recurrence type %r, treating as 'none'", value)
        return RecurrenceType.NONE
