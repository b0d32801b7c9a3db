"""Tests for the event model and its dict conversion."""

from __future__ import annotations

from datetime import date, datetime

import pytest

from event_calendar import (
    Event,
    EventColor,
    EventParseError,
    RecurrencePattern,
    RecurrenceType,
    expand_recurring,
)


def _payload(**overrides) -> dict:
    data = {
        "id": "e1",
        "title": "Standup",
        "start": "2024-03-01T09:00:00",
        "end": "2024-03-01T09:30:00",
    }
    data.update(overrides)
    return data


# =========================================================================== #
#  1. Event.from_dict
# =========================================================================== #


class TestEventFromDict:
    def test_camel_case_payload(self):
        ev = Event.from_dict(
            _payload(
                allDay=False,
                color="rose",
                location="Room 5",
                recurrence={
                    "type": "weekly",
                    "weekDays": [1, 3],
                    "endDate": "2024-04-01",
                },
            )
        )
        assert ev.id == "e1"
        assert ev.start == datetime(2024, 3, 1, 9, 0)
        assert ev.end == datetime(2024, 3, 1, 9, 30)
        assert ev.color is EventColor.ROSE
        assert ev.location == "Room 5"
        assert ev.recurrence == RecurrencePattern(
            type=RecurrenceType.WEEKLY,
            week_days=(1, 3),
            end_date=date(2024, 4, 1),
        )
        assert ev.is_recurring is True
        assert ev.is_recurring_instance is False

    def test_snake_case_and_native_dates(self):
        ev = Event.from_dict(
            {
                "id": 7,
                "start": date(2024, 3, 1),
                "end": datetime(2024, 3, 2, 12, 0),
                "all_day": True,
            }
        )
        assert ev.id == "7"
        assert ev.title == ""
        assert ev.start == datetime(2024, 3, 1)
        assert ev.all_day is True
        assert ev.duration_days == 1

    @pytest.mark.parametrize("color", [None, "chartreuse", 3])
    def test_missing_or_unknown_color_defaults_to_sky(self, color):
        ev = Event.from_dict(_payload(color=color))
        assert ev.color is EventColor.SKY

    @pytest.mark.parametrize("field", ["id", "start", "end"])
    def test_missing_required_field(self, field):
        data = _payload()
        del data[field]
        with pytest.raises(EventParseError) as exc_info:
            Event.from_dict(data)
        assert exc_info.value.field == field

    def test_unparseable_date(self):
        with pytest.raises(EventParseError) as exc_info:
            Event.from_dict(_payload(start="not a date"))
        assert exc_info.value.field == "start"


# =========================================================================== #
#  2. RecurrencePattern.from_dict
# =========================================================================== #


class TestRecurrenceFromDict:
    def test_defaults(self):
        pattern = RecurrencePattern.from_dict({"type": "daily"})
        assert pattern.type is RecurrenceType.DAILY
        assert pattern.interval == 1
        assert pattern.week_days == ()
        assert pattern.month_day is None
        assert pattern.end_date is None

    def test_zero_interval_is_kept(self):
        pattern = RecurrencePattern.from_dict({"type": "custom", "interval": 0})
        assert pattern.interval == 0

    def test_unknown_type_means_no_repeat(self):
        ev = Event.from_dict(_payload(recurrence={"type": "yearly"}))
        assert ev.recurrence.type is RecurrenceType.NONE
        assert ev.is_recurring is False
        assert expand_recurring(ev, date(2024, 3, 1), date(2024, 3, 31)) == [ev]

    def test_direct_construction_normalises_type(self):
        assert RecurrencePattern(type="daily").type is RecurrenceType.DAILY
        assert RecurrencePattern(type="yearly").type is RecurrenceType.NONE

    def test_bad_interval(self):
        with pytest.raises(EventParseError):
            RecurrencePattern.from_dict({"type": "custom", "interval": "often"})

    def test_bad_end_date(self):
        with pytest.raises(EventParseError) as exc_info:
            RecurrencePattern.from_dict({"type": "daily", "endDate": "someday"})
        assert exc_info.value.field == "endDate"


# =========================================================================== #
#  3. to_dict
# =========================================================================== #


class TestToDict:
    def test_camel_case_output(self):
        ev = Event(
            id="e1",
            title="Standup",
            start=datetime(2024, 3, 1, 9, 0),
            end=datetime(2024, 3, 1, 9, 30),
            color=EventColor.AMBER,
            recurrence=RecurrencePattern(type=RecurrenceType.WEEKLY, week_days=(1, 3)),
        )
        assert ev.to_dict() == {
            "id": "e1",
            "title": "Standup",
            "start": "2024-03-01T09:00:00",
            "end": "2024-03-01T09:30:00",
            "allDay": False,
            "color": "amber",
            "recurrence": {"type": "weekly", "interval": 1, "weekDays": [1, 3]},
            "isRecurringInstance": False,
        }

    def test_pattern_drops_absent_fields(self):
        pattern = RecurrencePattern(
            type=RecurrenceType.MONTHLY, month_day=31, end_date=date(2024, 6, 30)
        )
        assert pattern.to_dict() == {
            "type": "monthly",
            "interval": 1,
            "weekDays": [],
            "monthDay": 31,
            "endDate": "2024-06-30",
        }

    def test_survives_from_dict(self):
        ev = Event(
            id="e2",
            title="Review",
            start=datetime(2024, 3, 1, 14, 0),
            end=datetime(2024, 3, 1, 15, 0),
            description="Quarterly",
            recurrence=RecurrencePattern(
                type=RecurrenceType.MONTHLY, month_day=1, end_date=date(2024, 12, 31)
            ),
        )
        assert Event.from_dict(ev.to_dict()) == ev
