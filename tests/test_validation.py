from types import SimpleNamespace

import pytest

from week_peek.config import ScheduleConfig
from week_peek.models import ScheduleEvent, TimeSlotInterval
from week_peek.time_only import DayOfWeek, TimeOnly
from week_peek.validation import (
    ScheduleValidationError, ValidationIssue, validate_config, validate_event, validate_events,
    validate_overflow_title
)


def fields(issues):
    return [i.field for i in issues]


class TestValidateConfig:

    def test_defaults_are_valid(self):
        assert validate_config(ScheduleConfig()) == []

    @pytest.mark.parametrize("start,end", [(-1, 17), (9, 24), (9.5, 17)])
    def test_hours_out_of_range(self, start, end):
        issues = validate_config(ScheduleConfig(start_hour=start, end_hour=end))
        assert len(issues) == 1
        assert issues[0].field in ("start_hour", "end_hour")

    def test_bool_is_not_an_hour(self):
        assert fields(validate_config(ScheduleConfig(start_hour=True))) == ["start_hour"]

    def test_start_after_end(self):
        assert fields(validate_config(ScheduleConfig(start_hour=12, end_hour=11))) == ["start_hour"]

    def test_same_start_and_end_hour(self):
        assert validate_config(ScheduleConfig(start_hour=12, end_hour=12)) == []

    def test_interval(self):
        assert validate_config(ScheduleConfig(time_slot_interval=30)) == []
        assert fields(validate_config(ScheduleConfig(time_slot_interval=20))) == ["time_slot_interval"]

    def test_visible_days(self):
        assert fields(validate_config(ScheduleConfig(visible_days=()))) == ["visible_days"]
        issues = validate_config(ScheduleConfig(visible_days=(DayOfWeek.MONDAY, DayOfWeek.MONDAY, "Tue")))
        assert fields(issues) == ["visible_days[1]", "visible_days[2]"]

    def test_orientation(self):
        assert fields(validate_config(ScheduleConfig(orientation="sideways"))) == ["orientation"]

    def test_reports_everything_at_once(self):
        config = SimpleNamespace(start_hour=25, end_hour=17, time_slot_interval=TimeSlotInterval.THIRTY_MINUTES,
                                 visible_days=[], orientation=None)
        assert fields(validate_config(config)) == ["start_hour", "visible_days", "orientation"]


class TestValidateEvent:

    def event(self, **overrides):
        values = dict(id="a", day=DayOfWeek.MONDAY, start_time=TimeOnly(9), end_time=TimeOnly(10), title="A")
        values.update(overrides)
        return ScheduleEvent(**values)

    def test_valid(self):
        assert validate_event(self.event()) == []

    def test_empty_id(self):
        assert fields(validate_event(self.event(id="  "))) == ["id"]

    def test_day_must_be_enum(self):
        assert fields(validate_event(self.event(day=0))) == ["day"]

    def test_end_must_follow_start(self):
        assert fields(validate_event(self.event(end_time=TimeOnly(9)))) == ["end_time"]
        assert fields(validate_event(self.event(end_time=TimeOnly(8)))) == ["end_time"]

    def test_times_must_be_time_only(self):
        assert fields(validate_event(self.event(start_time="09:00"))) == ["start_time"]

    def test_title_must_be_string(self):
        assert fields(validate_event(self.event(title=None))) == ["title"]

    def test_batch_prefixes_and_duplicates(self):
        events = [self.event(), self.event(id="b", title=3), self.event()]
        issues = validate_events(events)
        assert fields(issues) == ["events[1].title", "events[2].id"]
        assert "events[0]" in issues[1].message


def test_error_message_lists_issues():
    error = ScheduleValidationError("events", [ValidationIssue("x", "bad"), ValidationIssue("y", "worse")])
    assert str(error) == "Invalid events: x: bad, y: worse"
    assert isinstance(error, ValueError)
    assert len(error.issues) == 2


def test_placeholder_id_prefix_is_reserved():
    event = ScheduleEvent("overflow-0-e0", DayOfWeek.MONDAY, TimeOnly(13), TimeOnly(14), "Lunch")
    issues = validate_event(event)
    assert fields(issues) == ["id"]
    assert "reserved" in issues[0].message


@pytest.mark.parametrize("title_format", ["+{} more", "{} weitere", "more", "+{:d}"])
def test_overflow_title_accepted(title_format):
    assert validate_overflow_title(title_format) == []


@pytest.mark.parametrize("title_format", ["+{count} more", "{} of {}", "{", "{:q}", "{.missing}", 5])
def test_overflow_title_rejected(title_format):
    assert fields(validate_overflow_title(title_format)) == ["overflow_title"]
