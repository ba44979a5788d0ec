import pytest

from week_peek.models import ScheduleEvent
from week_peek.time_only import DayOfWeek, TimeOnly


def _event(event_id, start, end, day=DayOfWeek.MONDAY, title=None, **kwargs):
    return ScheduleEvent(
        id=event_id,
        day=day,
        start_time=TimeOnly.parse(start),
        end_time=TimeOnly.parse(end),
        title=title if title is not None else event_id,
        **kwargs
    )


@pytest.fixture
def make_event():
    """Factory: make_event("a", "09:00", "10:00", day=DayOfWeek.TUESDAY)."""
    return _event
