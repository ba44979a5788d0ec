"""
Load schedule events from iCalendar data.

Each timed VEVENT becomes a ScheduleEvent on the weekday of its DTSTART,
using the wall-clock times as written in the file. Recurrence rules are not
expanded and times are not converted between timezones; all-day events and
events running past midnight have no place on a one-day time axis and are
skipped.
"""

from datetime import date, datetime, timedelta
from pathlib import Path
from typing import Optional

from icalendar import Calendar as ICalCalendar, Event as ICalEvent

from .debug import debug
from .models import ScheduleEvent
from .time_only import DayOfWeek, TimeOnly


def parse_icalendar(ical_text: str) -> ICalCalendar:
    """Parse iCalendar text into an icalendar.Calendar object."""
    return ICalCalendar.from_ical(ical_text)


def _as_datetime(value) -> Optional[datetime]:
    if isinstance(value, datetime):
        return value
    return None


def _event_end(component: ICalEvent, start: datetime) -> Optional[datetime]:
    dtend = component.get('DTEND')
    if dtend is not None:
        return _as_datetime(dtend.dt)
    duration = component.get('DURATION')
    if duration is not None:
        return start + duration.dt
    # No end time - use start + 1 hour
    return start + timedelta(hours=1)


def schedule_event_from_component(component: ICalEvent, event_id: str) -> Optional[ScheduleEvent]:
    """
    Convert one VEVENT, or return None if it cannot sit on the weekly grid.
    """
    dtstart = component.get('DTSTART')
    if dtstart is None:
        debug(f"Skipping event {event_id}: no DTSTART")
        return None

    start = _as_datetime(dtstart.dt)
    if start is None:
        if isinstance(dtstart.dt, date):
            debug(f"Skipping all-day event {event_id}")
        return None

    end = _event_end(component, start)
    if end is None or end.date() != start.date():
        debug(f"Skipping event {event_id}: does not end on its start day")
        return None
    if end <= start:
        debug(f"Skipping event {event_id}: non-positive duration")
        return None

    if component.get('RRULE') is not None:
        debug(f"Event {event_id} has a recurrence rule; only the first occurrence is used")

    summary = component.get('SUMMARY')
    description = component.get('DESCRIPTION')
    color = component.get('COLOR')

    return ScheduleEvent(
        id=event_id,
        day=DayOfWeek(start.weekday()),
        start_time=TimeOnly.from_time(start.time()),
        end_time=TimeOnly.from_time(end.time()),
        title=str(summary) if summary else 'Untitled',
        description=str(description) if description else None,
        color=str(color) if color else None,
    )


def events_from_ical(ical_text: str, seen: Optional[dict[str, int]] = None) -> list[ScheduleEvent]:
    """
    All placeable events of a VCALENDAR, in file order.

    Ids come from UID; repeated UIDs (e.g. overridden occurrences) get a
    numeric suffix so ids stay unique within the batch. Pass the same `seen`
    dict when importing several calendars into one batch.
    """
    calendar = parse_icalendar(ical_text)
    events: list[ScheduleEvent] = []
    if seen is None:
        seen = {}

    for index, component in enumerate(calendar.walk('VEVENT')):
        uid = component.get('UID')
        event_id = str(uid) if uid else f"event-{index}"
        if event_id in seen:
            seen[event_id] += 1
            event_id = f"{event_id}#{seen[event_id]}"
        else:
            seen[event_id] = 0

        event = schedule_event_from_component(component, event_id)
        if event is not None:
            events.append(event)

    debug(f"Imported {len(events)} events from iCalendar data")
    return events


def load_ics_file(path: Path, seen: Optional[dict[str, int]] = None) -> list[ScheduleEvent]:
    """Read an .ics file and return its placeable events."""
    with open(path, 'r', encoding='utf-8') as f:
        return events_from_ical(f.read(), seen)
