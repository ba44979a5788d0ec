"""
Overflow compression for crowded conflict groups.

A group with more than HIDE_THRESHOLD events keeps its first VISIBLE_COUNT
events and gets one synthetic "+N more" placeholder covering the whole
group. Clicking the placeholder zooms into the day, where nothing is
compressed.

Placeholder ids are stable across passes: overflow-{day}-{earliest event id}.
Code that scrolls to a cluster after zooming rebuilds the target from it.
"""

from typing import Iterable, Optional

from .conflicts import group_conflicts
from .debug import debug
from .models import ScheduleEvent, OVERFLOW_CLASS_NAME, OVERFLOW_ID_PREFIX
from .time_only import DayOfWeek, TimeOnly

HIDE_THRESHOLD = 3
VISIBLE_COUNT = 2

DEFAULT_OVERFLOW_TITLE = "+{} more"


def overflow_event_id(day: DayOfWeek, earliest_event_id: str) -> str:
    return f"{OVERFLOW_ID_PREFIX}{day.value}-{earliest_event_id}"


def is_overflow_id(event_id: str) -> bool:
    return parse_overflow_id(event_id) is not None


def parse_overflow_id(event_id: str) -> Optional[tuple[DayOfWeek, str]]:
    """
    Split a placeholder id back into (day, earliest event id).

    Returns None if the id was not produced by overflow_event_id().
    """
    if not event_id.startswith(OVERFLOW_ID_PREFIX):
        return None
    day_part, sep, original_id = event_id[len(OVERFLOW_ID_PREFIX):].partition('-')
    if not sep or not original_id or not day_part.isdigit():
        return None
    try:
        day = DayOfWeek(int(day_part))
    except ValueError:
        return None
    return day, original_id


def make_overflow_event(
    day: DayOfWeek,
    group: list[ScheduleEvent],
    title_format: str = DEFAULT_OVERFLOW_TITLE
) -> ScheduleEvent:
    """Build the placeholder standing in for the hidden part of `group`."""
    hidden_count = len(group) - VISIBLE_COUNT
    start = min(e.start_time.to_minutes() for e in group)
    end = max(e.end_time.to_minutes() for e in group)
    earliest = group[0]

    return ScheduleEvent(
        id=overflow_event_id(day, earliest.id),
        day=day,
        start_time=TimeOnly.from_minutes(start),
        end_time=TimeOnly.from_minutes(end),
        title=title_format.format(hidden_count),
        class_name=OVERFLOW_CLASS_NAME,
    )


def compress_day(
    day: DayOfWeek,
    day_events: Iterable[ScheduleEvent],
    title_format: str = DEFAULT_OVERFLOW_TITLE
) -> list[ScheduleEvent]:
    """
    Return the events to draw for one day after compression.

    Groups at or below the threshold pass through unchanged. The result is
    in group order; within a compressed group the visible events come first,
    followed by the placeholder.
    """
    result: list[ScheduleEvent] = []

    for group in group_conflicts(day_events):
        if len(group) <= HIDE_THRESHOLD:
            result.extend(group)
            continue

        placeholder = make_overflow_event(day, group, title_format)
        debug(f"Compressing {len(group)} events on {day.name} into {placeholder.id}")
        result.extend(group[:VISIBLE_COUNT])
        result.append(placeholder)

    return result
