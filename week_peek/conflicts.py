"""
Conflict detection: partition one day's events into overlapping clusters.
"""

from typing import Iterable

from .models import ScheduleEvent
from .time_only import DayOfWeek


def intervals_disjoint(a: ScheduleEvent, b: ScheduleEvent) -> bool:
    """
    True if the two events do not share any time.

    Touching intervals (one ends when the other starts) are disjoint.
    Degenerate intervals are not special-cased.
    """
    return (a.end_time.to_minutes() <= b.start_time.to_minutes()
            or a.start_time.to_minutes() >= b.end_time.to_minutes())


def sort_by_start(events: Iterable[ScheduleEvent]) -> list[ScheduleEvent]:
    """Stable sort by start time; equal starts keep their input order."""
    return sorted(events, key=lambda e: e.start_time.to_minutes())


def group_conflicts(day_events: Iterable[ScheduleEvent]) -> list[list[ScheduleEvent]]:
    """
    Group events of a single day into conflict groups.

    Events are visited in start order and each joins the first group holding
    a member it is not disjoint from. Since the input is start-sorted, an event
    can only ever overlap the most recently opened group, so first-fit gives
    the same result as a transitive closure.
    """
    groups: list[list[ScheduleEvent]] = []

    for event in sort_by_start(day_events):
        for group in groups:
            if any(not intervals_disjoint(member, event) for member in group):
                group.append(event)
                break
        else:
            groups.append([event])

    return groups


def group_events_by_day(
    events: Iterable[ScheduleEvent],
    days: Iterable[DayOfWeek]
) -> dict[DayOfWeek, list[ScheduleEvent]]:
    """
    Bucket events per day, keyed in the order of `days`.

    Every day gets an entry, empty or not. Events on other days are dropped.
    """
    by_day: dict[DayOfWeek, list[ScheduleEvent]] = {day: [] for day in days}
    for event in events:
        bucket = by_day.get(event.day)
        if bucket is not None:
            bucket.append(event)
    return by_day
