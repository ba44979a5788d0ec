"""
Lane assignment for overlapping events within a day.
"""

from typing import Iterable, Mapping

from .conflicts import group_conflicts, sort_by_start
from .models import ScheduleEvent, LaneInfo
from .time_only import DayOfWeek


def _assign_group_lanes(group: list[ScheduleEvent]) -> dict[str, LaneInfo]:
    """Greedy lane packing for one conflict group."""
    lane_ends: list[int] = []  # end minute of the last event in each lane
    event_lane: dict[str, int] = {}

    for event in sort_by_start(group):
        start = event.start_time.to_minutes()
        end = event.end_time.to_minutes()

        for lane_idx, lane_end in enumerate(lane_ends):
            if lane_end <= start:
                lane_ends[lane_idx] = end
                event_lane[event.id] = lane_idx
                break
        else:
            event_lane[event.id] = len(lane_ends)
            lane_ends.append(end)

    # Every member shares the group width so columns divide evenly
    total_lanes = max(event_lane.values()) + 1
    return {event_id: LaneInfo(lane, total_lanes) for event_id, lane in event_lane.items()}


def assign_lanes(day_events: Iterable[ScheduleEvent]) -> dict[str, LaneInfo]:
    """
    Compute lane info for every event of one day.

    Returns a mapping from event id to LaneInfo. Event ids must be unique
    within the day.
    """
    lanes: dict[str, LaneInfo] = {}
    for group in group_conflicts(day_events):
        lanes.update(_assign_group_lanes(group))
    return lanes


def assign_lanes_by_day(
    events_by_day: Mapping[DayOfWeek, Iterable[ScheduleEvent]]
) -> dict[DayOfWeek, dict[str, LaneInfo]]:
    """Run assign_lanes for each day of a per-day mapping."""
    return {day: assign_lanes(events) for day, events in events_by_day.items()}
