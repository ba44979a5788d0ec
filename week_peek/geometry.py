"""
Mapping from event times to grid cells and sub-cell offsets.

Coarse placement uses whole slots (integer grid lines); the percentage
values refine it within the cells so an event starting at 9:15 in a
60 minute grid starts a quarter of the way into the 9:00 row.
"""

from typing import Optional, Sequence

from .models import ScheduleEvent, LayoutEvent, LaneInfo, Orientation, interval_minutes
from .time_only import DayOfWeek, TimeOnly

MINUTES_PER_DAY = 24 * 60


class LayoutInvariantError(RuntimeError):
    """Raised when the layout engine is handed input it should never see."""


def total_slots(start_hour: int, end_hour: int, interval) -> int:
    """Number of slots in the grid; the end hour itself is a full visible hour."""
    return (end_hour - start_hour + 1) * 60 // interval_minutes(interval)


def _slot_and_offset(minutes_from_start: int, slot_minutes: int) -> tuple[int, float]:
    slot = minutes_from_start // slot_minutes
    offset = (minutes_from_start - slot * slot_minutes) / slot_minutes
    return slot, offset


def time_to_slot(time: TimeOnly, start_hour: int, interval) -> int:
    """0-based slot index holding `time`. Negative before the start hour."""
    minutes = (time.hours - start_hour) * 60 + time.minutes
    return minutes // interval_minutes(interval)


def slot_offset(time: TimeOnly, start_hour: int, interval) -> float:
    """Fraction (0 <= x < 1) of its slot that has elapsed at `time`."""
    minutes = (time.hours - start_hour) * 60 + time.minutes
    return _slot_and_offset(minutes, interval_minutes(interval))[1]


def calculate_event_position(
    event: ScheduleEvent,
    start_hour: int,
    interval,
    visible_days: Sequence[DayOfWeek],
    orientation: Orientation = Orientation.VERTICAL,
    lane_info: Optional[LaneInfo] = None,
    end_hour: Optional[int] = None
) -> LayoutEvent:
    """
    Place one event on the grid.

    Args:
        event: The event to place; its day must be one of visible_days.
        start_hour: First hour shown by the grid.
        interval: Slot width, a TimeSlotInterval or minutes.
        visible_days: Ordered days; the position is the day's grid line.
        orientation: Which axis carries time.
        lane_info: Lane of the event within its conflict group, if any.
        end_hour: Last hour shown. When given, times are clamped to the grid.

    Returns:
        A new LayoutEvent; the event itself is left untouched.

    Raises:
        LayoutInvariantError: the event's day is not visible.
    """
    try:
        day_index = list(visible_days).index(event.day)
    except ValueError:
        raise LayoutInvariantError(
            f"Event '{event.id}' is on {event.day.name}, which is not a visible day"
        ) from None

    slot_minutes = interval_minutes(interval)
    window_start = start_hour * 60
    start_minutes = event.start_time.to_minutes()
    end_minutes = event.end_time.to_minutes()

    if end_hour is not None:
        window_end = min((end_hour + 1) * 60, MINUTES_PER_DAY)
        start_minutes = max(window_start, min(window_end, start_minutes))
        end_minutes = max(window_start, min(window_end, end_minutes))

    start_slot, start_offset = _slot_and_offset(start_minutes - window_start, slot_minutes)
    end_slot, end_offset = _slot_and_offset(end_minutes - window_start, slot_minutes)

    # A partly used last slot still belongs to the event, and every event
    # occupies at least one slot.
    covered_end = end_slot + 1 if end_offset > 0 else end_slot
    final_end_slot = max(covered_end, start_slot + 1)

    time_start_percent = start_offset * 100
    duration = end_minutes - start_minutes
    if duration > 0:
        time_extent_percent = duration / slot_minutes * 100
    else:
        time_extent_percent = 100 - time_start_percent

    lane = lane_info or LaneInfo(0, 1)
    lane_start_percent = lane.lane / lane.total_lanes * 100
    lane_extent_percent = 100 / lane.total_lanes

    time_span = (start_slot + 1, final_end_slot + 1)
    day_span = (day_index + 1, day_index + 2)

    if orientation == Orientation.VERTICAL:
        rows, columns = time_span, day_span
        top, height = time_start_percent, time_extent_percent
        left, width = lane_start_percent, lane_extent_percent
    else:
        rows, columns = day_span, time_span
        left, width = time_start_percent, time_extent_percent
        top, height = lane_start_percent, lane_extent_percent

    return LayoutEvent(
        event=event,
        orientation=orientation,
        grid_row_start=rows[0],
        grid_row_end=rows[1],
        grid_column_start=columns[0],
        grid_column_end=columns[1],
        start_slot=start_slot,
        end_slot=end_slot,
        final_end_slot=final_end_slot,
        top_percent=top,
        height_percent=height,
        left_percent=left,
        width_percent=width,
        lane_info=lane_info,
    )
