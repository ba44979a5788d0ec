"""
Tests for grid geometry.
"""

import pytest

from week_peek.geometry import (
    LayoutInvariantError, calculate_event_position, slot_offset, time_to_slot, total_slots
)
from week_peek.models import LaneInfo, Orientation, TimeSlotInterval
from week_peek.time_only import DayOfWeek, TimeOnly, WORK_WEEK_DAYS

SIXTY = TimeSlotInterval.SIXTY_MINUTES
THIRTY = TimeSlotInterval.THIRTY_MINUTES
FIFTEEN = TimeSlotInterval.FIFTEEN_MINUTES


class TestSlots:

    def test_time_to_slot(self):
        assert time_to_slot(TimeOnly(9, 0), 9, SIXTY) == 0
        assert time_to_slot(TimeOnly(10, 30), 9, SIXTY) == 1
        assert time_to_slot(TimeOnly(10, 30), 9, THIRTY) == 3
        assert time_to_slot(TimeOnly(9, 44), 9, FIFTEEN) == 2
        assert time_to_slot(TimeOnly(9, 44), 9, 15) == 2

    def test_slot_offset(self):
        assert slot_offset(TimeOnly(10, 30), 9, SIXTY) == 0.5
        assert slot_offset(TimeOnly(10, 30), 9, THIRTY) == 0.0
        assert slot_offset(TimeOnly(9, 20), 9, THIRTY) == pytest.approx(2 / 3)

    def test_total_slots(self):
        assert total_slots(9, 17, SIXTY) == 9
        assert total_slots(9, 17, THIRTY) == 18
        assert total_slots(0, 23, FIFTEEN) == 96


class TestCalculateEventPosition:

    def test_ninety_minute_event_in_hour_slots(self, make_event):
        event = make_event("a", "09:00", "10:30")
        placed = calculate_event_position(event, 9, SIXTY, WORK_WEEK_DAYS)

        assert placed.start_slot == 0
        assert placed.end_slot == 1
        assert placed.final_end_slot == 2
        assert (placed.grid_row_start, placed.grid_row_end) == (1, 3)
        assert (placed.grid_column_start, placed.grid_column_end) == (1, 2)
        assert placed.top_percent == 0
        assert placed.height_percent == 150

    def test_sub_slot_offsets(self, make_event):
        event = make_event("a", "09:15", "09:45", day=DayOfWeek.WEDNESDAY)
        placed = calculate_event_position(event, 9, SIXTY, WORK_WEEK_DAYS)
        assert (placed.grid_row_start, placed.grid_row_end) == (1, 2)
        assert (placed.grid_column_start, placed.grid_column_end) == (3, 4)
        assert placed.top_percent == 25
        assert placed.height_percent == 50

    def test_slot_aligned_end_does_not_grow(self, make_event):
        event = make_event("a", "10:00", "11:00")
        placed = calculate_event_position(event, 9, THIRTY, WORK_WEEK_DAYS)
        assert (placed.start_slot, placed.end_slot, placed.final_end_slot) == (2, 4, 4)
        assert (placed.grid_row_start, placed.grid_row_end) == (3, 5)
        assert placed.height_percent == 200

    def test_zero_duration_still_takes_a_slot(self, make_event):
        event = make_event("a", "10:00", "10:00")
        placed = calculate_event_position(event, 9, SIXTY, WORK_WEEK_DAYS)
        assert placed.final_end_slot == placed.start_slot + 1
        assert placed.grid_row_end - placed.grid_row_start == 1
        assert placed.height_percent == 100

    def test_zero_duration_mid_slot(self, make_event):
        event = make_event("a", "10:30", "10:30")
        placed = calculate_event_position(event, 9, SIXTY, WORK_WEEK_DAYS)
        assert placed.final_end_slot == placed.start_slot + 1
        assert placed.top_percent == 50
        assert placed.height_percent == 50

    def test_inverted_interval_falls_back_to_one_slot(self, make_event):
        event = make_event("a", "11:00", "10:00")
        placed = calculate_event_position(event, 9, SIXTY, WORK_WEEK_DAYS)
        assert (placed.start_slot, placed.final_end_slot) == (2, 3)

    def test_lane_percentages_vertical(self, make_event):
        event = make_event("a", "09:00", "10:00")
        placed = calculate_event_position(event, 9, SIXTY, WORK_WEEK_DAYS, lane_info=LaneInfo(1, 4))
        assert placed.left_percent == 25
        assert placed.width_percent == 25
        assert placed.lane_info == LaneInfo(1, 4)

    def test_without_lane_info_fills_the_day(self, make_event):
        placed = calculate_event_position(make_event("a", "09:00", "10:00"), 9, SIXTY, WORK_WEEK_DAYS)
        assert (placed.left_percent, placed.width_percent) == (0, 100)
        assert placed.lane_info is None

    def test_orientation_swaps_axes(self, make_event):
        event = make_event("a", "09:20", "11:10", day=DayOfWeek.THURSDAY)
        lane = LaneInfo(2, 3)
        vertical = calculate_event_position(event, 8, THIRTY, WORK_WEEK_DAYS, Orientation.VERTICAL, lane)
        horizontal = calculate_event_position(event, 8, THIRTY, WORK_WEEK_DAYS, Orientation.HORIZONTAL, lane)

        assert (vertical.grid_row_start, vertical.grid_row_end) == \
            (horizontal.grid_column_start, horizontal.grid_column_end)
        assert (vertical.grid_column_start, vertical.grid_column_end) == \
            (horizontal.grid_row_start, horizontal.grid_row_end)
        assert vertical.top_percent == horizontal.left_percent
        assert vertical.height_percent == horizontal.width_percent
        assert vertical.left_percent == horizontal.top_percent
        assert vertical.width_percent == horizontal.height_percent
        assert vertical.time_axis_span == horizontal.time_axis_span
        assert vertical.day_axis_span == horizontal.day_axis_span

    def test_day_index_follows_visible_day_order(self, make_event):
        event = make_event("a", "09:00", "10:00", day=DayOfWeek.MONDAY)
        days = [DayOfWeek.SUNDAY, DayOfWeek.SATURDAY, DayOfWeek.MONDAY]
        placed = calculate_event_position(event, 9, SIXTY, days)
        assert (placed.grid_column_start, placed.grid_column_end) == (3, 4)

    def test_hidden_day_is_an_invariant_violation(self, make_event):
        event = make_event("a", "09:00", "10:00", day=DayOfWeek.SUNDAY)
        with pytest.raises(LayoutInvariantError):
            calculate_event_position(event, 9, SIXTY, WORK_WEEK_DAYS)

    def test_clamped_to_window(self, make_event):
        event = make_event("a", "07:30", "09:30")
        placed = calculate_event_position(event, 9, SIXTY, WORK_WEEK_DAYS, end_hour=17)
        assert placed.start_slot == 0
        assert placed.top_percent == 0
        assert placed.height_percent == 50

        late = make_event("b", "17:30", "19:00")
        placed = calculate_event_position(late, 9, SIXTY, WORK_WEEK_DAYS, end_hour=17)
        assert (placed.start_slot, placed.final_end_slot) == (8, 9)
        assert placed.height_percent == 50

    def test_event_fields_preserved(self, make_event):
        event = make_event("a", "09:00", "10:00", description="notes", color="#ff0000")
        placed = calculate_event_position(event, 9, SIXTY, WORK_WEEK_DAYS)
        assert placed.event is event
        assert placed.id == "a"
        assert placed.title == "a"
        assert placed.description == "notes"
        assert placed.color == "#ff0000"
        assert not placed.is_overflow
