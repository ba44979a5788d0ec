"""
Data model for the schedule layout engine.

ScheduleEvent is owned by the caller and never mutated; LayoutEvent wraps
one and adds the grid placement computed for a single layout pass.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .time_only import TimeOnly, DayOfWeek


OVERFLOW_CLASS_NAME = "event-overflow-indicator"
OVERFLOW_ID_PREFIX = "overflow-"  # reserved for placeholders


class TimeSlotInterval(Enum):
    """Width of one grid slot in minutes."""
    FIFTEEN_MINUTES = 15
    THIRTY_MINUTES = 30
    SIXTY_MINUTES = 60


class Orientation(Enum):
    VERTICAL = "vertical"      # rows = time slots, columns = days
    HORIZONTAL = "horizontal"  # rows = days, columns = time slots


def interval_minutes(interval) -> int:
    """Slot width in minutes for a TimeSlotInterval or a plain number of minutes."""
    if isinstance(interval, TimeSlotInterval):
        return interval.value
    return int(interval)


@dataclass(frozen=True)
class ScheduleEvent:
    """A time-bounded event on one day of the week."""
    id: str
    day: DayOfWeek
    start_time: TimeOnly
    end_time: TimeOnly
    title: str
    description: Optional[str] = None
    color: Optional[str] = None
    class_name: Optional[str] = None
    style: Optional[str] = None

    @property
    def duration_minutes(self) -> int:
        """End minus start; zero or negative for degenerate events."""
        return self.end_time.to_minutes() - self.start_time.to_minutes()

    @property
    def is_overflow(self) -> bool:
        """True for synthetic "+N more" placeholders."""
        return bool(self.class_name) and OVERFLOW_CLASS_NAME in self.class_name.split()


@dataclass(frozen=True)
class LaneInfo:
    lane: int
    total_lanes: int


@dataclass(frozen=True)
class LayoutEvent:
    """
    An event with its grid placement.

    Grid lines are 1-based with an exclusive end, like CSS grid.
    The percentages are relative to one grid cell: along the time axis they
    give the sub-slot start and length (a 90 minute event in 60 minute slots
    is 150% tall), along the day axis they give the lane position.
    """
    event: ScheduleEvent
    orientation: Orientation
    grid_row_start: int
    grid_row_end: int
    grid_column_start: int
    grid_column_end: int
    start_slot: int
    end_slot: int
    final_end_slot: int
    top_percent: float
    height_percent: float
    left_percent: float
    width_percent: float
    lane_info: Optional[LaneInfo] = None

    # Delegated event fields

    @property
    def id(self) -> str:
        return self.event.id

    @property
    def day(self) -> DayOfWeek:
        return self.event.day

    @property
    def start_time(self) -> TimeOnly:
        return self.event.start_time

    @property
    def end_time(self) -> TimeOnly:
        return self.event.end_time

    @property
    def title(self) -> str:
        return self.event.title

    @property
    def description(self) -> Optional[str]:
        return self.event.description

    @property
    def color(self) -> Optional[str]:
        return self.event.color

    @property
    def class_name(self) -> Optional[str]:
        return self.event.class_name

    @property
    def style(self) -> Optional[str]:
        return self.event.style

    @property
    def is_overflow(self) -> bool:
        return self.event.is_overflow

    @property
    def time_axis_span(self) -> tuple[int, int]:
        """Grid lines covered along the time axis, whatever the orientation."""
        if self.orientation == Orientation.VERTICAL:
            return (self.grid_row_start, self.grid_row_end)
        return (self.grid_column_start, self.grid_column_end)

    @property
    def day_axis_span(self) -> tuple[int, int]:
        if self.orientation == Orientation.VERTICAL:
            return (self.grid_column_start, self.grid_column_end)
        return (self.grid_row_start, self.grid_row_end)
