"""
Week Peek Layout Module

This module provides the weekly schedule layout engine:
- Time model (time_only.py)
- Event and layout records (models.py)
- Conflict grouping (conflicts.py) and lane assignment (lanes.py)
- Overflow compression (overflow.py)
- Grid geometry (geometry.py) and axis labels (axis.py)
- Layout pass facade (schedule.py)
- Configuration parsing (config.py) and iCalendar import (ics_import.py)
"""

from .time_only import TimeOnly, DayOfWeek, WORK_WEEK_DAYS, ALL_DAYS, get_day_name
from .models import (
    ScheduleEvent, LaneInfo, LayoutEvent, Orientation, TimeSlotInterval,
    OVERFLOW_CLASS_NAME, OVERFLOW_ID_PREFIX, interval_minutes
)
from .conflicts import group_conflicts, group_events_by_day
from .lanes import assign_lanes, assign_lanes_by_day
from .overflow import (
    HIDE_THRESHOLD, VISIBLE_COUNT, compress_day,
    overflow_event_id, parse_overflow_id, is_overflow_id
)
from .geometry import calculate_event_position, time_to_slot, total_slots, LayoutInvariantError
from .axis import TimeLabel, DayHeader, time_labels, day_headers
from .content import ContentContext, EventContent, default_formatter
from .validation import (
    ValidationIssue, ScheduleValidationError,
    validate_config, validate_event, validate_events, validate_overflow_title
)
from .config import Config, ScheduleConfig, LocalizationConfig, LabelsConfig
from .schedule import ScheduleLayout, ClickTarget, compute_layout, filter_visible_events, resolve_click
from .ics_import import events_from_ical, load_ics_file

__all__ = [
    'TimeOnly',
    'DayOfWeek',
    'WORK_WEEK_DAYS',
    'ALL_DAYS',
    'get_day_name',
    'ScheduleEvent',
    'LaneInfo',
    'LayoutEvent',
    'Orientation',
    'TimeSlotInterval',
    'OVERFLOW_CLASS_NAME',
    'OVERFLOW_ID_PREFIX',
    'interval_minutes',
    'group_conflicts',
    'group_events_by_day',
    'assign_lanes',
    'assign_lanes_by_day',
    'HIDE_THRESHOLD',
    'VISIBLE_COUNT',
    'compress_day',
    'overflow_event_id',
    'parse_overflow_id',
    'is_overflow_id',
    'calculate_event_position',
    'time_to_slot',
    'total_slots',
    'LayoutInvariantError',
    'TimeLabel',
    'DayHeader',
    'time_labels',
    'day_headers',
    'ContentContext',
    'EventContent',
    'default_formatter',
    'ValidationIssue',
    'ScheduleValidationError',
    'validate_config',
    'validate_event',
    'validate_events',
    'validate_overflow_title',
    'Config',
    'ScheduleConfig',
    'LocalizationConfig',
    'LabelsConfig',
    'ScheduleLayout',
    'ClickTarget',
    'compute_layout',
    'filter_visible_events',
    'resolve_click',
    'events_from_ical',
    'load_ics_file',
]
