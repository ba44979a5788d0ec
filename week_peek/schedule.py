"""
Layout pass: from a list of events and a configuration to grid placement.

compute_layout() is the entry point the renderer calls. It is a pure
function of (events, config, zoomed_day); nothing is cached between calls,
so running it twice on the same input gives equal results.
"""

from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from .axis import TimeLabel, DayHeader, time_labels, day_headers
from .config import ScheduleConfig
from .conflicts import group_events_by_day
from .debug import debug
from .geometry import calculate_event_position, total_slots
from .lanes import assign_lanes
from .models import ScheduleEvent, LayoutEvent, Orientation
from .overflow import DEFAULT_OVERFLOW_TITLE, compress_day, parse_overflow_id
from .time_only import DayOfWeek
from .validation import (
    ValidationIssue, ScheduleValidationError,
    validate_config, validate_events, validate_overflow_title
)


@dataclass(frozen=True)
class ScheduleLayout:
    """Everything a renderer needs to draw one pass."""
    events: tuple[LayoutEvent, ...]
    time_labels: tuple[TimeLabel, ...]
    day_headers: tuple[DayHeader, ...]
    visible_days: tuple[DayOfWeek, ...]
    total_slots: int
    orientation: Orientation
    zoomed_day: Optional[DayOfWeek] = None

    @property
    def num_days(self) -> int:
        return len(self.visible_days)

    @property
    def grid_rows(self) -> int:
        if self.orientation == Orientation.VERTICAL:
            return self.total_slots
        return self.num_days

    @property
    def grid_columns(self) -> int:
        if self.orientation == Orientation.VERTICAL:
            return self.num_days
        return self.total_slots

    def get(self, event_id: str) -> Optional[LayoutEvent]:
        for layout_event in self.events:
            if layout_event.id == event_id:
                return layout_event
        return None

    def events_for_day(self, day: DayOfWeek) -> list[LayoutEvent]:
        return [e for e in self.events if e.day == day]


@dataclass(frozen=True)
class ClickTarget:
    """
    What a click on an event box should do.

    Either `event` is set (hand it to the caller's click handler) or
    `zoom_day` is set (the box was an overflow placeholder).
    """
    event: Optional[ScheduleEvent] = None
    zoom_day: Optional[DayOfWeek] = None
    cluster_event_id: Optional[str] = None  # earliest event of the zoomed cluster

    @property
    def is_zoom(self) -> bool:
        return self.zoom_day is not None


def filter_visible_events(
    events: Iterable[ScheduleEvent],
    visible_days: Sequence[DayOfWeek],
    start_hour: Optional[int] = None,
    end_hour: Optional[int] = None
) -> list[ScheduleEvent]:
    """
    Keep events on visible days, and inside the time window when one is given.

    Events only partly inside the window are kept; geometry clamps them.
    """
    days = set(visible_days)
    window_start = start_hour * 60 if start_hour is not None else None
    window_end = (end_hour + 1) * 60 if end_hour is not None else None

    visible = []
    for event in events:
        if event.day not in days:
            continue
        start = event.start_time.to_minutes()
        end = max(event.end_time.to_minutes(), start + 1)
        if window_start is not None and end <= window_start:
            continue
        if window_end is not None and start >= window_end:
            continue
        visible.append(event)
    return visible


def _check_inputs(
    events: list[ScheduleEvent],
    config: ScheduleConfig,
    zoomed_day: Optional[DayOfWeek],
    overflow_title: str
):
    issues = validate_config(config) + validate_overflow_title(overflow_title)
    if issues:
        raise ScheduleValidationError("configuration", issues)

    issues = validate_events(events)
    if issues:
        raise ScheduleValidationError("events", issues)

    if zoomed_day is not None and zoomed_day not in config.visible_days:
        raise ScheduleValidationError("zoom", [
            ValidationIssue("zoomed_day", f"{zoomed_day!r} is not one of the visible days")
        ])


def compute_layout(
    events: Iterable[ScheduleEvent],
    config: ScheduleConfig,
    zoomed_day: Optional[DayOfWeek] = None,
    translations: Optional[dict] = None,
    overflow_title: str = DEFAULT_OVERFLOW_TITLE
) -> ScheduleLayout:
    """
    Run one layout pass.

    Args:
        events: Caller-owned events; validated as a batch and never modified.
        config: Grid configuration.
        zoomed_day: When set, only this day is laid out and overflow
            compression is disabled.
        translations: Optional day-name translations for the headers.
        overflow_title: Format of placeholder titles; "{}" gets the hidden count.

    Returns:
        A ScheduleLayout with events in visible-day order.

    Raises:
        ScheduleValidationError: the configuration, the events or the zoom
            day were rejected. Nothing is laid out in that case.
    """
    events = list(events)
    _check_inputs(events, config, zoomed_day, overflow_title)

    days = (zoomed_day,) if zoomed_day is not None else tuple(config.visible_days)
    visible = filter_visible_events(events, days, config.start_hour, config.end_hour)
    by_day = group_events_by_day(visible, days)

    placed: list[LayoutEvent] = []
    for day, day_events in by_day.items():
        if zoomed_day is not None:
            drawn = day_events
        else:
            drawn = compress_day(day, day_events, overflow_title)

        lanes = assign_lanes(drawn)
        for event in drawn:
            placed.append(calculate_event_position(
                event,
                config.start_hour,
                config.time_slot_interval,
                days,
                config.orientation,
                lanes[event.id],
                config.end_hour,
            ))

    debug(f"Layout pass: {len(events)} events in, {len(placed)} placed on {len(days)} day(s)"
          + (f", zoomed on {zoomed_day.name}" if zoomed_day is not None else ""))

    headers = day_headers(days, translations, zoomed_day) if config.show_day_headers else []

    return ScheduleLayout(
        events=tuple(placed),
        time_labels=tuple(time_labels(config.start_hour, config.end_hour, config.time_slot_interval)),
        day_headers=tuple(headers),
        visible_days=days,
        total_slots=total_slots(config.start_hour, config.end_hour, config.time_slot_interval),
        orientation=config.orientation,
        zoomed_day=zoomed_day,
    )


def resolve_click(
    layout: ScheduleLayout,
    event_id: str,
    events: Iterable[ScheduleEvent]
) -> Optional[ClickTarget]:
    """
    Map a clicked event id to an action.

    Placeholders resolve to a zoom on their day; other ids resolve to the
    caller's original event. Unknown ids give None.
    """
    layout_event = layout.get(event_id)
    if layout_event is not None and layout_event.is_overflow:
        parsed = parse_overflow_id(event_id)
        if parsed is None:
            return ClickTarget(zoom_day=layout_event.day)
        day, cluster_event_id = parsed
        return ClickTarget(zoom_day=day, cluster_event_id=cluster_event_id)

    for event in events:
        if event.id == event_id:
            return ClickTarget(event=event)
    return None
