"""
Event content formatting.

Renderers ask a formatter what to show inside an event box. The formatter
receives the event, its lane info and the orientation, and returns an
EventContent. The viewer accepts any ContentFormatter in place of
default_formatter. The layout engine never looks at the result.
"""

from dataclasses import dataclass
from typing import Callable, Optional

from .models import ScheduleEvent, LaneInfo, Orientation

SHORT_EVENT_MINUTES = 60


@dataclass(frozen=True)
class ContentContext:
    event: ScheduleEvent
    lane_info: Optional[LaneInfo]
    orientation: Orientation

    @property
    def total_lanes(self) -> int:
        return self.lane_info.total_lanes if self.lane_info else 1


@dataclass(frozen=True)
class EventContent:
    """What a renderer should draw inside one event box."""
    title: str
    time_text: Optional[str] = None
    description: Optional[str] = None
    compact: bool = False         # reduced padding
    wrap_title: bool = False
    centered: bool = False
    zoomable: bool = False        # a click should zoom into the day
    show_tooltip: bool = True
    aria_label: Optional[str] = None


ContentFormatter = Callable[[ContentContext], EventContent]


def default_formatter(context: ContentContext, zoom_label: str = "Zoom to view all overlapping events") -> EventContent:
    """
    Presentation rules for the built-in renderer.

    Narrow boxes drop detail: two lanes shorten the time of sub-hour events
    to just the start, three or more lanes drop the time and let the title
    wrap. Descriptions only fit in events longer than an hour.
    """
    event = context.event
    lanes = context.total_lanes

    if event.is_overflow:
        return EventContent(
            title=event.title,
            centered=True,
            zoomable=True,
            show_tooltip=False,
            aria_label=zoom_label,
        )

    duration = event.duration_minutes
    time_text: Optional[str] = f"{event.start_time} - {event.end_time}"

    if context.orientation == Orientation.HORIZONTAL:
        if lanes > 2:
            time_text = None
        return EventContent(title=event.title, time_text=time_text)

    compact = False
    wrap_title = False
    if lanes == 2:
        compact = True
        if duration < SHORT_EVENT_MINUTES:
            time_text = str(event.start_time)
    elif lanes > 2:
        compact = True
        time_text = None
        wrap_title = True

    description = event.description if duration > SHORT_EVENT_MINUTES else None

    return EventContent(
        title=event.title,
        time_text=time_text,
        description=description or None,
        compact=compact,
        wrap_title=wrap_title,
    )


def tooltip_text(event: ScheduleEvent) -> Optional[str]:
    """Plain-text tooltip for an event, or None for placeholders."""
    if event.is_overflow:
        return None
    lines = [event.title, f"{event.start_time} - {event.end_time}"]
    if event.description:
        lines.append(event.description)
    return "\n".join(lines)
