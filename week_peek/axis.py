"""
Time-axis labels and day headers.

Pure enumeration for the renderer; no layout math happens here.
"""

from dataclasses import dataclass
from typing import Optional, Sequence

from .models import interval_minutes
from .time_only import DayOfWeek, TimeOnly, get_day_name


@dataclass(frozen=True)
class TimeLabel:
    time: TimeOnly
    slot_index: int  # slot whose leading edge the label marks

    @property
    def text(self) -> str:
        return str(self.time)


@dataclass(frozen=True)
class DayHeader:
    day: DayOfWeek
    name: str
    is_zoomed: bool = False


def time_labels(start_hour: int, end_hour: int, interval) -> list[TimeLabel]:
    """
    One label per hour from start_hour to end_hour inclusive.

    Sub-hour labels (:15, :30, :45) are only added for hours before end_hour.
    """
    minutes = interval_minutes(interval)
    slots_per_hour = 60 // minutes

    labels: list[TimeLabel] = []
    for hour in range(start_hour, end_hour + 1):
        base_slot = (hour - start_hour) * slots_per_hour
        labels.append(TimeLabel(TimeOnly(hour, 0), base_slot))
        if hour < end_hour:
            for step in range(1, slots_per_hour):
                labels.append(TimeLabel(TimeOnly(hour, step * minutes), base_slot + step))
    return labels


def day_headers(
    visible_days: Sequence[DayOfWeek],
    translations: Optional[dict] = None,
    zoomed_day: Optional[DayOfWeek] = None
) -> list[DayHeader]:
    """Header descriptors in visible-day order."""
    return [
        DayHeader(day, get_day_name(day, translations), day == zoomed_day)
        for day in visible_days
    ]
