"""
Time-of-day value type and day-of-week enumeration.

TimeOnly is a minutes-since-midnight wall-clock value. There is no date and
no timezone attached: a schedule only cares about where in the day an event
sits.
"""

from dataclasses import dataclass
from datetime import time as dt_time
from enum import Enum
from typing import Optional


@dataclass(frozen=True)
class TimeOnly:
    """
    A wall-clock time with minute resolution.

    Ordering, equality and hashing are defined by to_minutes() only.
    """
    hours: int
    minutes: int = 0

    def __post_init__(self):
        for name, value, upper in (("hours", self.hours, 23), ("minutes", self.minutes, 59)):
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"TimeOnly.{name} must be an int, got {type(value).__name__}")
            if not 0 <= value <= upper:
                raise ValueError(f"TimeOnly.{name} must be between 0 and {upper}, got {value}")

    @classmethod
    def from_minutes(cls, total: int) -> 'TimeOnly':
        """Build from minutes since midnight (0..1439)."""
        if not 0 <= total < 24 * 60:
            raise ValueError(f"Minutes since midnight out of range: {total}")
        return cls(total // 60, total % 60)

    @classmethod
    def from_time(cls, value: dt_time) -> 'TimeOnly':
        """Build from a datetime.time, dropping seconds."""
        return cls(value.hour, value.minute)

    @classmethod
    def parse(cls, text: str) -> 'TimeOnly':
        """Parse 'HH:MM' (24-hour)."""
        parts = text.strip().split(':')
        if len(parts) != 2 or not all(p.isdigit() for p in parts):
            raise ValueError(f"Invalid time '{text}', expected HH:MM")
        return cls(int(parts[0]), int(parts[1]))

    def to_minutes(self) -> int:
        return self.hours * 60 + self.minutes

    def is_before(self, other: 'TimeOnly') -> bool:
        return self.to_minutes() < other.to_minutes()

    def __eq__(self, other):
        if isinstance(other, TimeOnly):
            return self.to_minutes() == other.to_minutes()
        return NotImplemented

    def __hash__(self):
        return hash(self.to_minutes())

    def __lt__(self, other: 'TimeOnly') -> bool:
        if not isinstance(other, TimeOnly):
            return NotImplemented
        return self.to_minutes() < other.to_minutes()

    def __le__(self, other: 'TimeOnly') -> bool:
        if not isinstance(other, TimeOnly):
            return NotImplemented
        return self.to_minutes() <= other.to_minutes()

    def __gt__(self, other: 'TimeOnly') -> bool:
        if not isinstance(other, TimeOnly):
            return NotImplemented
        return self.to_minutes() > other.to_minutes()

    def __ge__(self, other: 'TimeOnly') -> bool:
        if not isinstance(other, TimeOnly):
            return NotImplemented
        return self.to_minutes() >= other.to_minutes()

    def __str__(self) -> str:
        return f"{self.hours:02d}:{self.minutes:02d}"


class DayOfWeek(Enum):
    """Day of the week, numbered like date.weekday() (0=Monday)."""
    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6

    @classmethod
    def parse(cls, value) -> 'DayOfWeek':
        """
        Accept a DayOfWeek, a weekday number, or a (possibly abbreviated) English name.

        Raises ValueError for anything else.
        """
        if isinstance(value, DayOfWeek):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            return cls(value)
        if isinstance(value, str):
            key = value.strip().lower()
            for day in cls:
                name = day.name.lower()
                if key == name or (len(key) >= 3 and name.startswith(key)):
                    return day
        raise ValueError(f"Unknown day of week: {value!r}")


WORK_WEEK_DAYS: tuple[DayOfWeek, ...] = (
    DayOfWeek.MONDAY, DayOfWeek.TUESDAY, DayOfWeek.WEDNESDAY,
    DayOfWeek.THURSDAY, DayOfWeek.FRIDAY,
)
ALL_DAYS: tuple[DayOfWeek, ...] = tuple(DayOfWeek)

DEFAULT_DAY_NAMES = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]


def get_day_name(day: DayOfWeek, translations: Optional[dict] = None) -> str:
    """Display name for a day, preferring a translation when one is given."""
    if translations:
        name = translations.get(day)
        if name is None:
            name = translations.get(day.value)
        if name:
            return name
    return DEFAULT_DAY_NAMES[day.value]
