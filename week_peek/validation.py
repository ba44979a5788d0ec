"""Validation of schedule configuration and event batches.

Validators return lists of ValidationIssue instead of raising, so callers can
report every problem at once. ScheduleValidationError wraps such a list when
a whole batch or configuration has to be refused.
"""

from dataclasses import dataclass
from typing import Iterable

from .geometry import LayoutInvariantError
from .models import OVERFLOW_ID_PREFIX, Orientation, ScheduleEvent, TimeSlotInterval
from .time_only import DayOfWeek, TimeOnly

SUPPORTED_INTERVALS = tuple(i.value for i in TimeSlotInterval)


@dataclass(frozen=True)
class ValidationIssue:
    field: str
    message: str

    def __str__(self) -> str:
        return f"{self.field}: {self.message}"


class ScheduleValidationError(ValueError):
    """A configuration or event batch was rejected."""

    def __init__(self, what: str, issues: list[ValidationIssue]):
        self.issues = list(issues)
        super().__init__(f"Invalid {what}: " + ", ".join(str(i) for i in self.issues))


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_config(config) -> list[ValidationIssue]:
    """Check a ScheduleConfig; an empty list means it is usable."""
    issues: list[ValidationIssue] = []

    hours_ok = True
    for name in ("start_hour", "end_hour"):
        value = getattr(config, name, None)
        if not _is_int(value) or not 0 <= value <= 23:
            issues.append(ValidationIssue(name, f"must be an integer between 0 and 23, got {value!r}"))
            hours_ok = False
    if hours_ok and config.start_hour > config.end_hour:
        issues.append(ValidationIssue(
            "start_hour",
            f"must not be after end_hour ({config.start_hour} > {config.end_hour})"
        ))

    interval = getattr(config, "time_slot_interval", None)
    interval_value = interval.value if isinstance(interval, TimeSlotInterval) else interval
    if not _is_int(interval_value) or interval_value not in SUPPORTED_INTERVALS:
        issues.append(ValidationIssue(
            "time_slot_interval",
            f"must be one of {', '.join(str(i) for i in SUPPORTED_INTERVALS)} minutes, got {interval!r}"
        ))

    days = getattr(config, "visible_days", None)
    if not days:
        issues.append(ValidationIssue("visible_days", "must contain at least one day"))
    else:
        seen: set[DayOfWeek] = set()
        for i, day in enumerate(days):
            if not isinstance(day, DayOfWeek):
                issues.append(ValidationIssue(f"visible_days[{i}]", f"unknown day {day!r}"))
            elif day in seen:
                issues.append(ValidationIssue(f"visible_days[{i}]", f"duplicate day {day.name}"))
            else:
                seen.add(day)

    orientation = getattr(config, "orientation", None)
    if not isinstance(orientation, Orientation):
        issues.append(ValidationIssue("orientation", f"must be an Orientation, got {orientation!r}"))

    return issues


def validate_event(event) -> list[ValidationIssue]:
    """Check a single event. Field names are relative to the event."""
    issues: list[ValidationIssue] = []

    event_id = getattr(event, "id", None)
    if not isinstance(event_id, str) or not event_id.strip():
        issues.append(ValidationIssue("id", "must be a non-empty string"))
    elif event_id.startswith(OVERFLOW_ID_PREFIX):
        issues.append(ValidationIssue(
            "id", f"must not start with '{OVERFLOW_ID_PREFIX}', which is reserved for placeholders"
        ))

    if not isinstance(getattr(event, "day", None), DayOfWeek):
        issues.append(ValidationIssue("day", f"unknown day {getattr(event, 'day', None)!r}"))

    start = getattr(event, "start_time", None)
    end = getattr(event, "end_time", None)
    times_ok = True
    for name, value in (("start_time", start), ("end_time", end)):
        if not isinstance(value, TimeOnly):
            issues.append(ValidationIssue(name, "must be a TimeOnly"))
            times_ok = False
    if times_ok and end.to_minutes() <= start.to_minutes():
        issues.append(ValidationIssue("end_time", f"must be after start_time ({start} - {end})"))

    if not isinstance(getattr(event, "title", None), str):
        issues.append(ValidationIssue("title", "must be a string"))

    return issues


def validate_overflow_title(title_format) -> list[ValidationIssue]:
    """Check a placeholder title format; "{}" receives the hidden event count."""
    if not isinstance(title_format, str):
        return [ValidationIssue("overflow_title", f"must be a string, got {title_format!r}")]
    try:
        title_format.format(0)
    except (AttributeError, IndexError, KeyError, ValueError) as e:
        return [ValidationIssue(
            "overflow_title",
            f"must contain at most one '{{}}' placeholder, got {title_format!r} ({e!r})"
        )]
    return []


def validate_events(events: Iterable[ScheduleEvent]) -> list[ValidationIssue]:
    """
    Check a batch of events, including id uniqueness across the batch.

    Field names are prefixed with the event position: events[3].end_time.
    """
    issues: list[ValidationIssue] = []
    first_index: dict[str, int] = {}

    for index, event in enumerate(events):
        for issue in validate_event(event):
            issues.append(ValidationIssue(f"events[{index}].{issue.field}", issue.message))

        event_id = getattr(event, "id", None)
        if isinstance(event_id, str) and event_id:
            if event_id in first_index:
                issues.append(ValidationIssue(
                    f"events[{index}].id",
                    f"duplicate id '{event_id}' (first used by events[{first_index[event_id]}])"
                ))
            else:
                first_index[event_id] = index

    return issues


__all__ = [
    "LayoutInvariantError",
    "ScheduleValidationError",
    "ValidationIssue",
    "validate_config",
    "validate_event",
    "validate_events",
    "validate_overflow_title",
]
