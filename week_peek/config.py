"""
Configuration parser for Week Peek.

Handles TOML file parsing into the schedule, localization and label
settings consumed by the layout engine and the viewer.
"""

import tomllib
import os
from pathlib import Path
from dataclasses import dataclass, field, replace
from typing import Optional

from .debug import debug
from .models import Orientation, TimeSlotInterval, interval_minutes
from .overflow import DEFAULT_OVERFLOW_TITLE
from .time_only import DayOfWeek, WORK_WEEK_DAYS, DEFAULT_DAY_NAMES
from .validation import ValidationIssue, ScheduleValidationError, validate_config, validate_overflow_title


@dataclass(frozen=True)
class ScheduleConfig:
    """Grid settings for a layout pass. Read-only to the engine."""
    visible_days: tuple[DayOfWeek, ...] = WORK_WEEK_DAYS
    start_hour: int = 9
    end_hour: int = 17
    time_slot_interval: TimeSlotInterval = TimeSlotInterval.SIXTY_MINUTES
    orientation: Orientation = Orientation.VERTICAL
    show_day_headers: bool = True
    class_name: str = ""

    @property
    def interval_minutes(self) -> int:
        return interval_minutes(self.time_slot_interval)

    def merged(self, **changes) -> 'ScheduleConfig':
        """
        Return a copy with some fields replaced, after validating the result.

        Raises ScheduleValidationError if the merged configuration is invalid;
        self is never changed.
        """
        if changes.get('visible_days') is not None:
            changes['visible_days'] = tuple(changes['visible_days'])
        candidate = replace(self, **changes)
        issues = validate_config(candidate)
        if issues:
            raise ScheduleValidationError("configuration", issues)
        return candidate


@dataclass
class LocalizationConfig:
    """Configuration for localized day names."""
    # Default to English day names, Monday first
    day_names: list[str] = None

    def __post_init__(self):
        if self.day_names is None:
            self.day_names = list(DEFAULT_DAY_NAMES)

    def get_day_name(self, weekday: int) -> str:
        """Get localized day name for weekday (0=Monday, 6=Sunday)."""
        return self.day_names[weekday] if 0 <= weekday < len(self.day_names) else ""

    def translations(self) -> dict[DayOfWeek, str]:
        """Day-name mapping in the form the axis module takes."""
        return {day: self.get_day_name(day.value) for day in DayOfWeek if self.get_day_name(day.value)}


@dataclass
class LabelsConfig:
    """Configuration for UI labels."""
    window_title: str = "Week Peek"
    overflow_title: str = DEFAULT_OVERFLOW_TITLE  # "{}" receives the hidden count
    button_zoom_out: str = "Whole week"
    button_orientation: str = "Rotate"
    zoom_aria_label: str = "Zoom to view all overlapping events"


@dataclass
class Config:
    """Main configuration container for Week Peek."""

    schedule: ScheduleConfig = field(default_factory=ScheduleConfig)
    localization: LocalizationConfig = field(default_factory=LocalizationConfig)
    labels: LabelsConfig = field(default_factory=LabelsConfig)
    ics_files: list[Path] = field(default_factory=list)

    @classmethod
    def get_default_config_path(cls) -> Path:
        """Get the default configuration file path."""
        xdg_config = os.environ.get('XDG_CONFIG_HOME', os.path.expanduser('~/.config'))
        return Path(xdg_config) / 'week-peek' / 'week-peek.toml'

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> 'Config':
        """
        Load configuration from TOML file.

        Raises:
            FileNotFoundError: the file does not exist.
            ScheduleValidationError: the [Schedule] section or the overflow title is invalid.
        """
        if config_path is None:
            config_path = cls.get_default_config_path()

        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, 'rb') as f:
            data = tomllib.load(f)

        debug(f"TOML data keys: {list(data.keys())}")
        return cls.from_dict(data, base_dir=config_path.parent)

    @classmethod
    def from_dict(cls, data: dict, base_dir: Optional[Path] = None) -> 'Config':
        """Build a Config from already-parsed TOML data."""
        schedule = parse_schedule_section(data.get('Schedule', {}))

        # Parse Localization section
        localization_data = data.get('Localization', {})
        day_names_str = localization_data.get('day_names', '')
        # Space-separated day names, Monday first (if provided)
        day_names = day_names_str.split() if day_names_str else None
        localization = LocalizationConfig(day_names=day_names)

        # Parse Labels section
        labels_data = data.get('Labels', {})
        labels = LabelsConfig(
            window_title=labels_data.get('window_title', LabelsConfig.window_title),
            overflow_title=labels_data.get('overflow_title', LabelsConfig.overflow_title),
            button_zoom_out=labels_data.get('button_zoom_out', LabelsConfig.button_zoom_out),
            button_orientation=labels_data.get('button_orientation', LabelsConfig.button_orientation),
            zoom_aria_label=labels_data.get('zoom_aria_label', LabelsConfig.zoom_aria_label),
        )
        issues = [
            ValidationIssue(f"Labels.{issue.field}", issue.message)
            for issue in validate_overflow_title(labels.overflow_title)
        ]
        if issues:
            raise ScheduleValidationError("configuration", issues)

        # Parse Events section: ICS files, relative to the config file
        ics_files = []
        for entry in data.get('Events', {}).get('ics_files', []):
            path = Path(os.path.expanduser(entry))
            if not path.is_absolute() and base_dir is not None:
                path = base_dir / path
            ics_files.append(path)
        debug(f"ICS files configured: {len(ics_files)}")

        return cls(
            schedule=schedule,
            localization=localization,
            labels=labels,
            ics_files=ics_files
        )


def parse_schedule_section(section: dict) -> ScheduleConfig:
    """
    Turn a [Schedule] table into a validated ScheduleConfig.

    Days may be given as names ("Mon", "monday") or weekday numbers.
    All problems are collected and raised together.
    """
    issues: list[ValidationIssue] = []
    defaults = ScheduleConfig()

    visible_days = defaults.visible_days
    if 'visible_days' in section:
        parsed = []
        for i, value in enumerate(section['visible_days']):
            try:
                parsed.append(DayOfWeek.parse(value))
            except ValueError as e:
                issues.append(ValidationIssue(f"visible_days[{i}]", str(e)))
        visible_days = tuple(parsed)

    interval = defaults.time_slot_interval
    if 'time_slot_interval' in section:
        try:
            interval = TimeSlotInterval(section['time_slot_interval'])
        except ValueError:
            issues.append(ValidationIssue(
                "time_slot_interval",
                f"must be 15, 30 or 60 minutes, got {section['time_slot_interval']!r}"
            ))

    orientation = defaults.orientation
    if 'orientation' in section:
        try:
            orientation = Orientation(str(section['orientation']).lower())
        except ValueError:
            issues.append(ValidationIssue(
                "orientation",
                f"must be 'vertical' or 'horizontal', got {section['orientation']!r}"
            ))

    config = ScheduleConfig(
        visible_days=visible_days,
        start_hour=section.get('start_hour', defaults.start_hour),
        end_hour=section.get('end_hour', defaults.end_hour),
        time_slot_interval=interval,
        orientation=orientation,
        show_day_headers=section.get('show_day_headers', defaults.show_day_headers),
        class_name=section.get('class_name', defaults.class_name),
    )

    # Unparseable days leave a shorter list; don't report it again as empty
    had_day_errors = any(i.field.startswith("visible_days[") for i in issues)
    for issue in validate_config(config):
        if had_day_errors and issue.field == "visible_days":
            continue
        issues.append(issue)
    if issues:
        raise ScheduleValidationError("configuration", issues)
    return config
