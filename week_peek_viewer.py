#!/usr/bin/env python3
"""
Week Peek - A PySide6 viewer for weekly schedules.

This is the main entry point for the application.
"""

import sys
import argparse
from pathlib import Path

from PySide6.QtWidgets import QApplication

from week_peek.config import Config
from week_peek.debug import set_debug
from week_peek.ics_import import load_ics_file
from week_peek.validation import ScheduleValidationError
from gui.main_window import MainWindow


EXAMPLE_CONFIG = """
[Schedule]
visible_days = ["Mon", "Tue", "Wed", "Thu", "Fri"]
start_hour = 8
end_hour = 18
time_slot_interval = 30
orientation = "vertical"

[Events]
ics_files = ["~/schedule.ics"]
"""


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Week Peek - A weekly schedule viewer"
    )
    parser.add_argument(
        "-c", "--config",
        type=Path,
        help="Path to configuration file (default: auto-detect)"
    )
    parser.add_argument(
        "--ics",
        type=Path,
        action="append",
        default=[],
        help="iCalendar file to show (may be repeated, adds to the config's files)"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug output"
    )
    return parser.parse_args(argv)


def load_config(path):
    """Load the given or default config; without either, use built-in defaults."""
    if path is None and not Config.get_default_config_path().exists():
        return Config()
    return Config.load(path)


def load_events(ics_paths):
    """
    Import every listed .ics file into one batch.

    A file listed twice (config and --ics) is read once, and UIDs shared
    between files get suffixes so event ids stay unique.
    """
    events = []
    seen_ids = {}
    seen_paths = set()
    for ics_path in ics_paths:
        key = Path(ics_path).expanduser().resolve()
        if key in seen_paths:
            continue
        seen_paths.add(key)
        events.extend(load_ics_file(ics_path, seen_ids))
    return events


def main():
    """Main entry point."""
    args = parse_args()
    set_debug(args.debug)

    try:
        config = load_config(args.config)
    except FileNotFoundError as e:
        print(f"Error: {e}")
        print("\nPlease create a configuration file at:")
        print(f"  - {Config.get_default_config_path()}")
        print("\nExample configuration:")
        print(EXAMPLE_CONFIG)
        sys.exit(1)
    except ScheduleValidationError as e:
        print(f"Error loading configuration: {e}")
        sys.exit(1)

    try:
        events = load_events(list(config.ics_files) + list(args.ics))
    except (OSError, ValueError) as e:
        print(f"Error reading calendar files: {e}")
        sys.exit(1)

    if args.debug:
        print(f"Loaded configuration from: {args.config or Config.get_default_config_path()}")
        print(f"  Events: {len(events)}")

    app = QApplication(sys.argv)
    app.setApplicationName("Week Peek")
    app.setStyle("Fusion")

    try:
        window = MainWindow(config, events)
    except ScheduleValidationError as e:
        print(f"Error: {e}")
        sys.exit(1)
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
