"""
Main Window for Week Peek.

Holds the caller-owned event list, the schedule configuration and the zoom
state, and re-runs the layout engine whenever one of them changes.
"""

from functools import partial
from typing import Optional

from PySide6.QtWidgets import QMainWindow, QToolBar, QPushButton, QStatusBar
from PySide6.QtCore import Qt

from week_peek.config import Config
from week_peek.content import default_formatter
from week_peek.debug import debug
from week_peek.models import ScheduleEvent, Orientation
from week_peek.schedule import ScheduleLayout, compute_layout, resolve_click
from week_peek.time_only import DayOfWeek
from week_peek.validation import ScheduleValidationError

from .widgets.schedule_widget import ScheduleWidget


class MainWindow(QMainWindow):
    """Weekly schedule viewer window."""

    def __init__(self, config: Config, events: Optional[list[ScheduleEvent]] = None, parent=None):
        super().__init__(parent)
        self.config = config
        self._events: list[ScheduleEvent] = list(events or [])
        self._zoomed_day: Optional[DayOfWeek] = None
        self._layout: Optional[ScheduleLayout] = None

        self._setup_window()
        self._setup_toolbar()
        self._setup_statusbar()
        self._relayout()

    def _setup_window(self):
        self.setWindowTitle(self.config.labels.window_title)
        self.resize(1100, 750)

        formatter = partial(default_formatter, zoom_label=self.config.labels.zoom_aria_label)
        self._schedule_widget = ScheduleWidget(formatter=formatter, parent=self)
        if self.config.schedule.class_name:
            # Stylesheets can target the grid with #<class_name>
            self._schedule_widget.setObjectName(self.config.schedule.class_name)
        self._schedule_widget.event_clicked.connect(self._on_event_clicked)
        self._schedule_widget.zoom_requested.connect(self._on_zoom_requested)
        self.setCentralWidget(self._schedule_widget)

    def _setup_toolbar(self):
        toolbar = QToolBar("Schedule")
        toolbar.setMovable(False)
        self.addToolBar(Qt.TopToolBarArea, toolbar)

        self._zoom_out_btn = QPushButton(self.config.labels.button_zoom_out)
        self._zoom_out_btn.clicked.connect(self.zoom_out)
        self._zoom_out_btn.setEnabled(False)
        toolbar.addWidget(self._zoom_out_btn)

        self._orientation_btn = QPushButton(self.config.labels.button_orientation)
        self._orientation_btn.clicked.connect(self.toggle_orientation)
        toolbar.addWidget(self._orientation_btn)

    def _setup_statusbar(self):
        self._statusbar = QStatusBar()
        self.setStatusBar(self._statusbar)

    # ==================== State changes ====================

    @property
    def zoomed_day(self) -> Optional[DayOfWeek]:
        return self._zoomed_day

    @property
    def schedule_layout(self) -> Optional[ScheduleLayout]:
        return self._layout

    def set_events(self, events: list[ScheduleEvent]):
        """
        Replace the event list. An invalid batch is refused as a whole and
        the previous events stay on screen.
        """
        previous = self._events
        self._events = list(events)
        try:
            self._relayout()
        except ScheduleValidationError:
            self._events = previous
            raise

    def zoom_to(self, day: DayOfWeek):
        """Show only `day`. A day outside the visible days is refused."""
        previous = self._zoomed_day
        self._zoomed_day = day
        try:
            self._relayout()
        except ScheduleValidationError:
            self._zoomed_day = previous
            raise
        self._zoom_out_btn.setEnabled(True)

    def zoom_out(self):
        self._zoomed_day = None
        self._zoom_out_btn.setEnabled(False)
        self._relayout()

    def toggle_orientation(self):
        current = self.config.schedule.orientation
        new = Orientation.HORIZONTAL if current == Orientation.VERTICAL else Orientation.VERTICAL
        self.config.schedule = self.config.schedule.merged(orientation=new)
        self._relayout()

    def _relayout(self):
        self._layout = compute_layout(
            self._events,
            self.config.schedule,
            zoomed_day=self._zoomed_day,
            translations=self.config.localization.translations(),
            overflow_title=self.config.labels.overflow_title,
        )
        self._schedule_widget.set_schedule_layout(self._layout)
        self._statusbar.showMessage(f"{len(self._layout.events)} events shown")

    # ==================== Signals ====================

    def _on_zoom_requested(self, weekday: int):
        debug(f"Zoom requested for weekday {weekday}")
        self.zoom_to(DayOfWeek(weekday))

    def _on_event_clicked(self, event_id: str):
        target = resolve_click(self._layout, event_id, self._events)
        if target is None:
            return
        if target.is_zoom:
            self.zoom_to(target.zoom_day)
        else:
            event = target.event
            self._statusbar.showMessage(f"{event.title}: {event.start_time} - {event.end_time}")
