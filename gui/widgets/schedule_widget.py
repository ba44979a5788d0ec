"""
Schedule Widget painting a ScheduleLayout.

All placement comes from the layout engine: each event box is its grid
cell range refined by the percentage offsets. This widget only turns
cells into pixels, paints, and reports clicks.
"""

from typing import Optional

from PySide6.QtWidgets import QWidget, QToolTip
from PySide6.QtCore import Qt, Signal, QRectF, QPointF, QEvent
from PySide6.QtGui import QColor, QFont, QMouseEvent, QPainter, QPen

from week_peek.content import (
    ContentContext, ContentFormatter, EventContent, default_formatter, tooltip_text
)
from week_peek.models import LayoutEvent, Orientation
from week_peek.schedule import ScheduleLayout

TIME_AXIS_SIZE = 56   # width (vertical) or height (horizontal) of the time labels
DAY_AXIS_SIZE = 32    # header strip height; day labels on the left get 3x this width
DEFAULT_EVENT_COLOR = "#4285f4"
OVERFLOW_EVENT_COLOR = "#9e9e9e"
GRID_LINE_COLOR = "#e8e8e8"
HEADER_BACKGROUND = "#f5f5f5"
ZOOMED_HEADER_BACKGROUND = "#e3f2fd"


def get_contrasting_text_color(bg_color: str) -> str:
    """Calculate whether black or white text contrasts better with the background."""
    color = bg_color.lstrip('#')
    if len(color) == 3:
        color = ''.join([c*2 for c in color])

    try:
        r = int(color[0:2], 16)
        g = int(color[2:4], 16)
        b = int(color[4:6], 16)
    except (ValueError, IndexError):
        return "#000000"

    luminance = (0.299 * r + 0.587 * g + 0.114 * b) / 255
    return "#000000" if luminance > 0.5 else "#ffffff"


class ScheduleWidget(QWidget):
    """
    Paints the weekly grid for one ScheduleLayout.

    Clicking an ordinary event emits event_clicked with its id; clicking an
    overflow placeholder emits zoom_requested with the weekday number.
    """

    event_clicked = Signal(str)
    zoom_requested = Signal(int)

    def __init__(self, formatter: ContentFormatter = default_formatter, parent=None):
        super().__init__(parent)
        self._formatter = formatter
        self._layout: Optional[ScheduleLayout] = None
        self.setMouseTracking(True)
        self.setMinimumSize(480, 360)

    def set_schedule_layout(self, layout: ScheduleLayout):
        self._layout = layout
        self.update()

    def schedule_layout(self) -> Optional[ScheduleLayout]:
        return self._layout

    # ==================== Geometry ====================

    def _axis_sizes(self) -> tuple[float, float]:
        """(left margin, top margin) reserved for labels and headers."""
        if self._layout is None:
            return TIME_AXIS_SIZE, DAY_AXIS_SIZE
        if self._layout.orientation == Orientation.VERTICAL:
            return TIME_AXIS_SIZE, (DAY_AXIS_SIZE if self._layout.day_headers else 0)
        left = DAY_AXIS_SIZE * 3 if self._layout.day_headers else 0
        return left, DAY_AXIS_SIZE

    def grid_rect(self) -> QRectF:
        left, top = self._axis_sizes()
        return QRectF(left, top, max(0.0, self.width() - left), max(0.0, self.height() - top))

    def _cell_size(self) -> tuple[float, float]:
        area = self.grid_rect()
        return (area.width() / max(1, self._layout.grid_columns),
                area.height() / max(1, self._layout.grid_rows))

    def event_rect(self, layout_event: LayoutEvent) -> QRectF:
        """
        Pixel rectangle of an event.

        The percentages are already mapped to the right axes by the engine,
        so the same formula serves both orientations.
        """
        area = self.grid_rect()
        cell_w, cell_h = self._cell_size()
        x = area.x() + (layout_event.grid_column_start - 1 + layout_event.left_percent / 100) * cell_w
        y = area.y() + (layout_event.grid_row_start - 1 + layout_event.top_percent / 100) * cell_h
        return QRectF(x, y,
                      layout_event.width_percent / 100 * cell_w,
                      layout_event.height_percent / 100 * cell_h)

    def event_at(self, pos: QPointF) -> Optional[LayoutEvent]:
        """Topmost event under a point (later events paint on top)."""
        if self._layout is None:
            return None
        for layout_event in reversed(self._layout.events):
            if self.event_rect(layout_event).contains(pos):
                return layout_event
        return None

    # ==================== Painting ====================

    def paintEvent(self, event):
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing)
        painter.fillRect(self.rect(), QColor("#ffffff"))
        if self._layout is None:
            painter.end()
            return

        self._paint_grid(painter)
        self._paint_axes(painter)
        for layout_event in self._layout.events:
            self._paint_event(painter, layout_event)
        painter.end()

    def _paint_grid(self, painter: QPainter):
        area = self.grid_rect()
        cell_w, cell_h = self._cell_size()
        painter.setPen(QPen(QColor(GRID_LINE_COLOR), 1))
        for row in range(self._layout.grid_rows + 1):
            y = area.y() + row * cell_h
            painter.drawLine(QPointF(area.left(), y), QPointF(area.right(), y))
        for col in range(self._layout.grid_columns + 1):
            x = area.x() + col * cell_w
            painter.drawLine(QPointF(x, area.top()), QPointF(x, area.bottom()))

    def _paint_axes(self, painter: QPainter):
        area = self.grid_rect()
        cell_w, cell_h = self._cell_size()
        vertical = self._layout.orientation == Orientation.VERTICAL
        painter.setPen(QColor("#666666"))

        for label in self._layout.time_labels:
            if vertical:
                rect = QRectF(0, area.y() + label.slot_index * cell_h - 8, TIME_AXIS_SIZE - 6, 16)
                painter.drawText(rect, Qt.AlignRight | Qt.AlignVCenter, label.text)
            else:
                rect = QRectF(area.x() + label.slot_index * cell_w, 0, cell_w, DAY_AXIS_SIZE)
                painter.drawText(rect, Qt.AlignLeft | Qt.AlignVCenter, label.text)

        header_font = QFont(self.font())
        header_font.setBold(True)
        painter.setFont(header_font)
        for index, header in enumerate(self._layout.day_headers):
            if vertical:
                rect = QRectF(area.x() + index * cell_w, 0, cell_w, DAY_AXIS_SIZE)
            else:
                rect = QRectF(0, area.y() + index * cell_h, area.x(), cell_h)
            background = ZOOMED_HEADER_BACKGROUND if header.is_zoomed else HEADER_BACKGROUND
            painter.fillRect(rect, QColor(background))
            painter.setPen(QColor("#000000"))
            painter.drawText(rect, Qt.AlignCenter, header.name)
        painter.setFont(self.font())

    def _content(self, layout_event: LayoutEvent) -> EventContent:
        return self._formatter(ContentContext(
            layout_event.event, layout_event.lane_info, layout_event.orientation
        ))

    def _paint_event(self, painter: QPainter, layout_event: LayoutEvent):
        content = self._content(layout_event)
        rect = self.event_rect(layout_event).adjusted(1, 1, -1, -1)

        color = layout_event.color or (OVERFLOW_EVENT_COLOR if layout_event.is_overflow else DEFAULT_EVENT_COLOR)
        painter.setPen(Qt.NoPen)
        painter.setBrush(QColor(color))
        painter.drawRoundedRect(rect, 3, 3)

        padding = 1 if content.compact else 4
        text_rect = rect.adjusted(padding, padding, -padding, -padding)
        painter.setPen(QColor(get_contrasting_text_color(color)))

        if content.centered:
            painter.drawText(text_rect, Qt.AlignCenter, content.title)
            return

        lines = [content.title]
        if content.time_text:
            lines.append(content.time_text)
        if content.description:
            lines.append(content.description)
        flags = Qt.AlignLeft | Qt.AlignTop
        if content.wrap_title:
            flags |= Qt.TextWordWrap
        painter.drawText(text_rect, flags, "\n".join(lines))

    # ==================== Interaction ====================

    def mouseMoveEvent(self, event: QMouseEvent):
        self.hover_at(event.position())
        super().mouseMoveEvent(event)

    def hover_at(self, pos: QPointF):
        """
        Expose the hovered event to assistive tools and show a pointing
        cursor over boxes a click would zoom into.
        """
        layout_event = self.event_at(pos)
        content = self._content(layout_event) if layout_event is not None else None
        if content is None:
            self.setAccessibleDescription("")
            self.unsetCursor()
            return
        self.setAccessibleDescription(content.aria_label or content.title)
        if content.zoomable:
            self.setCursor(Qt.PointingHandCursor)
        else:
            self.unsetCursor()

    def mousePressEvent(self, event: QMouseEvent):
        if event.button() == Qt.LeftButton:
            self.click_at(event.position())
        super().mousePressEvent(event)

    def click_at(self, pos: QPointF):
        """Emit the signal matching whatever is under `pos`."""
        layout_event = self.event_at(pos)
        if layout_event is None:
            return
        if layout_event.is_overflow:
            self.zoom_requested.emit(layout_event.day.value)
        else:
            self.event_clicked.emit(layout_event.id)

    def event(self, event):
        if event.type() == QEvent.ToolTip:
            layout_event = self.event_at(QPointF(event.pos()))
            text = tooltip_text(layout_event.event) if layout_event is not None else None
            if text:
                QToolTip.showText(event.globalPos(), text, self)
            else:
                QToolTip.hideText()
                event.ignore()
            return True
        return super().event(event)
