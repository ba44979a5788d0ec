"""
Week Peek GUI Widgets

Custom widgets for displaying schedule layouts.
"""

from .schedule_widget import ScheduleWidget

__all__ = ['ScheduleWidget']
