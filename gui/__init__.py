"""
Week Peek GUI Module

PySide6-based viewer painting the layouts computed by week_peek.
"""

from .main_window import MainWindow

__all__ = ['MainWindow']
