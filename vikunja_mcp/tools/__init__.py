"""Reminder tools and formatting."""

from .formatting import format_reminder, relative_time
from .reminders import ReminderTools

__all__ = ["ReminderTools", "format_reminder", "relative_time"]
