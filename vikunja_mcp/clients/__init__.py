"""Remote API clients."""

from .vikunja import FailedResponse, Reminder, VikunjaClient

__all__ = ["FailedResponse", "Reminder", "VikunjaClient"]
