"""Vikunja MCP - reminder tools for agents, backed by the Vikunja task API."""

__version__ = "1.0.0"

from .clients.vikunja import Reminder, VikunjaClient
from .core.config import Settings
from .server.server import create_mcp_server
from .tools.reminders import ReminderTools

__all__ = [
    "Reminder",
    "ReminderTools",
    "Settings",
    "VikunjaClient",
    "create_mcp_server",
]
