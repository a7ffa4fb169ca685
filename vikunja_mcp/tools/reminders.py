"""Reminder tools exposed over MCP.

Both tools answer with a single text block. Failures are reported as fixed
sentences; the underlying cause is logged by the client.
"""

import logging
from collections.abc import Callable
from datetime import datetime
from typing import Any

from ..clients.vikunja import VikunjaClient
from .formatting import format_reminder

logger = logging.getLogger(__name__)

SET_REMINDER_FAILED = "Failed to set reminder"
GET_REMINDERS_FAILED = "Failed to get reminders."
NO_REMINDERS = "No reminders found."


class ReminderTools:
    """Tool handlers bound to a configured Vikunja client."""

    def __init__(
        self,
        client: VikunjaClient,
        clock: Callable[[], datetime] | None = None,
    ):
        """Initialize the tools.

        Args:
            client: Configured Vikunja client
            clock: Returns the reference time for listing and formatting;
                the wall clock is used when omitted
        """
        self.client = client
        self.clock = clock

    async def set_reminder_at_time(self, title: str, due_date: str) -> str:
        """Set a reminder at a specific time.

        Args:
            title: Description of the reminder
            due_date: ISO 8601 time with seconds

        Returns:
            Confirmation text, or a failure sentence

        Raises:
            ValueError: If due_date is not a valid ISO 8601 timestamp
        """
        if not isinstance(due_date, str):
            raise ValueError("due_date must be an ISO 8601 string")
        try:
            result = await self.client.create_reminder(title, due_date)
        except ValueError as e:
            raise ValueError(f"Invalid due_date {due_date!r}: {e}") from e

        if not result.ok:
            logger.warning(f"Reminder was not created ({result.kind.value})")
            return SET_REMINDER_FAILED
        return result.value

    async def get_reminders(self) -> str:
        """Get all reminders scheduled within the next hour."""
        now = self.clock() if self.clock else None
        result = await self.client.list_upcoming(now)
        if not result.ok:
            logger.warning(f"Reminders could not be listed ({result.kind.value})")
            return GET_REMINDERS_FAILED

        if not result.value:
            return NO_REMINDERS
        return "\n".join(format_reminder(reminder, now) for reminder in result.value)

    @property
    def tool_schemas(self) -> list[dict[str, Any]]:
        """Tool definitions with ``name``, ``description``, ``input_schema`` and ``handler``."""
        return [
            {
                "name": "set-reminder-at-time",
                "description": "Set a reminder at a specific time",
                "input_schema": {
                    "type": "object",
                    "properties": {
                        "title": {
                            "type": "string",
                            "description": "Description of the reminder",
                        },
                        "due_date": {
                            "type": "string",
                            "format": "date-time",
                            "description": (
                                "ISO 8601 time, with seconds, in "
                                f"{self.client.timezone_name} IANA time zone"
                            ),
                        },
                    },
                    "required": ["title", "due_date"],
                },
                "handler": self.set_reminder_at_time,
            },
            {
                "name": "get-reminders",
                "description": "Get all reminders scheduled within the next hour",
                "input_schema": {
                    "type": "object",
                    "properties": {},
                    "required": [],
                },
                "handler": self.get_reminders,
            },
        ]
