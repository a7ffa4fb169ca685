"""Vikunja task API client.

Creates reminder tasks and lists the ones due within the next hour. Every
call issues exactly one HTTP request and returns a ``Result``; failures are
logged and tagged but never raised to the caller.

API documentation: https://vikunja.io/docs/api/
"""

import logging
from datetime import datetime, tzinfo
from typing import Any
from urllib.parse import urlencode

import httpx
from pydantic import BaseModel, ConfigDict, TypeAdapter, field_validator

from ..core.config import Settings
from ..utils.errors import DecodeError, NetworkError, RemoteError
from ..utils.result import Result
from ..utils.time_utils import TimeWindow, to_utc_timestamp
from ..utils.tool_decorators import returns_result

logger = logging.getLogger(__name__)

# Single project and list view; multi-project setups are not supported.
PROJECT_ID = 1
VIEW_ID = 1


class Reminder(BaseModel):
    """A Vikunja task viewed as a reminder. Other task fields are ignored."""

    model_config = ConfigDict(extra="ignore")

    title: str | None = None
    due_date: str | None = None

    @field_validator("title", "due_date", mode="before")
    @classmethod
    def drop_non_string(cls, v: Any) -> str | None:
        """Unusable values are kept as missing so the reminder still renders."""
        return v if isinstance(v, str) else None


class FailedResponse(BaseModel):
    """Error body returned by Vikunja on non-success statuses."""

    model_config = ConfigDict(extra="ignore")

    message: str = ""


_reminder_list = TypeAdapter(list[Reminder])


def build_filter(window: TimeWindow) -> str:
    """Build the Vikunja filter expression for open tasks due in ``window``."""
    return f"done = false && due_date >= {window.start} && due_date <= {window.end}"


class VikunjaClient:
    """Client for the Vikunja reminder endpoints."""

    def __init__(
        self,
        base_url: str,
        create_token: str,
        read_token: str,
        zone: tzinfo,
        timezone_name: str,
        timeout: float = 30.0,
    ):
        """Initialize the client.

        Args:
            base_url: Vikunja base URL, without the ``/api/v1`` suffix
            create_token: Bearer token used to create tasks
            read_token: Bearer token used to list tasks
            zone: Local time zone for naive timestamps and the lookahead window
            timezone_name: IANA name of ``zone``, sent as ``filter_timezone``
            timeout: Request timeout in seconds
        """
        self.base_url = base_url.rstrip("/")
        self._create_token = create_token
        self._read_token = read_token
        self.zone = zone
        self.timezone_name = timezone_name
        self.timeout = timeout

    @classmethod
    def from_settings(cls, settings: Settings) -> "VikunjaClient":
        return cls(
            base_url=settings.vikunja_api_base,
            create_token=settings.create_task_token.get_secret_value(),
            read_token=settings.get_tasks_token.get_secret_value(),
            zone=settings.zone,
            timezone_name=settings.timezone,
            timeout=settings.request_timeout,
        )

    @property
    def tasks_url(self) -> str:
        return f"{self.base_url}/api/v1/projects/{PROJECT_ID}/tasks"

    def upcoming_url(self, now: datetime | None = None) -> str:
        """URL listing open tasks due within the next local hour."""
        window = TimeWindow.next_hour(self.zone, now)
        query = urlencode(
            {
                "filter": build_filter(window),
                "filter_include_nulls": "false",
                "filter_timezone": self.timezone_name,
                "s": "",
                "expand": "subtasks",
                "page": 1,
            }
        )
        return f"{self.base_url}/api/v1/projects/{PROJECT_ID}/views/{VIEW_ID}/tasks?{query}"

    async def _send(
        self,
        method: str,
        url: str,
        token: str,
        json: dict[str, Any] | None = None,
    ) -> httpx.Response:
        headers = {"Authorization": f"Bearer {token}"}
        if json is not None:
            headers["Content-Type"] = "application/json"

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.request(method, url, headers=headers, json=json)
        except httpx.RequestError as e:
            raise NetworkError(f"{method} {url} failed: {e}") from e

        if not response.is_success:
            raise RemoteError(response.status_code, _error_message(response))
        return response

    @returns_result
    async def _create(self, title: str, due_date: str) -> str:
        await self._send(
            "PUT",
            self.tasks_url,
            self._create_token,
            json={"title": title, "due_date": due_date},
        )
        return f"Your reminder is {title}"

    async def create_reminder(self, title: str, due_date: str) -> Result[str]:
        """Create a reminder task due at ``due_date``.

        Args:
            title: Reminder text, forwarded as-is
            due_date: ISO 8601 timestamp; naive values are read in the local zone

        Returns:
            ``Ok`` with a confirmation sentence, or ``Err``

        Raises:
            ValueError: If ``due_date`` is not a valid ISO 8601 timestamp
        """
        utc_due_date = to_utc_timestamp(due_date, self.zone)
        logger.info(f"Creating reminder due {utc_due_date}")
        return await self._create(title, utc_due_date)

    @returns_result
    async def list_upcoming(self, now: datetime | None = None) -> list[Reminder]:
        """List open reminders due within the next hour.

        Args:
            now: Reference time for the local UTC offset (defaults to the clock)

        Returns:
            ``Ok`` with the reminders in server order (possibly empty), or ``Err``
        """
        response = await self._send("GET", self.upcoming_url(now), self._read_token)
        try:
            data = response.json()
        except ValueError as e:
            raise DecodeError(f"Response body is not JSON: {e}") from e
        if not isinstance(data, list):
            raise DecodeError(f"Expected a list of tasks, got {type(data).__name__}")

        reminders = _reminder_list.validate_python(data)
        logger.info(f"Found {len(reminders)} upcoming reminder(s)")
        return reminders


def _error_message(response: httpx.Response) -> str:
    try:
        return FailedResponse.model_validate(response.json()).message
    except ValueError:
        return ""
