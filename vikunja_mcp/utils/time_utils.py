"""Timestamp normalization and Vikunja date-math helpers."""

import math
from dataclasses import dataclass
from datetime import UTC, datetime, tzinfo


def parse_timestamp(value: str, default_tz: tzinfo) -> datetime:
    """Parse an ISO 8601 timestamp into an aware datetime.

    Timestamps without an offset are interpreted in ``default_tz``. A
    trailing ``Z`` is accepted as UTC.

    Raises:
        ValueError: If the value is not a valid ISO 8601 timestamp
    """
    parsed = datetime.fromisoformat(value.strip())
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=default_tz)
    return parsed


def to_utc_timestamp(value: str, default_tz: tzinfo) -> str:
    """Normalize an ISO 8601 timestamp to a UTC ``...Z`` string.

    Raises:
        ValueError: If the value is not a timestamp or has no UTC equivalent

    Examples:
        >>> to_utc_timestamp("2024-01-01T10:00:00-05:00", UTC)
        '2024-01-01T15:00:00Z'
    """
    try:
        utc = parse_timestamp(value, default_tz).astimezone(UTC)
    except OverflowError as e:
        raise ValueError(f"{value!r} is out of range in UTC") from e
    return utc.replace(tzinfo=None).isoformat(timespec="seconds") + "Z"


def utc_offset_hours(zone: tzinfo, now: datetime | None = None) -> int:
    """Whole-hour UTC offset of ``zone`` at ``now``.

    Vikunja only accepts whole-hour relative offsets, so fractional zones are
    floored (UTC+5:30 gives 5, UTC-3:30 gives -4).
    """
    now = now or datetime.now(UTC)
    offset = now.astimezone(zone).utcoffset()
    if offset is None:
        return 0
    return math.floor(offset.total_seconds() / 3600)


@dataclass(frozen=True)
class TimeWindow:
    """A window relative to the server's ``now``, in whole hours."""

    start_hours: int
    width_hours: int = 1

    @property
    def end_hours(self) -> int:
        return self.start_hours + self.width_hours

    @property
    def start(self) -> str:
        return _now_plus(self.start_hours)

    @property
    def end(self) -> str:
        return _now_plus(self.end_hours)

    @classmethod
    def next_hour(cls, zone: tzinfo, now: datetime | None = None) -> "TimeWindow":
        """One-hour lookahead shifted by the local UTC offset.

        Vikunja evaluates ``now`` without time zone awareness, so the window
        is pre-shifted to land on the intended local hour.
        """
        return cls(start_hours=utc_offset_hours(zone, now))


def _now_plus(hours: int) -> str:
    return f"now{hours:+d}h"
