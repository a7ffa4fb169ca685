"""Human-readable rendering of reminders."""

from datetime import UTC, datetime

from ..clients.vikunja import Reminder

UNKNOWN = "Unknown"
SEPARATOR = "---"

MINUTE = 60
HOUR = 60 * MINUTE
DAY = 24 * HOUR

# (upper bound in seconds, unit seconds, singular, plural, approximate)
_THRESHOLDS = [
    (45 * MINUTE, MINUTE, "minute", "minutes", False),
    (90 * MINUTE, HOUR, "hour", "hours", True),
    (22 * HOUR, HOUR, "hour", "hours", True),
    (36 * HOUR, DAY, "day", "days", False),
    (26 * DAY, DAY, "day", "days", False),
    (45 * DAY, 30 * DAY, "month", "months", True),
    (320 * DAY, 30 * DAY, "month", "months", False),
    (548 * DAY, 365 * DAY, "year", "years", True),
]


def relative_time(when: datetime, now: datetime | None = None) -> str:
    """Describe ``when`` relative to ``now`` in en-US English.

    Examples:
        >>> now = datetime(2024, 1, 1, 12, 0, tzinfo=UTC)
        >>> relative_time(datetime(2024, 1, 1, 15, 0, tzinfo=UTC), now)
        'in about 3 hours'
        >>> relative_time(datetime(2023, 12, 30, 12, 0, tzinfo=UTC), now)
        '2 days ago'
    """
    now = now or datetime.now(UTC)
    delta = (when - now).total_seconds()
    seconds = abs(delta)

    if seconds < 45:
        return "just now"

    phrase = _years(seconds)
    for bound, unit, singular, plural, approximate in _THRESHOLDS:
        if seconds < bound:
            count = max(1, round(seconds / unit))
            phrase = f"{count} {singular if count == 1 else plural}"
            if approximate:
                phrase = f"about {phrase}"
            break

    return f"in {phrase}" if delta > 0 else f"{phrase} ago"


def _years(seconds: float) -> str:
    count = max(1, round(seconds / (365 * DAY)))
    return f"{count} {'year' if count == 1 else 'years'}"


def format_reminder(reminder: Reminder, now: datetime | None = None) -> str:
    """Format a reminder as a sentence followed by a separator line.

    Never raises: a missing title or an unreadable due date renders as
    ``Unknown``.
    """
    title = reminder.title or UNKNOWN
    try:
        due = datetime.fromisoformat(reminder.due_date or "")
        if due.tzinfo is None:
            due = due.replace(tzinfo=UTC)
        when = relative_time(due, now)
    except (TypeError, ValueError, OverflowError):
        when = UNKNOWN

    return "\n".join([f"{title} {when}", SEPARATOR])
