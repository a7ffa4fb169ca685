"""Tests for timestamp normalization and the lookahead window."""

from datetime import UTC, datetime
from zoneinfo import ZoneInfo

import pytest

from vikunja_mcp.utils.time_utils import (
    TimeWindow,
    parse_timestamp,
    to_utc_timestamp,
    utc_offset_hours,
)


class TestToUtcTimestamp:
    """Tests for to_utc_timestamp."""

    def test_negative_offset_is_converted_to_utc(self):
        """An explicit offset is applied, not dropped."""
        assert to_utc_timestamp("2024-01-01T10:00:00-05:00", UTC) == "2024-01-01T15:00:00Z"

    def test_positive_offset_crossing_midnight(self):
        """Conversion can move the date backwards."""
        assert to_utc_timestamp("2024-03-01T01:30:00+02:00", UTC) == "2024-02-29T23:30:00Z"

    def test_utc_input_is_unchanged(self):
        """UTC timestamps keep their instant."""
        assert to_utc_timestamp("2024-01-01T09:00:00+00:00", UTC) == "2024-01-01T09:00:00Z"
        assert to_utc_timestamp("2024-01-01T09:00:00Z", UTC) == "2024-01-01T09:00:00Z"

    def test_naive_timestamp_uses_default_zone(self):
        """Timestamps without an offset are read in the local zone."""
        zone = ZoneInfo("America/New_York")
        assert to_utc_timestamp("2024-01-01T10:00:00", zone) == "2024-01-01T15:00:00Z"

    def test_invalid_timestamp_raises(self):
        """Garbage input raises ValueError."""
        with pytest.raises(ValueError):
            to_utc_timestamp("tomorrow at noon", UTC)

    def test_early_years_are_zero_padded(self):
        """Years before 1000 keep four digits."""
        assert to_utc_timestamp("0999-01-01T00:00:00Z", UTC) == "0999-01-01T00:00:00Z"

    def test_out_of_range_instant_raises_value_error(self):
        """An instant with no UTC equivalent raises ValueError, not OverflowError."""
        with pytest.raises(ValueError, match="out of range"):
            to_utc_timestamp("0001-01-01T00:00:00+01:00", UTC)

    def test_fractional_seconds_are_dropped(self):
        """Output has whole-second precision."""
        assert to_utc_timestamp("2024-01-01T10:00:00.750+00:00", UTC) == "2024-01-01T10:00:00Z"

    def test_empty_timestamp_raises(self):
        """Empty input raises ValueError."""
        with pytest.raises(ValueError):
            to_utc_timestamp("", UTC)


class TestParseTimestamp:
    """Tests for parse_timestamp."""

    def test_result_is_aware(self):
        """Parsed timestamps always carry tzinfo."""
        parsed = parse_timestamp("2024-01-01T10:00:00", UTC)
        assert parsed.tzinfo is not None


class TestUtcOffsetHours:
    """Tests for utc_offset_hours."""

    def test_utc_plus_two(self, fixed_now: datetime):
        """UTC+2 gives 2."""
        assert utc_offset_hours(ZoneInfo("Etc/GMT-2"), fixed_now) == 2

    def test_utc_minus_five(self, fixed_now: datetime):
        """UTC-5 gives -5."""
        assert utc_offset_hours(ZoneInfo("Etc/GMT+5"), fixed_now) == -5

    def test_utc(self, fixed_now: datetime):
        """UTC gives 0."""
        assert utc_offset_hours(UTC, fixed_now) == 0

    def test_dst_is_taken_from_reference_time(self):
        """The offset follows daylight saving at the reference time."""
        zone = ZoneInfo("Europe/Berlin")
        winter = datetime(2024, 1, 15, 12, 0, tzinfo=UTC)
        summer = datetime(2024, 7, 15, 12, 0, tzinfo=UTC)
        assert utc_offset_hours(zone, winter) == 1
        assert utc_offset_hours(zone, summer) == 2

    def test_fractional_positive_zone_is_truncated(self, fixed_now: datetime):
        """UTC+5:30 floors to 5; the half hour is lost."""
        assert utc_offset_hours(ZoneInfo("Asia/Kolkata"), fixed_now) == 5

    def test_fractional_negative_zone_floors_down(self, fixed_now: datetime):
        """UTC-3:30 floors to -4, not -3."""
        assert utc_offset_hours(ZoneInfo("America/St_Johns"), fixed_now) == -4


class TestTimeWindow:
    """Tests for TimeWindow."""

    def test_utc_plus_two_window(self, fixed_now: datetime):
        """A caller at UTC+2 queries [now+2h, now+3h]."""
        window = TimeWindow.next_hour(ZoneInfo("Etc/GMT-2"), fixed_now)
        assert window.start == "now+2h"
        assert window.end == "now+3h"

    def test_utc_minus_five_window(self, fixed_now: datetime):
        """A caller at UTC-5 queries [now-5h, now-4h]."""
        window = TimeWindow.next_hour(ZoneInfo("Etc/GMT+5"), fixed_now)
        assert window.start == "now-5h"
        assert window.end == "now-4h"

    def test_utc_window(self, fixed_now: datetime):
        """A caller at UTC queries [now+0h, now+1h]."""
        window = TimeWindow.next_hour(UTC, fixed_now)
        assert window.start == "now+0h"
        assert window.end == "now+1h"

    @pytest.mark.parametrize(
        "zone_name",
        ["UTC", "Etc/GMT-2", "Etc/GMT+5", "Asia/Kolkata", "Pacific/Kiritimati", "Etc/GMT+12"],
    )
    def test_window_is_one_hour_wide(self, zone_name: str, fixed_now: datetime):
        """The window always spans exactly one hour and start < end."""
        window = TimeWindow.next_hour(ZoneInfo(zone_name), fixed_now)
        assert window.end_hours - window.start_hours == 1
        assert window.start_hours < window.end_hours
