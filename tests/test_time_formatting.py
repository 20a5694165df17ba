from __future__ import annotations

from datetime import datetime
from zoneinfo import ZoneInfo

from bot.utils.time import format_display_time, to_display_tz


def test_naive_datetimes_are_treated_as_utc():
    result = to_display_tz(datetime(2024, 1, 1, 10, 0))

    assert result.tzinfo is not None
    assert result.hour == 10


def test_display_timezone_is_configurable(monkeypatch):
    monkeypatch.setenv("DISPLAY_TIMEZONE", "Europe/Moscow")
    created_at = datetime(2024, 1, 1, 10, 0, tzinfo=ZoneInfo("UTC"))

    assert format_display_time(created_at) == "01.01.2024 13:00:00"


def test_aware_datetimes_are_converted():
    created_at = datetime(2024, 2, 1, 12, 0, tzinfo=ZoneInfo("America/New_York"))

    assert format_display_time(created_at) == "01.02.2024 17:00:00"
