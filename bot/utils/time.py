from __future__ import annotations

from datetime import datetime, timezone
from zoneinfo import ZoneInfo

from backend.config import get_settings

DISPLAY_TIME_FORMAT = "%d.%m.%Y %H:%M:%S"


def display_tz() -> ZoneInfo:
    return ZoneInfo(get_settings().display_timezone)


def to_display_tz(dt: datetime) -> datetime:
    """Convert *dt* to the configured display timezone.

    Naive datetimes are assumed to be in UTC, which is what SQLite hands back
    for columns stored with timezone information.
    """

    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(display_tz())


def format_display_time(dt: datetime) -> str:
    return to_display_tz(dt).strftime(DISPLAY_TIME_FORMAT)


__all__ = ["DISPLAY_TIME_FORMAT", "display_tz", "format_display_time", "to_display_tz"]
