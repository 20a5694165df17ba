"""Helpers for building Telegram text blocks from lookup results."""
from __future__ import annotations

from html import escape
from typing import Sequence

from backend.services.lookup import ProfileLookup
from backend.services.query_log import QueryRecord

PROFILE_LINK_TEMPLATE = "https://www.roblox.com/users/{user_id}/profile"
NO_LOGS_TEXT = "No logs available."


def render_profile(lookup: ProfileLookup) -> str:
    """Return an HTML-formatted profile card."""

    profile = lookup.profile
    lines = [
        f"<b>{escape(lookup.display_name)}</b>",
        f"Username: <code>{escape(profile.name)}</code>",
        f"User ID: <code>{profile.id}</code>",
        PROFILE_LINK_TEMPLATE.format(user_id=profile.id),
    ]
    return "\n".join(lines)


def render_record_line(index: int, record: QueryRecord) -> str:
    status = "✅" if record.success else "❌"
    return f"{index}. {status} <b>{escape(record.time)}</b> — <code>{escape(record.query)}</code>"


def render_logs(records: Sequence[QueryRecord]) -> str:
    if not records:
        return NO_LOGS_TEXT

    lines = ["<b>Your recent queries</b>"]
    lines.extend(render_record_line(idx, record) for idx, record in enumerate(records, start=1))
    return "\n".join(lines)


__all__ = ["NO_LOGS_TEXT", "render_logs", "render_profile", "render_record_line"]
