"""HTML fragments for the search, results and logs pages."""
from __future__ import annotations

from html import escape
from typing import Sequence
from urllib.parse import quote

from .services.lookup import ProfileLookup
from .services.query_log import QueryRecord

PAGE_TITLE = "Roblox Profile Lookup"
NO_LOGS_TEXT = "No logs available."


def _page(body: str, *, title: str = PAGE_TITLE) -> str:
    return (
        "<!DOCTYPE html>\n"
        '<html lang="en">\n'
        "<head>\n"
        '<meta charset="utf-8">\n'
        f"<title>{escape(title)}</title>\n"
        "</head>\n"
        "<body>\n"
        '<nav><a href="/">Search</a> | <a href="/logs">Logs</a></nav>\n'
        f"<main>\n{body}\n</main>\n"
        "</body>\n"
        "</html>\n"
    )


def _error_block(error: str | None) -> str:
    return f'<div id="error">{escape(error or "")}</div>'


def results_url(query: str) -> str:
    return f"/results?query={quote(query, safe='')}"


def render_search_page(*, error: str | None = None, value: str = "") -> str:
    form = (
        '<form id="searchForm" method="post" action="/search">\n'
        '<input id="robloxInput" name="query" type="text" '
        f'placeholder="Roblox ID, username, or profile URL" value="{escape(value)}">\n'
        '<button type="submit">Search</button>\n'
        "</form>"
    )
    return _page(f"<h1>{PAGE_TITLE}</h1>\n{form}\n{_error_block(error)}")


def render_results_page(lookup: ProfileLookup) -> str:
    profile = lookup.profile
    card = (
        '<div id="profileCard">\n'
        f'<img id="profileImg" src="{escape(lookup.thumbnail_url)}" alt="Avatar">\n'
        f'<h2 id="displayName">{escape(lookup.display_name)}</h2>\n'
        f'<p id="username">Username: {escape(profile.name)}</p>\n'
        f'<p id="robloxId">User ID: {profile.id}</p>\n'
        "</div>"
    )
    return _page(f"{_error_block(None)}\n{card}")


def render_results_error(message: str) -> str:
    return _page(_error_block(message))


def render_logs_page(records: Sequence[QueryRecord]) -> str:
    if not records:
        return _page(f'<div id="logsContainer"><p>{NO_LOGS_TEXT}</p></div>')

    rows = "\n".join(
        "<tr>"
        f"<td>{escape(record.time)}</td>"
        f"<td>{escape(record.query)}</td>"
        f"<td>{'Yes' if record.success else 'No'}</td>"
        "</tr>"
        for record in records
    )
    table = (
        '<table class="table table-bordered table-hover">\n'
        "<thead><tr><th>Time</th><th>Query</th><th>Success</th></tr></thead>\n"
        f"<tbody>\n{rows}\n</tbody>\n"
        "</table>"
    )
    return _page(f'<div id="logsContainer">\n{table}\n</div>')


__all__ = [
    "NO_LOGS_TEXT",
    "PAGE_TITLE",
    "render_logs_page",
    "render_results_error",
    "render_results_page",
    "render_search_page",
    "results_url",
]
