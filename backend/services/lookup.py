"""Search, results and logs flows shared by the web app and the bot."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List

from ..logging import get_logger
from .query_log import QueryLogRepository, QueryRecord
from .roblox import (
    ParsedInput,
    RobloxLookupError,
    RobloxProfile,
    fetch_thumbnail,
    parse_input,
    resolve_profile,
)

logger = get_logger(__name__)

EMPTY_INPUT_MESSAGE = "Please enter a Roblox ID, username, or profile URL."
MISSING_QUERY_MESSAGE = "No query provided in the URL."
NO_DISPLAY_NAME = "No display name available"


class MissingQueryError(ValueError):
    """Raised when a flow is started without anything to look up."""


@dataclass(frozen=True)
class ProfileLookup:
    """A resolved profile together with its avatar thumbnail."""

    query: str
    parsed: ParsedInput
    profile: RobloxProfile
    thumbnail_url: str

    @property
    def display_name(self) -> str:
        return self.profile.display_name or NO_DISPLAY_NAME


async def submit_query(repository: QueryLogRepository, raw: str | None) -> ParsedInput:
    """Validate and classify a new query, logging it as pending."""

    if not raw or not raw.strip():
        raise MissingQueryError(EMPTY_INPUT_MESSAGE)

    parsed = parse_input(raw)
    await repository.append(raw, success=False)
    logger.info(
        "Query submitted",
        extra={"owner": repository.owner, "kind": parsed.kind, "value": parsed.value},
    )
    return parsed


async def resolve_query(repository: QueryLogRepository, query: str | None) -> ProfileLookup:
    """Resolve a previously submitted query into a profile and thumbnail.

    A success record is appended once the profile is known; the thumbnail
    step never fails the lookup.
    """

    if not query or not query.strip():
        raise MissingQueryError(MISSING_QUERY_MESSAGE)

    parsed = parse_input(query)
    try:
        profile = await resolve_profile(parsed)
    except RobloxLookupError as exc:
        logger.warning(
            "Profile lookup failed",
            extra={"owner": repository.owner, "query": query, "error": str(exc)},
        )
        raise

    await repository.append(query, success=True)
    thumbnail_url = await fetch_thumbnail(profile.id)
    logger.info(
        "Profile resolved",
        extra={"owner": repository.owner, "roblox_user_id": profile.id},
    )
    return ProfileLookup(
        query=query,
        parsed=parsed,
        profile=profile,
        thumbnail_url=thumbnail_url,
    )


async def list_queries(repository: QueryLogRepository) -> List[QueryRecord]:
    """Return the stored records, most recent first."""

    records = await repository.read_all()
    return list(reversed(records))


__all__ = [
    "EMPTY_INPUT_MESSAGE",
    "MISSING_QUERY_MESSAGE",
    "NO_DISPLAY_NAME",
    "MissingQueryError",
    "ProfileLookup",
    "list_queries",
    "resolve_query",
    "submit_query",
]
