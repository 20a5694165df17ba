"""Clients for the public Roblox user and thumbnail endpoints."""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Dict, Literal

import httpx

from ..config import get_settings
from ..logging import get_logger

logger = get_logger(__name__)

PROFILE_URL_MARKER = "roblox.com"
_PROFILE_PATH_RE = re.compile(r"/users/(\d+)")
_DIGITS_RE = re.compile(r"[0-9]+")

ID_LOOKUP_FAILED = "User not found or API error (ID lookup)."
USERNAME_LOOKUP_FAILED = "Username lookup failed (network error)."
USERNAME_NOT_FOUND = "No user found for that username."

InputKind = Literal["id", "username"]


class RobloxLookupError(RuntimeError):
    """Raised when a profile cannot be resolved through the Roblox API."""


class RobloxUserNotFoundError(RobloxLookupError):
    """Raised when Roblox reports that no such user exists."""


@dataclass(frozen=True)
class ParsedInput:
    kind: InputKind
    value: str


@dataclass(frozen=True)
class RobloxProfile:
    id: int
    name: str
    display_name: str

    def as_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "name": self.name, "displayName": self.display_name}


def parse_input(raw: str) -> ParsedInput:
    """Classify *raw* as a numeric user ID or a username.

    Profile URLs such as ``https://www.roblox.com/users/1/profile`` yield the
    numeric ID from their path. Anything that is not a URL with an ID and not
    entirely digits is treated as a username.
    """

    value = raw.strip()
    if PROFILE_URL_MARKER in value:
        match = _PROFILE_PATH_RE.search(value)
        if match:
            return ParsedInput(kind="id", value=match.group(1))

    if _DIGITS_RE.fullmatch(value):
        return ParsedInput(kind="id", value=value)

    return ParsedInput(kind="username", value=value)


async def _get_json(url: str, *, params: Dict[str, Any] | None = None) -> Any:
    settings = get_settings()
    async with httpx.AsyncClient(timeout=settings.roblox_http_timeout) as client:
        response = await client.get(url, params=params)
        response.raise_for_status()
    return response.json()


async def fetch_profile_by_id(user_id: str | int) -> RobloxProfile:
    """Fetch a profile from the users API by numeric ID."""

    url = f"{get_settings().roblox_users_api}/v1/users/{user_id}"
    try:
        data = await _get_json(url)
        return RobloxProfile(
            id=int(data["id"]),
            name=data["name"],
            display_name=data.get("displayName") or "",
        )
    except (httpx.HTTPError, ValueError, KeyError, TypeError) as exc:
        logger.warning(
            "Roblox ID lookup failed",
            extra={"roblox_user_id": str(user_id)},
            exc_info=True,
        )
        raise RobloxLookupError(ID_LOOKUP_FAILED) from exc


async def fetch_profile_by_username(username: str) -> RobloxProfile:
    """Fetch a profile through the legacy get-by-username endpoint.

    The legacy endpoint has no display name, so the username is reused.
    """

    url = f"{get_settings().roblox_legacy_api}/users/get-by-username"
    try:
        data = await _get_json(url, params={"username": username})
        user_id = int(data["Id"])
        name = data.get("Username") or ""
    except (httpx.HTTPError, ValueError, KeyError, TypeError) as exc:
        logger.warning(
            "Roblox username lookup failed",
            extra={"roblox_username": username},
            exc_info=True,
        )
        raise RobloxLookupError(USERNAME_LOOKUP_FAILED) from exc

    if user_id == 0:
        logger.info("Roblox username not found", extra={"roblox_username": username})
        raise RobloxUserNotFoundError(USERNAME_NOT_FOUND)

    return RobloxProfile(id=user_id, name=name, display_name=name)


async def resolve_profile(parsed: ParsedInput) -> RobloxProfile:
    if parsed.kind == "id":
        return await fetch_profile_by_id(parsed.value)
    return await fetch_profile_by_username(parsed.value)


async def fetch_thumbnail(user_id: int) -> str:
    """Return the avatar headshot URL, or the placeholder when unavailable."""

    settings = get_settings()
    url = f"{settings.roblox_thumbnails_api}/v1/users/avatar-headshot"
    params = {
        "userIds": user_id,
        "size": settings.thumbnail_size,
        "format": "Png",
        "isCircular": "false",
    }
    try:
        data = await _get_json(url, params=params)
        entries = data.get("data") or []
        image_url = entries[0].get("imageUrl") if entries else None
    except (httpx.HTTPError, ValueError, LookupError, TypeError, AttributeError) as exc:
        logger.warning(
            "Roblox thumbnail request failed, using placeholder",
            extra={"roblox_user_id": user_id, "error": str(exc)},
        )
        return settings.thumbnail_placeholder

    if image_url:
        return image_url

    logger.info("Roblox returned no thumbnail", extra={"roblox_user_id": user_id})
    return settings.thumbnail_placeholder


__all__ = [
    "ID_LOOKUP_FAILED",
    "PROFILE_URL_MARKER",
    "USERNAME_LOOKUP_FAILED",
    "USERNAME_NOT_FOUND",
    "ParsedInput",
    "RobloxLookupError",
    "RobloxProfile",
    "RobloxUserNotFoundError",
    "fetch_profile_by_id",
    "fetch_profile_by_username",
    "fetch_thumbnail",
    "parse_input",
    "resolve_profile",
]
