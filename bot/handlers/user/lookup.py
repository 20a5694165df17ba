"""Plain text messages are treated as profile lookups."""

from __future__ import annotations

import logging
from html import escape

from aiogram import F, Router, types

from backend.config import get_settings
from backend.services.lookup import MissingQueryError, resolve_query, submit_query
from backend.services.roblox import RobloxLookupError
from bot.db import async_session
from bot.services.profile_renderer import render_profile
from bot.services.query_log import repository_for

router = Router(name="user_lookup")
logger = logging.getLogger(__name__)

FETCH_ERROR_PREFIX = "Error fetching profile: "


@router.message(F.text, ~F.text.startswith("/"))
async def lookup_profile(message: types.Message):
    if not message.from_user:
        return

    raw_query = message.text or ""

    async with async_session() as session:
        async with session.begin():
            try:
                await submit_query(repository_for(session, message.from_user.id), raw_query)
            except MissingQueryError as exc:
                await message.answer(f"⚠️ {escape(str(exc))}")
                return

    async with async_session() as session:
        async with session.begin():
            try:
                lookup = await resolve_query(
                    repository_for(session, message.from_user.id), raw_query
                )
            except RobloxLookupError as exc:
                logger.info("Lookup for %r failed: %s", raw_query, exc)
                await message.answer(f"❌ {FETCH_ERROR_PREFIX}{escape(str(exc))}")
                return

    caption = render_profile(lookup)
    if lookup.thumbnail_url == get_settings().thumbnail_placeholder:
        await message.answer(caption)
        return

    await message.answer_photo(photo=lookup.thumbnail_url, caption=caption)
