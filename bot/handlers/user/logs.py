from __future__ import annotations

import logging

from aiogram import Router, types
from aiogram.filters import Command

from backend.services.lookup import list_queries
from bot.config import BOT_LOGS_LIMIT
from bot.db import async_session
from bot.services.profile_renderer import render_logs
from bot.services.query_log import repository_for

router = Router(name="user_logs")
logger = logging.getLogger(__name__)


@router.message(Command("logs"))
async def show_logs(message: types.Message):
    if not message.from_user:
        return

    async with async_session() as session:
        records = await list_queries(repository_for(session, message.from_user.id))

    shown = records[:BOT_LOGS_LIMIT]
    logger.info(
        "Showing %d of %d log records to %s", len(shown), len(records), message.from_user.id
    )
    await message.answer(render_logs(shown))
