"""Factory for the aiogram bot instance."""

from aiogram import Bot
from aiogram.client.default import DefaultBotProperties
from aiogram.enums import ParseMode

from bot.config import TOKEN


def create_bot(token: str | None = None) -> Bot:
    token = token or TOKEN
    if not token:
        raise RuntimeError("Environment variable TELEGRAM_TOKEN is required but not set")
    return Bot(token=token, default=DefaultBotProperties(parse_mode=ParseMode.HTML))
