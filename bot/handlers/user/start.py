import logging

from aiogram import Router, types
from aiogram.filters import Command, CommandStart

router = Router(name="user_start")
logger = logging.getLogger(__name__)

HELP_TEXT = (
    "👋 Send me a Roblox user ID, username or profile link and I will look up the profile.\n\n"
    "Examples:\n"
    "• <code>1</code>\n"
    "• <code>builderman</code>\n"
    "• <code>https://www.roblox.com/users/1/profile</code>\n\n"
    "/logs — your recent queries"
)


@router.message(CommandStart())
async def start_cmd(message: types.Message):
    if message.from_user:
        logger.info("User %s started the bot", message.from_user.id)
    await message.answer(HELP_TEXT)


@router.message(Command("help"))
async def help_cmd(message: types.Message):
    await message.answer(HELP_TEXT)
