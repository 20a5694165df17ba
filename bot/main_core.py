import asyncio
import logging

from aiogram import Bot, Dispatcher
from aiogram.exceptions import TelegramConflictError
from aiogram.fsm.storage.memory import MemoryStorage

from bot.bot_instance import create_bot
from bot.db import init_db
from bot.handlers.user import routers as user_routers

logger = logging.getLogger(__name__)


def build_dispatcher() -> Dispatcher:
    dispatcher = Dispatcher(storage=MemoryStorage())

    for router in user_routers:
        dispatcher.include_router(router)

    return dispatcher


async def on_startup(bot: Bot) -> None:
    await init_db()
    await bot.delete_webhook(drop_pending_updates=True)
    logger.info("🤖 Bot started (polling)")


async def on_shutdown(bot: Bot) -> None:
    await bot.session.close()
    logger.info("🛑 Bot stopped")


async def start_bot() -> None:
    bot = create_bot()
    dispatcher = build_dispatcher()
    dispatcher.startup.register(on_startup)
    dispatcher.shutdown.register(on_shutdown)

    try:
        await dispatcher.start_polling(bot)
    except TelegramConflictError:
        logger.warning("⚠️ Polling conflict, waiting for the previous instance to exit...")
        await asyncio.sleep(5)
        await dispatcher.start_polling(bot)


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    asyncio.run(start_bot())


if __name__ == "__main__":
    main()
