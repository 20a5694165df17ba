import os

from dotenv import load_dotenv
from pydantic_settings import BaseSettings

# Загружаем .env
load_dotenv()


DEFAULT_DATABASE_URL = "sqlite+aiosqlite:///./roblox_lookup.db"


def get_env(name: str, default: str | None = None, *, required: bool = False) -> str:
    value = os.getenv(name, default)
    if required and (value is None or value == ""):
        raise RuntimeError(f"Environment variable {name} is required but not set")
    return value or ""


def get_bool_env(name: str, default: bool = False) -> bool:
    raw_value = get_env(name, "1" if default else "0").strip().lower()
    return raw_value in {"1", "true", "yes", "on"}


# === SETTINGS (для Alembic и DB) =====================================
class Settings(BaseSettings):
    DATABASE_URL: str = DEFAULT_DATABASE_URL
    DATABASE_SSL: bool = False

    class Config:
        env_file = ".env"
        extra = "ignore"


settings = Settings()


DATABASE_URL = settings.DATABASE_URL
DATABASE_SSL = settings.DATABASE_SSL

# === БОТ ==============================================================
# Токен нужен только при запуске бота, веб-приложение работает без него.
TOKEN = get_env("TELEGRAM_TOKEN")

BOT_LOGS_LIMIT = int(get_env("BOT_LOGS_LIMIT", "20"))

# === WEB ==============================================================
WEBAPP_HOST = get_env("WEBAPP_HOST", "0.0.0.0")
WEBAPP_PORT = int(os.getenv("PORT", "10000"))
