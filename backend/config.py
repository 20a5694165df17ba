from __future__ import annotations

from functools import lru_cache

from bot.config import DATABASE_URL, get_env


class Settings:
    """Application settings resolved from environment variables."""

    database_url: str = DATABASE_URL
    roblox_users_api: str
    roblox_legacy_api: str
    roblox_thumbnails_api: str
    roblox_http_timeout: float
    thumbnail_size: str
    thumbnail_placeholder: str
    display_timezone: str
    client_cookie_name: str

    def __init__(self) -> None:
        self.roblox_users_api = get_env(
            "ROBLOX_USERS_API", "https://users.roblox.com"
        ).rstrip("/")
        self.roblox_legacy_api = get_env(
            "ROBLOX_LEGACY_API", "https://api.roblox.com"
        ).rstrip("/")
        self.roblox_thumbnails_api = get_env(
            "ROBLOX_THUMBNAILS_API", "https://thumbnails.roblox.com"
        ).rstrip("/")
        self.roblox_http_timeout = float(get_env("ROBLOX_HTTP_TIMEOUT", "10"))
        self.thumbnail_size = get_env("ROBLOX_THUMBNAIL_SIZE", "150x150")
        self.thumbnail_placeholder = get_env("THUMBNAIL_PLACEHOLDER", "placeholder.png")
        self.display_timezone = get_env("DISPLAY_TIMEZONE", "UTC")
        self.client_cookie_name = get_env("LOOKUP_CLIENT_COOKIE", "lookup_client")


@lru_cache()
def get_settings() -> Settings:
    return Settings()
