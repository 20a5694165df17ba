"""Shared constants used by the database models and migrations."""

QUERY_LOGS_TABLE = "query_logs"
QUERY_OWNER_MAX_LENGTH = 64
TELEGRAM_OWNER_PREFIX = "tg:"

__all__ = [
    "QUERY_LOGS_TABLE",
    "QUERY_OWNER_MAX_LENGTH",
    "TELEGRAM_OWNER_PREFIX",
]
