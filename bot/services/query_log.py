"""Query log access for Telegram users."""
from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from backend.services.query_log import QueryLogRepository
from db.constants import TELEGRAM_OWNER_PREFIX


def telegram_owner(telegram_id: int) -> str:
    return f"{TELEGRAM_OWNER_PREFIX}{telegram_id}"


def repository_for(session: AsyncSession, telegram_id: int) -> QueryLogRepository:
    return QueryLogRepository(session, telegram_owner(telegram_id))


__all__ = ["repository_for", "telegram_owner"]
